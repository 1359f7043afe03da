from .ancillary import to_superscript, tone_letters
from .convert import (
    DEFAULT_CONFIG,
    TipaConfig,
    TipaReport,
    convert_block,
    convert_full,
    convert_lines,
    convert_text,
    tipa,
)
from .document import convert_markdown, render_block_html, render_inline_html
from .lexer import Command, Literal, lex

__all__ = [
    "tipa",
    "convert_full",
    "convert_block",
    "convert_text",
    "convert_lines",
    "convert_markdown",
    "render_inline_html",
    "render_block_html",
    "to_superscript",
    "tone_letters",
    "lex",
    "Literal",
    "Command",
    "TipaConfig",
    "TipaReport",
    "DEFAULT_CONFIG",
]
