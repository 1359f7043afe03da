"""tipaglyph: TIPA (LaTeX phonetic notation) to Unicode IPA."""

from .converter import (
    DEFAULT_CONFIG,
    TipaConfig,
    TipaReport,
    convert_block,
    convert_full,
    convert_lines,
    convert_markdown,
    convert_text,
    render_block_html,
    render_inline_html,
    tipa,
    to_superscript,
    tone_letters,
)

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
    "TipaConfig",
    "TipaReport",
    "DEFAULT_CONFIG",
]

__version__ = "0.1.0"
