# tipaglyph/converter/document.py
"""
Markdown host adapter.

Applies the transducer to a whole Markdown document the way a note renderer
would: fenced ``tipa`` blocks are converted in block mode, other fenced code
is left alone, and every remaining line is converted in full mode.
"""

from __future__ import annotations

import html
import logging
import re
from typing import List

from .convert import (
    DEFAULT_CONFIG,
    TipaConfig,
    TipaReport,
    convert_block,
    convert_full,
)

__all__ = ["convert_markdown", "render_inline_html", "render_block_html"]

logger = logging.getLogger(__name__)

BLOCK_LANGUAGE = "tipa"

# Opening or closing code fence: ``` or ~~~, optional info string
RE_FENCE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*?)\s*$")


def _info_language(info: str) -> str:
    words = info.strip().split()
    return words[0].lower() if words else ""


def _closes(line: str, fence: str) -> bool:
    m = RE_FENCE.match(line)
    return bool(
        m
        and m.group("fence")[0] == fence[0]
        and len(m.group("fence")) >= len(fence)
        and not m.group("info").strip()
    )


def _line_ending(line: str) -> str:
    return line[len(line.rstrip("\r\n")) :]


def convert_markdown(
    text: str,
    config: TipaConfig | None = None,
    *,
    report: TipaReport | None = None,
) -> str:
    """
    Convert TIPA notation throughout a Markdown document.

    :param text: Markdown source.
    :param config: Settings; ``auto_convert=False`` limits conversion to
                   fenced ``tipa`` blocks.
    :param report: Optional report updated in place.
    :returns: Converted document.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    lines = text.splitlines(keepends=True)
    out: List[str] = []
    i = 0
    n = len(lines)

    while i < n:
        line = lines[i]
        m = RE_FENCE.match(line)
        if not m:
            if cfg.auto_convert:
                line = convert_full(line, cfg, report=report)
            out.append(line)
            i += 1
            continue

        fence = m.group("fence")
        end = i + 1
        while end < n and not _closes(lines[end], fence):
            end += 1
        if end >= n:
            # Unclosed fence: the rest of the document is code.
            out.extend(lines[i:])
            break

        if _info_language(m.group("info")) != BLOCK_LANGUAGE:
            out.extend(lines[i : end + 1])
        else:
            body = "".join(lines[i + 1 : end]).strip()
            newline = _line_ending(line) or "\n"
            out.append(f"{m.group('indent')}{fence}{newline}")
            if body:
                out.append(convert_block(body) + newline)
            out.append(lines[end])
        i = end + 1

    return "".join(out)


def _classes(*names: str) -> str:
    return " ".join(n for n in names if n)


def render_inline_html(text: str, config: TipaConfig | None = None) -> str:
    """
    Render a text fragment as an inline ``<span>``.

    Returns ``text`` unchanged when it holds no notation, so the host can keep
    its original node.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    converted = convert_full(text, cfg)
    if converted is text:
        return text
    cls = _classes(
        "tipa-inline",
        "tipa-phonetic-font" if cfg.use_custom_font else "",
        "tipa-styled" if cfg.inline_styling else "",
    )
    return f'<span class="{cls}">{html.escape(converted)}</span>'


def render_block_html(source: str, config: TipaConfig | None = None) -> str:
    """
    Render the content of a fenced ``tipa`` block as ``<pre><code>``.

    A failure while rendering is turned into an error element rather than
    propagated to the host.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    try:
        converted = convert_block(source.strip())
        cls = _classes(
            "tipa-block", "tipa-phonetic-font" if cfg.use_custom_font else ""
        )
        return f'<pre><code class="{cls}">{html.escape(converted)}</code></pre>'
    except Exception as exc:
        logger.exception("Error processing TIPA code block")
        return f'<div class="tipa-error">TIPA Error: {html.escape(str(exc))}</div>'
