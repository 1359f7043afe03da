from tipaglyph import (
    TipaConfig,
    convert_markdown,
    render_block_html,
    render_inline_html,
)
from tipaglyph.converter.convert import TipaReport


def _doc() -> str:
    return "\n".join(
        [
            "# Greetings",
            "",
            r"Say \tipa{D@} now, or \nt{h@\textprimstress{}loU}.",
            "",
            "```tipa",
            '"h@loU w3:ld',
            "```",
            "",
            "```python",
            r'x = "\tipa{A}"',
            "```",
            "",
        ]
    )


def test_markdown_converts_prose_and_tipa_blocks():
    out = convert_markdown(_doc())
    assert out == "\n".join(
        [
            "# Greetings",
            "",
            "Say ðə now, or [həˈloʊ].",
            "",
            "```",
            "ˈhəloʊ wɛːld",
            "```",
            "",
            "```python",
            r'x = "\tipa{A}"',
            "```",
            "",
        ]
    )


def test_markdown_without_auto_convert_only_touches_tipa_blocks():
    out = convert_markdown(_doc(), TipaConfig(auto_convert=False))
    assert r"Say \tipa{D@} now" in out
    assert "ˈhəloʊ wɛːld" in out


def test_markdown_unclosed_fence_is_left_verbatim():
    doc = "```tipa\n\"h@loU\nstill code\n"
    assert convert_markdown(doc) == doc


def test_markdown_tilde_fence_and_report():
    doc = "~~~ tipa extra\nD@\n~~~\n\\textfoo\n"
    report = TipaReport()
    out = convert_markdown(doc, report=report)
    assert out == "~~~\nðə\n~~~\n\\textfoo\n"
    assert report.unresolved_commands == [r"\textfoo"]


def test_render_inline_html_classes():
    assert (
        render_inline_html(r"\textschwa x")
        == '<span class="tipa-inline tipa-phonetic-font">ə x</span>'
    )
    cfg = TipaConfig(use_custom_font=False, inline_styling=True)
    assert (
        render_inline_html(r"\textschwa", cfg)
        == '<span class="tipa-inline tipa-styled">ə</span>'
    )


def test_render_inline_html_escapes_and_skips_plain_text():
    assert render_inline_html(r"\tipa{a}<b>") == (
        '<span class="tipa-inline tipa-phonetic-font">a&lt;b&gt;</span>'
    )
    plain = "no notation <here>"
    assert render_inline_html(plain) is plain


def test_render_block_html():
    assert (
        render_block_html(' "h@loU \n')
        == '<pre><code class="tipa-block tipa-phonetic-font">ˈhəloʊ</code></pre>'
    )


def test_render_block_html_reports_errors():
    out = render_block_html(None)
    assert out.startswith('<div class="tipa-error">TIPA Error: ')
