from tipaglyph.converter.lexer import (
    MATH_COMMAND,
    Command,
    Literal,
    brace_pairs,
    find_group_end,
    lex,
    source_text,
)


def test_literal_only():
    assert lex("plain text") == [Literal("plain text")]
    assert lex("") == []


def test_standalone_command_splits_literals():
    assert lex(r"x\textschwa y") == [
        Literal("x"),
        Command(name="textschwa", raw=r"\textschwa"),
        Literal(" y"),
    ]


def test_nested_groups_are_matched_by_depth():
    nodes = lex(r"\tipa{a\textbf{b{c}}d}!")
    assert len(nodes) == 2
    outer = nodes[0]
    assert outer.name == "tipa"
    assert outer.raw == r"\tipa{a\textbf{b{c}}d}"
    assert outer.argument == (
        Literal("a"),
        Command(name="textbf", argument=(Literal("b{c}"),), raw=r"\textbf{b{c}}"),
        Literal("d"),
    )
    assert nodes[1] == Literal("!")


def test_unterminated_group_keeps_rest_as_raw():
    nodes = lex(r"a\textsomething{x{y}")
    assert nodes == [
        Literal("a"),
        Command(name="textsomething", raw=r"\textsomething{x{y}", terminated=False),
    ]


def test_macro_consumes_exactly_one_letter():
    assert lex(r"\*rt") == [
        Command(name="*", argument=(Literal("r"),), raw=r"\*r"),
        Literal("t"),
    ]


def test_macro_without_letter():
    assert lex(r"\*5") == [Command(name="*", raw=r"\*"), Literal("5")]


def test_symbol_accent_forms():
    assert lex(r"\~a") == [Command(name="~", argument=(Literal("a"),), raw=r"\~a")]
    assert lex(r'\"{o}') == [
        Command(name='"', argument=(Literal("o"),), raw=r'\"{o}')
    ]
    assert lex(r"\~ a") == [Command(name="~", raw=r"\~"), Literal(" a")]


def test_letter_accent_before_ipa_vowel():
    assert lex("\\vɛ") == [Command(name="v", argument=(Literal("ɛ"),), raw="\\vɛ")]


def test_letter_accent_before_ascii_letter_is_one_name():
    assert lex(r"\va") == [Command(name="va", raw=r"\va")]


def test_backslash_fallbacks():
    assert lex("a\\") == [Literal("a"), Command(name="", raw="\\")]
    assert lex(r"\\") == [Command(name="\\", raw=r"\\")]
    assert lex(r"\$") == [Command(name="$", raw=r"\$")]


def test_inline_math_region():
    assert lex("x $ab$ y") == [
        Literal("x "),
        Command(name=MATH_COMMAND, argument=(Literal("ab"),), raw="$ab$"),
        Literal(" y"),
    ]
    assert lex("$5") == [Literal("$5")]
    assert lex("$$") == [Literal("$$")]


def test_find_group_end():
    assert find_group_end("{a{b}c}", 0) == 6
    assert find_group_end(r"{a\}b}", 0) == 5
    assert find_group_end("{ab", 0) == -1


def test_source_text_reassembles_input():
    s = r'pre \tipa{["s@m\textsubring{n}]} \*r $x$ post \~'
    assert source_text(tuple(lex(s))) == s


def test_brace_pairs():
    assert brace_pairs(r"{a{b}c}\{}") == {0: 6, 2: 4}
    assert brace_pairs("}{") == {}


def test_deep_nesting_is_lexed_without_recursion():
    depth = 1000
    nodes = lex("\\textbf{" * depth + "x" + "}" * depth)
    for _ in range(depth):
        assert len(nodes) == 1
        assert nodes[0].name == "textbf"
        nodes = nodes[0].argument
    assert nodes == (Literal("x"),)


def test_group_inside_math_cannot_close_past_it():
    nodes = lex(r"$\textbf{a$}")
    assert nodes == [
        Command(
            name=MATH_COMMAND,
            argument=(Command(name="textbf", raw=r"\textbf{a", terminated=False),),
            raw=r"$\textbf{a$",
        ),
        Literal("}"),
    ]
