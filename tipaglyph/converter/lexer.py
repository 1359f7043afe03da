# tipaglyph/converter/lexer.py
"""
Lexer for the TIPA notation dialect.

The input string is scanned once, left to right, and turned into a flat
sequence of nodes. Brace groups are matched by depth, so an argument such as
``\\textipa{\\textsubring{n}@}`` keeps its nested command intact and is lexed
into its own node sequence.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from .mappings import DIACRITIC_BASES, DIACRITIC_MAP, IPA_VOWEL_BASES

__all__ = [
    "Literal",
    "Command",
    "Node",
    "lex",
    "find_group_end",
    "brace_pairs",
    "source_text",
    "CONTROL_SYMBOLS",
    "LETTER_DIACRITICS",
    "MATH_COMMAND",
]

logger = logging.getLogger(__name__)

# One-letter macro families: \*x \;X \:x \!x
CONTROL_SYMBOLS = frozenset("*;:!")

# Accent macros spelled with a symbol: \'a \`a \^a \"a \~a \=a \.a
DIACRITIC_SYMBOLS = frozenset(k for k in DIACRITIC_MAP if not k.isalpha())

# Accent macros spelled with a letter: \ua \ca \ka \ra \va
LETTER_DIACRITICS = frozenset(k for k in DIACRITIC_MAP if k.isalpha())

# Pseudo command name for an inline $...$ region
MATH_COMMAND = "$"


@dataclass(frozen=True)
class Literal:
    """Plain text between commands."""

    text: str


@dataclass(frozen=True)
class Command:
    """
    A backslash command as it appeared in the source.

    :param name: Command name without the backslash (``textschwa``, ``tone``,
                 ``*``, ``~``), or ``$`` for an inline math region.
    :param argument: Lexed argument (braced group, macro letter or accent
                     base), or ``None`` for a standalone command.
    :param raw: Exact source text of the command including its argument.
    :param terminated: ``False`` when an opening brace had no matching close;
                       ``raw`` then runs to the end of the input.
    """

    name: str
    argument: Optional[Tuple["Node", ...]] = None
    raw: str = ""
    terminated: bool = True


Node = Union[Literal, Command]


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def brace_pairs(s: str) -> Dict[int, int]:
    """
    Map the index of every matched ``{`` in ``s`` to the index of its ``}``.

    Escaped braces (``\\{``, ``\\}``) do not count towards the depth; unmatched
    braces are left out.
    """
    pairs: Dict[int, int] = {}
    open_at: List[int] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            open_at.append(i)
        elif ch == "}" and open_at:
            pairs[open_at.pop()] = i
        i += 1
    return pairs


def find_group_end(s: str, start: int) -> int:
    """
    Return the index of the ``}`` matching the ``{`` at ``s[start]``.

    :returns: Index of the closing brace, or -1 if the group is unterminated.
    """
    end = brace_pairs(s[start:]).get(0)
    return -1 if end is None else start + end


class _Group(NamedTuple):
    """A braced argument whose content still has to be lexed."""

    name: str
    cmd_start: int
    body_end: int


def _read_group(
    s: str, start: int, head: str, n: int, pairs: Dict[int, int]
) -> Tuple[Union[Command, _Group], int]:
    """
    Read the braced group opening at ``s[start]`` as the argument of ``head``.

    A group closing at or past ``n`` is unterminated: its command keeps the
    rest of the input up to ``n`` as raw text.
    """
    cmd_start = start - len(head) - 1
    end = pairs.get(start, -1)
    if end < 0 or end >= n:
        logger.debug("Unterminated group after \\%s at offset %d", head, cmd_start)
        return Command(name=head, raw=s[cmd_start:n], terminated=False), n
    return _Group(head, cmd_start, end), start + 1


def _lex_command(
    s: str, i: int, n: int, pairs: Dict[int, int]
) -> Tuple[Union[Command, _Group], int]:
    """
    Lex the command whose backslash sits at ``s[i]``, reading no further than
    ``n``.

    :returns: (command or open group, index to continue from).
    """
    j = i + 1
    if j >= n:
        return Command(name="", raw="\\"), n

    ch = s[j]

    # \*x \;X \:x \!x consume exactly one following letter
    if ch in CONTROL_SYMBOLS:
        if j + 1 < n and _is_ascii_letter(s[j + 1]):
            return (
                Command(name=ch, argument=(Literal(s[j + 1]),), raw=s[i : j + 2]),
                j + 2,
            )
        return Command(name=ch, raw=s[i : j + 1]), j + 1

    # \~a or \~{...}
    if ch in DIACRITIC_SYMBOLS:
        if j + 1 < n and s[j + 1] in DIACRITIC_BASES:
            return (
                Command(name=ch, argument=(Literal(s[j + 1]),), raw=s[i : j + 2]),
                j + 2,
            )
        if j + 1 < n and s[j + 1] == "{":
            return _read_group(s, j + 1, ch, n, pairs)
        return Command(name=ch, raw=s[i : j + 1]), j + 1

    if _is_ascii_letter(ch):
        k = j
        while k < n and _is_ascii_letter(s[k]):
            k += 1
        name = s[j:k]
        if k < n and s[k] == "{":
            return _read_group(s, k, name, n, pairs)
        # \və : letter accent followed by a non-ASCII vowel symbol
        if name in LETTER_DIACRITICS and k < n and s[k] in IPA_VOWEL_BASES:
            return (
                Command(name=name, argument=(Literal(s[k]),), raw=s[i : k + 1]),
                k + 1,
            )
        return Command(name=name, raw=s[i:k]), k

    # Anything else: backslash plus one character, kept as written
    return Command(name=ch, raw=s[i : j + 1]), j + 1


class _Frame:
    """An open group being filled while lexing."""

    __slots__ = ("group", "nodes", "buf")

    def __init__(self, group: Optional[_Group]) -> None:
        self.group = group
        self.nodes: List[Node] = []
        self.buf: List[str] = []

    def flush(self) -> None:
        if self.buf:
            self.nodes.append(Literal("".join(self.buf)))
            self.buf.clear()


def lex(s: str) -> List[Node]:
    """
    Split ``s`` into literal runs and commands.

    Open groups are kept on an explicit stack, so nesting depth is bounded
    only by the input. Never raises: malformed notation degrades into commands
    that resolve to their raw source text.

    :param s: Notation fragment.
    :returns: Ordered list of :class:`Literal` and :class:`Command` nodes.
    """
    pairs = brace_pairs(s)
    n = len(s)
    stack = [_Frame(None)]
    i = 0

    while True:
        frame = stack[-1]
        group = frame.group
        limit = n if group is None else group.body_end

        if i >= limit:
            frame.flush()
            if group is None:
                return frame.nodes
            stack.pop()
            raw_end = group.body_end + 1
            stack[-1].nodes.append(
                Command(
                    name=group.name,
                    argument=tuple(frame.nodes),
                    raw=s[group.cmd_start : raw_end],
                )
            )
            i = raw_end
            continue

        ch = s[i]
        if ch == "\\":
            frame.flush()
            item, i = _lex_command(s, i, limit, pairs)
            if isinstance(item, _Group):
                stack.append(_Frame(item))
            else:
                frame.nodes.append(item)
            continue
        if ch == "$":
            close = s.find("$", i + 1, limit)
            if close > i + 1:
                frame.flush()
                stack.append(_Frame(_Group(MATH_COMMAND, i, close)))
                i += 1
                continue
        frame.buf.append(ch)
        i += 1


def source_text(nodes: Optional[Tuple[Node, ...]]) -> str:
    """Reassemble the source text of a node sequence."""
    if not nodes:
        return ""
    return "".join(n.text if isinstance(n, Literal) else n.raw for n in nodes)
