# tipaglyph/converter/convert.py
"""
TIPA notation to Unicode IPA.

The lexer produces a node sequence; the transducer walks it once and resolves
each command by class. Classes are tried in a fixed order, which is also the
order in which a multi-pass rewrite would have to run to avoid re-reading its
own output:

1. tone contours          ``\\tone{35}``
2. one-letter macros      ``\\*r \\;B \\:t \\!b``  (skipped in safe mode)
3. text commands + group  ``\\textsubring{n}``
4. bare text commands     ``\\textschwa``
5. accent macros          ``\\~a \\"{o} \\va``
6. shortcut characters    ``@ N " 3`` (literal text inside transcriptions)
7. superscripts           ``\\super{h}``

Transcription regions (``\\tipa{}``, ``\\textipa{}``, ``\\nt{}``, ``\\wt{}`` and
``$...$``) switch on step 6 for their content. Outside them only commands are
resolved, so ordinary prose is returned untouched.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Literal,
    Mapping,
    NamedTuple,
    Tuple,
    Union,
)

from . import lexer
from .ancillary import resolve_tone, to_superscript
from .lexer import LETTER_DIACRITICS
from .mappings import (
    BLOCK_TRANSLATE_MAP,
    DIACRITIC_MAP,
    LONG_FORM_MAP,
    MACRO_TABLES,
    SHORTCUT_TRANSLATE_MAP,
    TONE_MAP,
    WRAPPER_COMMANDS,
)

__all__ = [
    "tipa",
    "convert_full",
    "convert_block",
    "convert_text",
    "convert_lines",
    "TipaConfig",
    "TipaReport",
    "DEFAULT_CONFIG",
]

logger = logging.getLogger(__name__)

Mode = Literal["full", "block"]
ReportMode = Literal[False, True]

TEXT_PREFIX = "text"
SMALLCAP_MACRO = ";"

# Persisted setting keys used by the editor plugin
_SETTING_ALIASES = {
    "enableSafeMode": "safe_mode",
    "autoConvert": "auto_convert",
    "useCustomFont": "use_custom_font",
    "inlineStyling": "inline_styling",
}


# ---------------------------------------------------------------------------
# Configuration & report
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TipaConfig:
    """
    Conversion settings.

    :param safe_mode: Leave the ``\\* \\; \\: \\!`` macro families unresolved.
    :param auto_convert: Convert prose in documents (fenced ``tipa`` blocks
                         are always converted).
    :param use_custom_font: Add the phonetic font class to rendered HTML.
    :param inline_styling: Add the styled class to rendered inline spans.
    """

    safe_mode: bool = False
    auto_convert: bool = True
    use_custom_font: bool = True
    inline_styling: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TipaConfig":
        """
        Merge stored settings over the defaults. Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = _SETTING_ALIASES.get(key, key)
            if name in known:
                values[name] = bool(value)
        return cls(**values)

    @classmethod
    def from_json(cls, path: str | Path) -> "TipaConfig":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path}: settings must be a JSON object")
        return cls.from_mapping(data)


DEFAULT_CONFIG = TipaConfig()


@dataclass
class TipaReport:
    """
    Execution report for a conversion run.

    :param input_len: Length of the input string.
    :param output_len: Length of the converted string.
    :param changed: Whether any notation was converted.
    :param resolved_commands: Commands replaced by IPA glyphs.
    :param unresolved_commands: Raw text of commands left as written (or
                                reduced to their bare letter), in input order.
    :param tone_fallbacks: Tone codes synthesized from tone bars.
    :param unterminated_groups: Commands whose brace group never closed.
    """

    input_len: int = 0
    output_len: int = 0
    changed: bool = False
    safe_mode: bool = False
    resolved_commands: int = 0
    tone_fallbacks: int = 0
    unterminated_groups: int = 0
    unresolved_commands: List[str] = field(default_factory=list)

    def to_jsonl(self, path: str | Path) -> None:
        """
        Export unresolved commands as JSONL, one object per occurrence.
        """
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            for idx, raw in enumerate(self.unresolved_commands):
                f.write(json.dumps({"index": idx, "raw": raw}, ensure_ascii=False))
                f.write("\n")

    def summary(self) -> dict:
        data = asdict(self)
        data["unresolved_count"] = len(self.unresolved_commands)
        return data


# ---------------------------------------------------------------------------
# Transducer
# ---------------------------------------------------------------------------


class _Descend(NamedTuple):
    """An argument to resolve before ``finish`` builds the command's output."""

    nodes: Tuple[lexer.Node, ...]
    transcription: bool
    finish: Callable[[str], str]


class _Transducer:
    """
    State of a single conversion call.

    Configuration is read once here, so a settings change between calls never
    splits one conversion into two behaviours.
    """

    def __init__(self, config: TipaConfig, report: TipaReport) -> None:
        self.safe_mode = config.safe_mode
        self.report = report

    def resolve(self, nodes: Iterable[lexer.Node], *, transcription: bool) -> str:
        # Arguments are resolved on an explicit stack: (nodes, parts, context,
        # finish). Nesting depth is bounded only by the input.
        root: List[str] = []
        stack = [(iter(nodes), root, transcription, None)]
        while stack:
            it, parts, ctx, finish = stack[-1]
            node = next(it, None)
            if node is None:
                stack.pop()
                if finish is not None:
                    stack[-1][1].append(finish("".join(parts)))
                continue
            if isinstance(node, lexer.Literal):
                parts.append(self._literal(node.text, ctx))
                continue
            step = self._command(node, ctx)
            if isinstance(step, _Descend):
                stack.append((iter(step.nodes), [], step.transcription, step.finish))
            else:
                parts.append(step)
        return "".join(root)

    @staticmethod
    def _literal(text: str, transcription: bool) -> str:
        if not transcription:
            return text
        return text.translate(SHORTCUT_TRANSLATE_MAP)

    def _resolved(self, value: str) -> str:
        self.report.resolved_commands += 1
        return value

    def _miss(self, cmd: lexer.Command) -> None:
        logger.debug("No substitution for %r", cmd.raw)
        self.report.unresolved_commands.append(cmd.raw)

    def _verbatim(self, cmd: lexer.Command) -> str:
        self._miss(cmd)
        return cmd.raw

    def _command(
        self, cmd: lexer.Command, transcription: bool
    ) -> Union[str, _Descend]:
        if not cmd.terminated:
            self.report.unterminated_groups += 1
            return self._verbatim(cmd)

        name, arg = cmd.name, cmd.argument

        if name == lexer.MATH_COMMAND and arg is not None:
            return _Descend(arg, True, self._resolved)
        if name in WRAPPER_COMMANDS and arg is not None:
            head, tail = WRAPPER_COMMANDS[name]
            return _Descend(arg, True, lambda s: self._resolved(head + s + tail))

        if name == "tone" and arg is not None:
            return self._resolved(self._tone(arg))
        if name in MACRO_TABLES and arg is not None:
            return self._macro(cmd, transcription)
        if name.startswith(TEXT_PREFIX) and len(name) > len(TEXT_PREFIX):
            return self._text_command(cmd, transcription)
        accented = self._diacritic(cmd, transcription)
        if accented is not None:
            return accented
        if name == "super" and arg is not None:
            return _Descend(
                arg, transcription, lambda s: self._resolved(to_superscript(s))
            )

        return self._verbatim(cmd)

    def _tone(self, arg: Tuple[lexer.Node, ...]) -> str:
        digits = lexer.source_text(arg)
        if digits not in TONE_MAP:
            self.report.tone_fallbacks += 1
        return resolve_tone(digits)

    def _macro(self, cmd: lexer.Command, transcription: bool) -> str:
        letter = lexer.source_text(cmd.argument)
        if self.safe_mode:
            return self._literal(letter, transcription)
        hit = MACRO_TABLES[cmd.name].get(letter)
        if hit is not None:
            return self._resolved(hit)
        self._miss(cmd)
        if cmd.name == SMALLCAP_MACRO:
            letter = letter.lower()
        return self._literal(letter, transcription)

    def _text_command(
        self, cmd: lexer.Command, transcription: bool
    ) -> Union[str, _Descend]:
        hit = LONG_FORM_MAP.get(cmd.name)
        if hit is not None:
            # The table entry replaces the whole construct, argument included.
            return self._resolved(hit)
        if cmd.argument is None:
            return self._verbatim(cmd)
        self._miss(cmd)
        return _Descend(cmd.argument, transcription, lambda s: s)

    def _diacritic(
        self, cmd: lexer.Command, transcription: bool
    ) -> Union[str, _Descend, None]:
        name, arg = cmd.name, cmd.argument
        # \ua : letter accent glued to its base by the lexer
        if arg is None and len(name) == 2 and name[0] in LETTER_DIACRITICS:
            base = self._literal(name[1], transcription)
            return self._resolved(base + DIACRITIC_MAP[name[0]])
        if arg is None or name not in DIACRITIC_MAP:
            return None
        mark = DIACRITIC_MAP[name]
        return _Descend(arg, transcription, lambda s: self._resolved(s + mark))


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def convert_full(
    text: str,
    config: TipaConfig | None = None,
    *,
    report: TipaReport | None = None,
) -> str:
    """
    Convert every notation item in a text fragment.

    Commands are resolved anywhere in ``text``; shortcut characters only inside
    transcription regions. The input object itself is returned when nothing
    was converted, so callers can test ``out is text`` to skip restyling.

    :param text: Prose with embedded TIPA notation.
    :param config: Settings; :data:`DEFAULT_CONFIG` when omitted.
    :param report: Optional report updated in place.
    :returns: Converted text.
    """
    if "\\" not in text and "$" not in text:
        return text
    cfg = config if config is not None else DEFAULT_CONFIG
    rep = report if report is not None else TipaReport(safe_mode=cfg.safe_mode)
    out = _Transducer(cfg, rep).resolve(lexer.lex(text), transcription=False)
    return text if out == text else out


def convert_block(text: str) -> str:
    """
    Convert a block whose whole content is shortcut notation.

    Only the shortcut characters and the two stress marks are substituted;
    backslash commands are not interpreted.
    """
    return text.translate(BLOCK_TRANSLATE_MAP)


def convert_text(
    text: str,
    *,
    mode: Mode = "full",
    config: TipaConfig | None = None,
    safe_mode: bool | None = None,
) -> Tuple[str, TipaReport]:
    """
    Convert ``text`` and always return ``(text, report)``.

    :param mode: ``"full"`` for prose with embedded notation, ``"block"`` for
                 terse shortcut-only blocks.
    :param safe_mode: Overrides ``config.safe_mode`` when given.
    """
    if mode not in ("full", "block"):
        raise ValueError(f"unknown conversion mode: {mode!r}")
    cfg = config if config is not None else DEFAULT_CONFIG
    if safe_mode is not None:
        cfg = replace(cfg, safe_mode=safe_mode)

    rep = TipaReport(input_len=len(text), safe_mode=cfg.safe_mode)
    if not text:
        return text, rep

    if mode == "block":
        out = convert_block(text)
    else:
        out = convert_full(text, cfg, report=rep)

    rep.output_len = len(out)
    rep.changed = out != text
    return out, rep


def tipa(
    text: str,
    *,
    mode: Mode = "full",
    safe_mode: bool | None = None,
    config: TipaConfig | None = None,
    report: ReportMode = False,
) -> Union[str, Tuple[str, TipaReport]]:
    """
    One-shot entrypoint.

    - report=False -> returns str
    - report=True  -> returns (str, TipaReport)
    """
    out, rep = convert_text(
        text,
        mode=mode,
        config=config,
        safe_mode=safe_mode,
    )
    return (out, rep) if report else out


def convert_lines(lines: Iterable[str], **kwargs: Any) -> List[str]:
    """
    Convert an iterable of strings with :func:`tipa`.

    :param kwargs: Forwarded to :func:`tipa`.
    """
    out: List[str] = []
    for x in lines:
        res = tipa(x, **kwargs)
        out.append(res if isinstance(res, str) else res[0])
    return out
