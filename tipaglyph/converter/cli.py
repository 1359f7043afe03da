# tipaglyph/converter/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from .convert import DEFAULT_CONFIG, TipaConfig, TipaReport, convert_text
from .document import convert_markdown

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tipaglyph",
        description="Convert TIPA notation to Unicode IPA.",
    )
    parser.add_argument(
        "infile",
        nargs="?",
        type=Path,
        help="Input file (UTF-8). Reads stdin when omitted.",
    )
    parser.add_argument(
        "--mode",
        choices=("full", "block", "markdown"),
        default="full",
        help="full: prose with embedded notation; block: shortcut-only "
        "transcription; markdown: whole document with fenced tipa blocks.",
    )
    parser.add_argument(
        "--safe-mode",
        action="store_true",
        help=r"Leave the \* \; \: \! macros unresolved.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON settings file (safe_mode, auto_convert, ...).",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a JSON conversion report to stderr.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: List[str] | None = None) -> None:
    """
    CLI entrypoint.

    Usage::

        tipaglyph < notes.txt > notes.ipa.txt
        tipaglyph --mode markdown notes.md

    :param argv: Optional argument list (defaults to ``sys.argv[1:]``).
    :returns: None.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config: TipaConfig = DEFAULT_CONFIG
    try:
        if args.config is not None:
            config = TipaConfig.from_json(args.config)
        data = (
            args.infile.read_text(encoding="utf-8")
            if args.infile is not None
            else sys.stdin.read()
        )
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if args.safe_mode:
        config = replace(config, safe_mode=True)

    if args.mode == "markdown":
        rep = TipaReport(input_len=len(data), safe_mode=config.safe_mode)
        out = convert_markdown(data, config, report=rep)
        rep.output_len = len(out)
        rep.changed = out != data
    else:
        out, rep = convert_text(data, mode=args.mode, config=config)

    sys.stdout.write(out)
    if args.report:
        sys.stderr.write(json.dumps(rep.summary(), ensure_ascii=False) + "\n")


if __name__ == "__main__":
    main()
