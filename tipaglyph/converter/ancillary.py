# tipaglyph/converter/ancillary.py
from __future__ import annotations

import logging

from .mappings import SUPERSCRIPT_TRANSLATE_MAP, TONE_BARS, TONE_MAP

__all__ = ["resolve_tone", "tone_letters", "to_superscript"]

logger = logging.getLogger(__name__)

# Brackets around contour codes that cannot be drawn with tone bars
TONE_FALLBACK_OPEN = "⁽"
TONE_FALLBACK_CLOSE = "⁾"


def tone_letters(digits: str) -> str:
    """
    Build a tone contour from pitch digits, one tone bar per digit.

    ``"14"`` gives extra-low followed by high. Empty input, or any character
    outside ``1``-``5``, yields the digits in superscript parentheses instead.

    :param digits: Contour code as written inside ``\\tone{...}``.
    :returns: Tone bar string, never empty.
    """
    if digits and all(d in TONE_BARS for d in digits):
        return "".join(TONE_BARS[d] for d in digits)
    logger.debug("Tone code %r cannot be drawn with tone bars", digits)
    return f"{TONE_FALLBACK_OPEN}{digits}{TONE_FALLBACK_CLOSE}"


def resolve_tone(digits: str) -> str:
    """Look up a canonical contour code, synthesizing it when absent."""
    hit = TONE_MAP.get(digits)
    if hit is not None:
        return hit
    return tone_letters(digits)


def to_superscript(text: str) -> str:
    """
    Map each code point to its superscript form.

    Characters without one (``q``, uppercase letters, IPA symbols) are kept.
    """
    return text.translate(SUPERSCRIPT_TRANSLATE_MAP)
