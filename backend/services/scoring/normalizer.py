"""Text normalization shared by every scoring stage."""

import re

_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace."""
    if not text:
        return ""
    text = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (``round`` is banker's)."""
    return int(value + 0.5)
