"""Rule-based seniority detection from resume text."""

import re

from models.schemas.requirement_set import ExperienceLevel
from services.scoring.normalizer import normalize

SENIOR_WORDS = ("senior", "lead", "principal", "architect")
ENTRY_WORDS = ("junior", "entry", "intern", "fresher", "1 year")

# "5+" .. "10+" and "0-1", "0-2", "1+" as whole numbers, so "15+" or the
# "0-2" inside "2020-2023" do not count
SENIOR_NUMERALS = re.compile(r"(?<![\d-])(?:[5-9]|10)\+")
ENTRY_NUMERALS = re.compile(r"(?<!\d)(?:0-[12](?!\d)|1\+)")


def _has_cue(normalized: str, lowered: str, words, numerals: re.Pattern) -> bool:
    # Numeral cues carry "+" or "-", which normalization would erase
    return any(w in normalized for w in words) or numerals.search(lowered) is not None


def classify(text: str) -> ExperienceLevel:
    """Infer the candidate's level; the first matching rule wins."""
    normalized = normalize(text)
    lowered = (text or "").lower()
    if _has_cue(normalized, lowered, SENIOR_WORDS, SENIOR_NUMERALS):
        return ExperienceLevel.SENIOR
    if _has_cue(normalized, lowered, ENTRY_WORDS, ENTRY_NUMERALS):
        return ExperienceLevel.ENTRY
    return ExperienceLevel.MID


def level_satisfies(required: ExperienceLevel, candidate: ExperienceLevel) -> bool:
    """A candidate one tier below the requirement still satisfies it."""
    return candidate.rank >= required.rank - 1
