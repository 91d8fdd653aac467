"""Keyword presence detection with a fixed set of lexical variants.

Matching is plain substring containment on normalized text, widened by a
handful of punctuation variants so that "Node.js" finds "nodejs" and
"CI-CD" finds "ci cd". It is not a stemmer: "java" also matches inside
"javascript", and unanticipated spellings are missed.
"""

import re

from services.scoring.normalizer import normalize

_DOT_DASH_RE = re.compile(r"[.-]")

# Shorter prefix variants are dropped
MIN_PREFIX_LENGTH = 2


def keyword_variants(term: str) -> list[str]:
    """Normalized spellings of ``term`` tried after the exact form misses.

    Variants are derived from the lower-cased term, since normalizing first
    would strip the dots and hyphens they are built from.
    """
    base = " ".join(term.lower().split())
    candidates = [
        base,
        _DOT_DASH_RE.sub("", base),
        _DOT_DASH_RE.sub(" ", base),
    ]
    for separator in ".-":
        if separator in base:
            prefix = normalize(base.split(separator, 1)[0])
            # "e-commerce" -> "e" would match nearly any text
            if len(prefix) >= MIN_PREFIX_LENGTH:
                candidates.append(prefix)
    if base.endswith(".js"):
        stem = base[:-3]
        candidates.append(stem)
        candidates.append(stem + "js")

    variants: list[str] = []
    for candidate in candidates:
        normalized = normalize(candidate)
        # Empty variants would match anything
        if normalized and normalized not in variants:
            variants.append(normalized)
    return variants


def contains_keyword(term: str, normalized_text: str) -> bool:
    """Like :func:`exists` but for a haystack that is already normalized."""
    normalized_term = normalize(term)
    if normalized_term in normalized_text:
        return True
    return any(variant in normalized_text for variant in keyword_variants(term))


def exists(term: str, text: str) -> bool:
    """Return True if ``term`` or one of its variants occurs in ``text``."""
    return contains_keyword(term, normalize(text))


def count_present(terms: list[str], text: str) -> int:
    """Number of entries in ``terms`` found in ``text`` (duplicates count)."""
    normalized_text = normalize(text)
    return sum(1 for term in terms if contains_keyword(term, normalized_text))
