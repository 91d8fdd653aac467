"""Weighted category scoring: the deterministic ATS score.

Each term category contributes ``match_ratio * 100 * weight``. A category
with no terms contributes its full weight, so a posting that lists no
tools never penalizes the candidate for tools.
"""

import logging

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import (
    Breakdown,
    CategoryResult,
    CategoryScore,
    ExperienceResult,
    MatchDetail,
    MatchDetails,
)
from services.scoring import experience_classifier
from services.scoring.keyword_matcher import contains_keyword
from services.scoring.normalizer import normalize, round_half_up

logger = logging.getLogger(__name__)

W_REQUIRED = 0.40
W_PREFERRED = 0.25
W_TOOLS = 0.20
W_KEYWORDS = 0.10
W_EXPERIENCE = 0.05


def _score_terms(terms: list[str], normalized_text: str, weight: float) -> CategoryResult:
    matched = sum(1 for term in terms if contains_keyword(term, normalized_text))
    total = len(terms)
    percentage = round_half_up(100 * matched / total) if total else 100
    return CategoryResult(matched=matched, total=total, percentage=percentage, weight=weight)


def _contribution(result: CategoryResult) -> float:
    if result.total == 0:
        return 100 * result.weight
    return (result.matched / result.total) * 100 * result.weight


def _detail(result: CategoryResult) -> MatchDetail:
    return MatchDetail(matched=result.matched, total=result.total, percentage=result.percentage)


def score(candidate_text: str, requirements: RequirementSet) -> CategoryScore:
    """Compute the weighted ATS score and the per-category breakdown."""
    normalized = normalize(candidate_text)

    required = _score_terms(requirements.required, normalized, W_REQUIRED)
    preferred = _score_terms(requirements.preferred, normalized, W_PREFERRED)
    tools = _score_terms(requirements.tools, normalized, W_TOOLS)
    keywords = _score_terms(requirements.keywords, normalized, W_KEYWORDS)

    detected = experience_classifier.classify(candidate_text)
    experience = ExperienceResult(
        matched=experience_classifier.level_satisfies(requirements.experience_level, detected),
        weight=W_EXPERIENCE,
        required=requirements.experience_level,
        detected=detected,
    )

    raw = sum(_contribution(r) for r in (required, preferred, tools, keywords))
    raw += (100 if experience.matched else 0) * experience.weight
    ats_score = round_half_up(min(100, max(0, raw)))
    logger.debug("Category score %.2f (detected level %s)", raw, detected.value)

    return CategoryScore(
        ats_score=ats_score,
        breakdown=Breakdown(
            required_skills=required,
            preferred_skills=preferred,
            tools=tools,
            keywords=keywords,
            experience_level=experience,
        ),
        match_details=MatchDetails(
            required_skills=_detail(required),
            preferred_skills=_detail(preferred),
            tools=_detail(tools),
            keywords=_detail(keywords),
        ),
    )
