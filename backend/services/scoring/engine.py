"""Deterministic ATS analysis: score, gaps and suggestions in one report.

Every function here is pure. Nothing is cached between calls, so the
engine can be used from any number of threads or requests at once.
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import ScoreReport
from services.scoring import category_scorer, gap_analyzer, suggestions
from services.scoring.errors import InvalidInputError
from services.scoring.normalizer import round_half_up

logger = logging.getLogger(__name__)


def coerce_requirements(requirements: RequirementSet | Mapping | None) -> RequirementSet:
    """Validate caller input into a :class:`RequirementSet`."""
    if requirements is None:
        raise InvalidInputError("Requirement set is missing")
    if isinstance(requirements, RequirementSet):
        return requirements
    if not isinstance(requirements, Mapping):
        raise InvalidInputError(
            f"Requirement set must be a mapping, got {type(requirements).__name__}"
        )
    try:
        return RequirementSet.model_validate(dict(requirements))
    except ValidationError as e:
        raise InvalidInputError(f"Malformed requirement set: {e}") from e


def analyze(candidate_text: str, requirements: RequirementSet | Mapping | None) -> ScoreReport:
    """Score ``candidate_text`` against ``requirements``.

    Empty text and empty requirement lists are valid input. Raises
    :class:`InvalidInputError` when the text is not a string or the
    requirement set is missing or malformed.
    """
    if not isinstance(candidate_text, str):
        raise InvalidInputError(
            f"Candidate text must be a string, got {type(candidate_text).__name__}"
        )
    requirements = coerce_requirements(requirements)

    category_score = category_scorer.score(candidate_text, requirements)
    missing = gap_analyzer.find_gaps(candidate_text, requirements)
    tips = suggestions.suggest(candidate_text, requirements, category_score)

    total_terms = len(requirements.all_terms)
    match_percentage = (
        round_half_up(100 * (total_terms - len(missing)) / total_terms) if total_terms else 0
    )
    logger.debug(
        "ATS analysis: score=%d match=%d%% gaps=%d",
        category_score.ats_score, match_percentage, len(missing),
    )

    return ScoreReport(
        ats_score=category_score.ats_score,
        breakdown=category_score.breakdown,
        match_details=category_score.match_details,
        match_percentage=match_percentage,
        missing_keywords=missing,
        suggestions=tips,
    )
