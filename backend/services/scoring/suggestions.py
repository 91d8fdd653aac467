"""Templated improvement suggestions derived from a category score."""

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import CategoryScore
from services.scoring.keyword_matcher import count_present

# Below this many requirement terms present, suggest raising keyword density
DENSITY_THRESHOLD = 10

LOW_SCORE_MESSAGE = (
    "Your resume has significant gaps. Focus on adding required skills and relevant experience."
)
MEDIUM_SCORE_MESSAGE = (
    "Your resume is decent but can be improved. "
    "Add missing keywords and highlight relevant experience."
)
GOOD_SCORE_MESSAGE = (
    "Good match! Consider adding a few more preferred skills to maximize your chances."
)
DENSITY_MESSAGE = (
    "Increase keyword density by naturally incorporating job-relevant terms "
    "throughout your resume."
)


def _plural(count: int, singular: str, plural: str) -> str:
    return plural if count > 1 else singular


def _band_message(ats_score: int) -> str | None:
    if ats_score < 50:
        return LOW_SCORE_MESSAGE
    if ats_score < 70:
        return MEDIUM_SCORE_MESSAGE
    if ats_score < 85:
        return GOOD_SCORE_MESSAGE
    return None


def suggest(
    candidate_text: str,
    requirements: RequirementSet,
    category_score: CategoryScore,
) -> list[str]:
    """Build the ordered suggestion list for one analysis."""
    suggestions: list[str] = []
    breakdown = category_score.breakdown

    missing = breakdown.required_skills.total - breakdown.required_skills.matched
    if missing > 0:
        suggestions.append(
            f"Add {missing} missing required {_plural(missing, 'skill', 'skills')} "
            "to your Skills section. This is critical for ATS matching."
        )

    missing = breakdown.preferred_skills.total - breakdown.preferred_skills.matched
    if missing > 0:
        suggestions.append(
            f"Consider adding {missing} preferred {_plural(missing, 'skill', 'skills')} "
            "to strengthen your profile."
        )

    missing = breakdown.tools.total - breakdown.tools.matched
    if missing > 0:
        suggestions.append(
            f"Add {missing} missing {_plural(missing, 'tool', 'tools')} or "
            f"{_plural(missing, 'technology', 'technologies')} to your Skills section."
        )

    if not breakdown.experience_level.matched:
        level = requirements.experience_level.value.lower()
        suggestions.append(
            "Highlight your experience level more clearly. "
            f"The job requires {level}-level experience."
        )

    band = _band_message(category_score.ats_score)
    if band is not None:
        suggestions.append(band)

    if count_present(requirements.all_terms, candidate_text) < DENSITY_THRESHOLD:
        suggestions.append(DENSITY_MESSAGE)

    return suggestions
