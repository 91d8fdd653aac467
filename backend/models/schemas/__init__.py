"""Pydantic contracts shared by the scoring engine and the API."""

from models.schemas.requirement_set import ExperienceLevel, RequirementSet
from models.schemas.score_report import (
    Breakdown,
    CategoryResult,
    CategoryScore,
    ExperienceResult,
    GapCategory,
    GapItem,
    MatchDetail,
    MatchDetails,
    ScoreReport,
    ScoringMethod,
    SuggestedSection,
)

__all__ = [
    "Breakdown",
    "CategoryResult",
    "CategoryScore",
    "ExperienceLevel",
    "ExperienceResult",
    "GapCategory",
    "GapItem",
    "MatchDetail",
    "MatchDetails",
    "RequirementSet",
    "ScoreReport",
    "ScoringMethod",
    "SuggestedSection",
]
