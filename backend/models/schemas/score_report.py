"""Engine output: the ATS score report and its parts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.schemas.requirement_set import ExperienceLevel


class GapCategory(str, Enum):
    TECHNICAL_SKILLS = "Technical Skills"
    SOFT_SKILLS = "Soft Skills"
    TOOLS_TECHNOLOGIES = "Tools/Technologies"
    CERTIFICATIONS = "Certifications"
    EXPERIENCE_KEYWORDS = "Experience Keywords"


class SuggestedSection(str, Enum):
    SKILLS = "Skills"
    EXPERIENCE = "Experience"
    EDUCATION = "Education"
    SUMMARY = "Summary"


class ScoringMethod(str, Enum):
    ALGORITHMIC = "algorithmic"
    HYBRID = "hybrid"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchDetail(_WireModel):
    matched: int = 0
    total: int = 0
    percentage: int = 100


class CategoryResult(MatchDetail):
    """Matched/total counts for one term category plus its score weight."""
    weight: float


class ExperienceResult(_WireModel):
    matched: bool
    weight: float
    required: ExperienceLevel = ExperienceLevel.MID
    detected: ExperienceLevel = ExperienceLevel.MID


class Breakdown(_WireModel):
    required_skills: CategoryResult
    preferred_skills: CategoryResult
    tools: CategoryResult
    keywords: CategoryResult
    experience_level: ExperienceResult


class MatchDetails(_WireModel):
    required_skills: MatchDetail
    preferred_skills: MatchDetail
    tools: MatchDetail
    keywords: MatchDetail


class GapItem(_WireModel):
    """A requirement term the resume does not contain."""
    model_config = ConfigDict(frozen=True)

    keyword: str = Field(min_length=1)
    category: GapCategory
    importance: int = Field(ge=1, le=10)
    suggested_section: SuggestedSection


class CategoryScore(_WireModel):
    """Output of the category scorer, before gaps and suggestions exist."""
    ats_score: int
    breakdown: Breakdown
    match_details: MatchDetails


class ScoreReport(CategoryScore):
    match_percentage: int = 0
    missing_keywords: list[GapItem] = []
    suggestions: list[str] = []
    scoring_method: ScoringMethod = ScoringMethod.ALGORITHMIC
