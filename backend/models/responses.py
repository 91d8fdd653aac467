from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import ScoreReport


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False


class JobAnalysisResponse(_CamelResponse):
    requirements: RequirementSet
    report: ScoreReport


class SkillsResponse(_CamelResponse):
    skills: list[str] = []


class OptimizationResult(_CamelResponse):
    content: str
    changes_made: list[str] = []
    selected_keywords: list[str] = []
    original_ats_score: int
    final_ats_score: int
    improvement: int
