from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from config import settings
from models.schemas.requirement_set import RequirementSet

MAX_CANDIDATE_CHARS = settings.max_candidate_chars
MAX_JOB_DESCRIPTION_CHARS = settings.max_job_description_chars


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(_CamelRequest):
    candidate_text: str = Field(..., max_length=MAX_CANDIDATE_CHARS, description="Plain text resume content")
    requirements: RequirementSet


class AnalyzeJobRequest(_CamelRequest):
    candidate_text: str = Field(..., max_length=MAX_CANDIDATE_CHARS, description="Plain text resume content")
    job_description: str = Field(..., min_length=1, max_length=MAX_JOB_DESCRIPTION_CHARS, description="Job description text")


class ExtractRequirementsRequest(_CamelRequest):
    job_description: str = Field(..., min_length=1, max_length=MAX_JOB_DESCRIPTION_CHARS)


class ExtractSkillsRequest(_CamelRequest):
    candidate_text: str = Field(..., max_length=MAX_CANDIDATE_CHARS)


class OptimizeRequest(_CamelRequest):
    candidate_text: str = Field(..., min_length=1, max_length=MAX_CANDIDATE_CHARS)
    selected_keywords: list[str] = Field(..., min_length=1)
    optimization_level: Literal["aggressive", "balanced", "conservative"] = "balanced"
    requirements: RequirementSet
