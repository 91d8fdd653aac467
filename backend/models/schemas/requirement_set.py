"""Job-side input: the structured requirement set a resume is scored against."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ExperienceLevel(str, Enum):
    ENTRY = "Entry"
    MID = "Mid"
    SENIOR = "Senior"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {
    ExperienceLevel.ENTRY: 1,
    ExperienceLevel.MID: 2,
    ExperienceLevel.SENIOR: 3,
}

# Older job records stored the two skill lists under these names
_LEGACY_KEYS = {
    "required": "requiredSkills",
    "preferred": "preferredSkills",
}


class RequirementSet(BaseModel):
    """Requirements extracted from a job posting.

    ``keywords`` holds general, unweighted terms (not skills). Only the
    first ten of them are reported as gaps.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    required: list[str] = []
    preferred: list[str] = []
    tools: list[str] = []
    experience_level: ExperienceLevel = ExperienceLevel.MID
    keywords: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_skill_keys(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key, legacy in _LEGACY_KEYS.items():
            legacy_value = data.pop(legacy, None)
            if data.get(key) is None and legacy_value is not None:
                data[key] = legacy_value
        return data

    @field_validator("required", "preferred", "tools", "keywords", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("experience_level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        if isinstance(value, ExperienceLevel):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for level in ExperienceLevel:
                if lowered.startswith(level.value.lower()):
                    return level
        # Unknown or missing levels are scored as mid-level
        return ExperienceLevel.MID

    @property
    def all_terms(self) -> list[str]:
        """Every scored term, in category order."""
        return [*self.required, *self.preferred, *self.tools, *self.keywords]
