"""Job description -> RequirementSet, via Gemini with a local fallback."""

import logging

from pydantic import ValidationError

from models.schemas.requirement_set import ExperienceLevel, RequirementSet
from services import gemini_client, prompt_builder
from services.scoring.normalizer import normalize
from services.skill_extractor import CORE_SKILLS, TOOL_SKILLS, find_known_skills

logger = logging.getLogger(__name__)


def fallback_requirements(job_description: str) -> RequirementSet:
    """Vocabulary-based extraction used when Gemini is unavailable."""
    words = normalize(job_description)
    if "senior" in words:
        level = ExperienceLevel.SENIOR
    elif "junior" in words or "entry" in words:
        level = ExperienceLevel.ENTRY
    else:
        level = ExperienceLevel.MID

    return RequirementSet(
        required=find_known_skills(job_description, CORE_SKILLS),
        tools=find_known_skills(job_description, TOOL_SKILLS),
        experience_level=level,
    )


async def extract_requirements(job_description: str) -> RequirementSet:
    """Extract a structured requirement set from raw job description text."""
    data = await gemini_client.generate_json(
        prompt_builder.build_requirements_prompt(job_description)
    )
    if data is None:
        logger.warning("Gemini requirement extraction unavailable, using vocabulary fallback")
        return fallback_requirements(job_description)

    try:
        return RequirementSet.model_validate(data)
    except ValidationError as e:
        logger.error("Gemini returned malformed requirements: %s", e)
        return fallback_requirements(job_description)
