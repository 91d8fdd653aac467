"""Shared test configuration and fixtures."""

import os

# Must run before config.settings is imported by any test module
os.environ["GEMINI_API_KEY"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402

from models.schemas.requirement_set import RequirementSet  # noqa: E402

SAMPLE_TEXT = "Experienced engineer skilled in Python and SQL."


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_requirements() -> RequirementSet:
    return RequirementSet(
        required=["Python", "SQL"],
        preferred=["Docker"],
        tools=[],
        experience_level="Mid",
        keywords=[],
    )
