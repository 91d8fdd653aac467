import pytest

from models.schemas.requirement_set import RequirementSet
from services.scoring.category_scorer import score
from services.scoring.suggestions import (
    DENSITY_MESSAGE,
    GOOD_SCORE_MESSAGE,
    LOW_SCORE_MESSAGE,
    MEDIUM_SCORE_MESSAGE,
    _band_message,
    suggest,
)


def _suggest(text, requirements):
    return suggest(text, requirements, score(text, requirements))


def test_sample_scenario(sample_text, sample_requirements):
    assert _suggest(sample_text, sample_requirements) == [
        "Consider adding 1 preferred skill to strengthen your profile.",
        GOOD_SCORE_MESSAGE,
        DENSITY_MESSAGE,
    ]


def test_required_skills_plural():
    tips = _suggest("Python", RequirementSet(required=["Rust", "Kotlin"]))
    assert tips[0] == (
        "Add 2 missing required skills to your Skills section. "
        "This is critical for ATS matching."
    )


def test_tools_singular_and_plural():
    one = _suggest("Python", RequirementSet(tools=["Terraform"]))
    assert one[0] == "Add 1 missing tool or technology to your Skills section."

    two = _suggest("Python", RequirementSet(tools=["Terraform", "Ansible"]))
    assert two[0] == "Add 2 missing tools or technologies to your Skills section."


def test_experience_suggestion_uses_lowercase_level():
    tips = _suggest("Junior developer", RequirementSet(experience_level="Senior"))
    assert tips[0] == (
        "Highlight your experience level more clearly. "
        "The job requires senior-level experience."
    )


@pytest.mark.parametrize("ats_score,expected", [
    (0, LOW_SCORE_MESSAGE),
    (49, LOW_SCORE_MESSAGE),
    (50, MEDIUM_SCORE_MESSAGE),
    (69, MEDIUM_SCORE_MESSAGE),
    (70, GOOD_SCORE_MESSAGE),
    (84, GOOD_SCORE_MESSAGE),
    (85, None),
    (100, None),
])
def test_band_message(ats_score, expected):
    assert _band_message(ats_score) == expected


def test_no_suggestions_for_dense_perfect_match():
    terms = ["python", "sql", "docker", "kubernetes", "aws",
             "react", "redis", "kafka", "terraform", "linux"]
    text = " ".join(terms)
    assert _suggest(text, RequirementSet(required=terms)) == []


def test_suggestions_are_deterministic(sample_text, sample_requirements):
    assert _suggest(sample_text, sample_requirements) == _suggest(sample_text, sample_requirements)
