import pytest

from models.schemas.requirement_set import ExperienceLevel
from services import gemini_client, requirement_extractor
from services.requirement_extractor import fallback_requirements

SAMPLE_JD = (
    "Senior Python developer with Docker, Kubernetes and PostgreSQL. "
    "Nice to have React."
)


def _fake_generate_json(result):
    async def fake(prompt):
        return result
    return fake


def test_fallback_requirements():
    requirements = fallback_requirements(SAMPLE_JD)
    assert requirements.required == ["python", "react"]
    assert requirements.tools == ["docker", "kubernetes", "postgresql"]
    assert requirements.experience_level == ExperienceLevel.SENIOR


@pytest.mark.parametrize("jd,level", [
    ("Junior frontend role", ExperienceLevel.ENTRY),
    ("Entry level analyst", ExperienceLevel.ENTRY),
    ("Backend engineer", ExperienceLevel.MID),
])
def test_fallback_experience_level(jd, level):
    assert fallback_requirements(jd).experience_level == level


@pytest.mark.asyncio
async def test_extract_uses_gemini_output(monkeypatch):
    monkeypatch.setattr(gemini_client, "generate_json", _fake_generate_json({
        "requiredSkills": ["Python"],
        "preferredSkills": ["Go"],
        "tools": ["Docker"],
        "experienceLevel": "Senior",
        "keywords": ["scalable systems"],
    }))
    requirements = await requirement_extractor.extract_requirements(SAMPLE_JD)
    assert requirements.required == ["Python"]
    assert requirements.preferred == ["Go"]
    assert requirements.keywords == ["scalable systems"]


@pytest.mark.asyncio
async def test_extract_falls_back_without_gemini():
    requirements = await requirement_extractor.extract_requirements(SAMPLE_JD)
    assert requirements == fallback_requirements(SAMPLE_JD)


@pytest.mark.asyncio
async def test_extract_falls_back_on_malformed_output(monkeypatch):
    monkeypatch.setattr(gemini_client, "generate_json", _fake_generate_json({"requiredSkills": "Python"}))
    requirements = await requirement_extractor.extract_requirements(SAMPLE_JD)
    assert requirements == fallback_requirements(SAMPLE_JD)
