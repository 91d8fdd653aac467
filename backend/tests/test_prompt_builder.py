from services.prompt_builder import (
    build_enrichment_prompt,
    build_optimization_prompt,
    build_requirements_prompt,
)
from services.scoring.engine import analyze


def test_requirements_prompt_embeds_job_description():
    prompt = build_requirements_prompt("Looking for a Rust engineer")
    assert "Looking for a Rust engineer" in prompt
    assert '"requiredSkills"' in prompt
    assert '"Entry" or "Mid" or "Senior"' in prompt


def test_enrichment_prompt_carries_algorithmic_findings(sample_text, sample_requirements):
    report = analyze(sample_text, sample_requirements)
    prompt = build_enrichment_prompt(sample_text, sample_requirements, report)

    assert "75/100" in prompt
    assert "Docker" in prompt
    assert '"required": [' in prompt
    assert '"Tools/Technologies"' in prompt
    assert '"Summary"' in prompt


def test_optimization_prompt_levels():
    prompt = build_optimization_prompt("resume", ["Docker", "AWS"], "conservative")
    assert "Docker, AWS" in prompt
    assert "Make minimal changes" in prompt
