"""All prompt templates for Gemini API calls."""

import json

from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import GapCategory, ScoreReport, SuggestedSection

OPTIMIZATION_LEVELS = {
    "aggressive": "Maximize keyword density while maintaining readability",
    "balanced": "Naturally integrate keywords in contextually appropriate sections",
    "conservative": "Make minimal changes, only add keywords where they fit naturally",
}


def _choices(enum_cls) -> str:
    return " or ".join(f'"{member.value}"' for member in enum_cls)


def build_requirements_prompt(job_description: str) -> str:
    """Call A: structured requirement extraction from a job description."""
    return f"""Analyze the following job description and extract key information.

JOB DESCRIPTION:
---
{job_description}
---

Focus on:
- Technical skills mentioned as required
- Preferred/optional skills
- Tools, technologies, frameworks
- Experience level indicators (junior, mid-level, senior, etc.)
- Important keywords and action verbs

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "requiredSkills": [<skills the posting requires>],
  "preferredSkills": [<skills listed as preferred or nice to have>],
  "tools": [<tools, technologies and frameworks>],
  "experienceLevel": "Entry" or "Mid" or "Senior",
  "keywords": [<other important keywords, most important first>]
}}"""


def build_enrichment_prompt(
    resume_text: str,
    requirements: RequirementSet,
    report: ScoreReport,
) -> str:
    """Call B: extra gaps and suggestions on top of the algorithmic report.

    The algorithmic findings are passed along so the model only adds what
    keyword matching cannot see.
    """
    requirements_json = json.dumps(requirements.model_dump(by_alias=True, mode="json"), indent=2)
    known_gaps = ", ".join(gap.keyword for gap in report.missing_keywords) or "none"

    return f"""You are an expert ATS (Applicant Tracking System) and resume analyst.

Compare this resume with the job requirements. A keyword-matching pass has
already scored it {report.ats_score}/100 and found these missing keywords:
{known_gaps}

Report only ADDITIONAL gaps (soft skills, certifications, experience themes)
and concrete suggestions that the keyword pass could not detect. Do not
re-score the resume.

RESUME:
---
{resume_text}
---

JOB REQUIREMENTS:
{requirements_json}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "missingKeywords": [
    {{
      "keyword": "<keyword name>",
      "category": {_choices(GapCategory)},
      "importance": <integer 1-10>,
      "suggestedSection": {_choices(SuggestedSection)}
    }}
  ],
  "suggestions": [<specific, actionable suggestions>]
}}"""


def build_optimization_prompt(
    resume_text: str,
    selected_keywords: list[str],
    optimization_level: str = "balanced",
) -> str:
    """Call C: rewrite the resume around selected keywords."""
    return f"""Optimize this resume by naturally integrating these keywords: {', '.join(selected_keywords)}

ORIGINAL RESUME:
---
{resume_text}
---

Guidelines:
1. Maintain the original formatting, structure, and style
2. Add keywords contextually in relevant sections
3. Don't add false information or fabricate experience
4. Keep language professional and natural
5. Highlight achievements using the keywords where appropriate
6. Optimization level: {OPTIMIZATION_LEVELS[optimization_level]}

Return only the optimized resume text, keeping the same structure and format as the original."""
