"""Orchestrator: deterministic ATS analysis plus optional Gemini enrichment.

Pipeline:
1. Validate input and run the scoring engine (score, gaps, suggestions)
2. Ask Gemini for gaps and suggestions keyword matching cannot see
3. Merge them into the report without touching any score

The algorithmic score is authoritative. If Gemini is disabled, unreachable
or answers with anything malformed, the engine's report is returned as is.
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from config import settings
from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import GapItem, ScoreReport, ScoringMethod
from services import gemini_client, prompt_builder
from services.scoring import engine

logger = logging.getLogger(__name__)


def _parse_gap_items(raw_items) -> list[GapItem]:
    if not isinstance(raw_items, list):
        return []
    items = []
    for raw in raw_items:
        try:
            items.append(GapItem.model_validate(raw))
        except ValidationError as e:
            logger.debug("Dropping malformed Gemini gap item %r: %s", raw, e)
    return items


def merge_enrichment(report: ScoreReport, data: Mapping) -> ScoreReport:
    """Append Gemini's extra gaps and suggestions to ``report``.

    Proposed gaps already present in the report are dropped. Scores,
    breakdown and match details are always kept from ``report``.
    """
    known = {gap.keyword.lower() for gap in report.missing_keywords}
    extra_gaps = []
    for gap in _parse_gap_items(data.get("missingKeywords")):
        if gap.keyword.lower() not in known:
            known.add(gap.keyword.lower())
            extra_gaps.append(gap)

    raw_suggestions = data.get("suggestions")
    extra_suggestions = []
    if isinstance(raw_suggestions, list):
        for suggestion in raw_suggestions:
            if not isinstance(suggestion, str):
                continue
            suggestion = suggestion.strip()
            if (
                suggestion
                and suggestion not in report.suggestions
                and suggestion not in extra_suggestions
            ):
                extra_suggestions.append(suggestion)

    if not extra_gaps and not extra_suggestions:
        return report

    gaps = report.missing_keywords + extra_gaps
    gaps.sort(key=lambda gap: gap.importance, reverse=True)
    return report.model_copy(
        update={
            "missing_keywords": gaps,
            "suggestions": report.suggestions + extra_suggestions,
            "scoring_method": ScoringMethod.HYBRID,
        }
    )


async def enrich(
    report: ScoreReport,
    candidate_text: str,
    requirements: RequirementSet,
) -> ScoreReport:
    """Best-effort Gemini enrichment; never raises."""
    if not settings.enrichment_enabled or not gemini_client.is_configured():
        return report

    prompt = prompt_builder.build_enrichment_prompt(candidate_text, requirements, report)
    data = await gemini_client.generate_json(prompt)
    if data is None:
        logger.warning("Gemini enrichment unavailable, using algorithmic report only")
        return report

    try:
        return merge_enrichment(report, data)
    except Exception as e:
        logger.error("Failed to merge Gemini enrichment: %s", e)
        return report


async def analyze(
    candidate_text: str,
    requirements: RequirementSet | Mapping | None,
) -> ScoreReport:
    """Run the full analysis. Raises ``InvalidInputError`` on malformed input."""
    requirements = engine.coerce_requirements(requirements)
    report = engine.analyze(candidate_text, requirements)
    return await enrich(report, candidate_text, requirements)
