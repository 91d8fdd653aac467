"""Gemini resume rewrite around selected keywords, re-scored locally."""

import logging

from models.responses import OptimizationResult
from models.schemas.requirement_set import RequirementSet
from services import gemini_client, prompt_builder
from services.scoring import engine
from services.scoring.errors import EnrichmentUnavailableError, InvalidInputError

logger = logging.getLogger(__name__)


async def optimize(
    resume_text: str,
    selected_keywords: list[str],
    requirements: RequirementSet,
    optimization_level: str = "balanced",
) -> OptimizationResult:
    """Rewrite ``resume_text`` to include ``selected_keywords`` and re-score it.

    Both scores come from the deterministic engine, so the improvement is
    comparable with any other analysis of the same requirement set.
    """
    if optimization_level not in prompt_builder.OPTIMIZATION_LEVELS:
        raise InvalidInputError(f"Unknown optimization level: {optimization_level}")
    if not gemini_client.is_configured():
        raise EnrichmentUnavailableError("Resume optimization requires GEMINI_API_KEY")

    original = engine.analyze(resume_text, requirements)
    prompt = prompt_builder.build_optimization_prompt(
        resume_text, selected_keywords, optimization_level
    )
    optimized_text = await gemini_client.generate_text(prompt)
    if not optimized_text:
        raise EnrichmentUnavailableError("Gemini did not return an optimized resume")

    final = engine.analyze(optimized_text, requirements)
    logger.info(
        "Optimized resume (%s): %d -> %d",
        optimization_level, original.ats_score, final.ats_score,
    )
    return OptimizationResult(
        content=optimized_text,
        changes_made=[f"Added {len(selected_keywords)} keywords"],
        selected_keywords=selected_keywords,
        original_ats_score=original.ats_score,
        final_ats_score=final.ats_score,
        improvement=final.ats_score - original.ats_score,
    )
