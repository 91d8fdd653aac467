from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AnalyzeJobRequest,
    AnalyzeRequest,
    ExtractRequirementsRequest,
    ExtractSkillsRequest,
    OptimizeRequest,
)
from models.responses import (
    HealthResponse,
    JobAnalysisResponse,
    OptimizationResult,
    SkillsResponse,
)
from models.schemas.requirement_set import RequirementSet
from models.schemas.score_report import ScoreReport
from services import (
    gemini_client,
    requirement_extractor,
    resume_analyzer,
    resume_optimizer,
    skill_extractor,
)
from services.scoring.errors import EnrichmentUnavailableError, InvalidInputError

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=gemini_client.is_configured())


@router.post("/analyze", response_model=ScoreReport)
@limiter.limit("10/minute")
async def analyze(request: Request, body: AnalyzeRequest):
    try:
        return await resume_analyzer.analyze(body.candidate_text, body.requirements)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analyze/job", response_model=JobAnalysisResponse)
@limiter.limit("10/minute")
async def analyze_job(request: Request, body: AnalyzeJobRequest):
    requirements = await requirement_extractor.extract_requirements(body.job_description)
    try:
        report = await resume_analyzer.analyze(body.candidate_text, requirements)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return JobAnalysisResponse(requirements=requirements, report=report)


@router.post("/requirements/extract", response_model=RequirementSet)
@limiter.limit("10/minute")
async def extract_requirements(request: Request, body: ExtractRequirementsRequest):
    return await requirement_extractor.extract_requirements(body.job_description)


@router.post("/skills/extract", response_model=SkillsResponse)
async def extract_skills(body: ExtractSkillsRequest):
    return SkillsResponse(skills=skill_extractor.extract_skills(body.candidate_text))


@router.post("/optimize", response_model=OptimizationResult)
@limiter.limit("5/minute")
async def optimize(request: Request, body: OptimizeRequest):
    try:
        return await resume_optimizer.optimize(
            body.candidate_text,
            body.selected_keywords,
            body.requirements,
            body.optimization_level,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EnrichmentUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
