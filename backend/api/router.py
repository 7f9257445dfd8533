from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_service
from config import settings
from models.requests import SkillGapRequest
from models.responses import HealthResponse, RecommendationListResponse
from models.schemas.recommendation import Recommendation
from models.schemas.skill_gap import SkillGapAnalysis
from services.errors import NotFoundError
from services.recommendation.cached import CachedRecommendationService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        gemini_configured=bool(settings.gemini_api_key),
        reasoning_mode=settings.reasoning_mode,
    )


@router.post("/employees/{employee_id}/recommendations", response_model=RecommendationListResponse)
@limiter.limit("20/minute")
async def generate_recommendations(
    request: Request,
    employee_id: int,
    service: CachedRecommendationService = Depends(get_service),
):
    try:
        recommendations = await service.generate_recommendations(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RecommendationListResponse(
        employee_id=employee_id,
        count=len(recommendations),
        recommendations=recommendations,
    )


@router.get("/employees/{employee_id}/recommendations", response_model=RecommendationListResponse)
async def list_recommendations(
    employee_id: int,
    service: CachedRecommendationService = Depends(get_service),
):
    recommendations = await service.get_employee_recommendations(employee_id)
    return RecommendationListResponse(
        employee_id=employee_id,
        count=len(recommendations),
        recommendations=recommendations,
    )


@router.post("/recommendations/{recommendation_id}/accept", response_model=Recommendation)
async def accept_recommendation(
    recommendation_id: int,
    service: CachedRecommendationService = Depends(get_service),
):
    try:
        return await service.accept_recommendation(recommendation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/employees/{employee_id}/skill-gaps", response_model=SkillGapAnalysis)
async def analyze_skill_gaps(
    employee_id: int,
    body: SkillGapRequest,
    service: CachedRecommendationService = Depends(get_service),
):
    try:
        return await service.analyze_skill_gaps(employee_id, body.target_position)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
