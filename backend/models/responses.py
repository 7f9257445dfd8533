from pydantic import BaseModel

from models.schemas.recommendation import Recommendation


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    reasoning_mode: str = "template"


class RecommendationListResponse(BaseModel):
    employee_id: int
    count: int = 0
    recommendations: list[Recommendation] = []
