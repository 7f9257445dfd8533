"""Shared dependencies for API routes."""

import logging

from services.reasoning import get_reasoning_generator
from services.recommendation import registry
from services.recommendation.aggregator import RecommendationAggregator
from services.recommendation.cached import CachedRecommendationService
from services.seed_data import build_seeded_repositories

logger = logging.getLogger(__name__)

_service: CachedRecommendationService | None = None


def build_service() -> CachedRecommendationService:
    """Cached aggregator over freshly seeded in-memory repositories."""
    repos = build_seeded_repositories()
    aggregator = RecommendationAggregator(
        employee_repo=repos.employees,
        course_repo=repos.courses,
        project_repo=repos.projects,
        recommendation_repo=repos.recommendations,
        reasoning_generator=get_reasoning_generator(),
        course_scorer=registry.get_scorer("course"),
        mentor_scorer=registry.get_scorer("mentor"),
        project_scorer=registry.get_scorer("project"),
        analyzer=registry.get_scorer("skill_gap"),
    )
    return CachedRecommendationService(aggregator)


def get_service() -> CachedRecommendationService:
    global _service
    if _service is None:
        _service = build_service()
        logger.info("Recommendation service ready")
    return _service
