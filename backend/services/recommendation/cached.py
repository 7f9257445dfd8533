"""TTL-caching decorator around the RecommendationAggregator.

Cache keys:
    recommendations_{employee_id}           generated batch, long TTL
    employee_recommendations_{employee_id}  stored list, short TTL

Skill-gap analysis always goes to the aggregator.
"""

import asyncio
import logging
import time
from typing import Any, Callable

from config import settings
from models.schemas.recommendation import Recommendation
from models.schemas.skill_gap import SkillGapAnalysis
from services.recommendation.aggregator import RecommendationAggregator

logger = logging.getLogger(__name__)


class TTLCache:
    """Dict of key -> (expires_at, value) driven by a monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        now = self._clock()
        self.sweep(now)
        self._entries[key] = (now + ttl_seconds, value)

    def sweep(self, now: float | None = None) -> None:
        """Drop every expired entry."""
        now = self._clock() if now is None else now
        expired = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class CachedRecommendationService:
    """Same surface as RecommendationAggregator, with per-employee caching."""

    def __init__(
        self,
        inner: RecommendationAggregator,
        cache: TTLCache | None = None,
        recommendations_ttl_minutes: int | None = None,
        employee_recommendations_ttl_minutes: int | None = None,
    ) -> None:
        self.inner = inner
        self.cache = cache or TTLCache()
        self.recommendations_ttl = 60 * (
            recommendations_ttl_minutes
            if recommendations_ttl_minutes is not None
            else settings.recommendation_cache_ttl_minutes
        )
        self.employee_recommendations_ttl = 60 * (
            employee_recommendations_ttl_minutes
            if employee_recommendations_ttl_minutes is not None
            else settings.employee_recommendation_cache_ttl_minutes
        )

    async def generate_recommendations(
        self, employee_id: int, cancel_event: asyncio.Event | None = None
    ) -> list[Recommendation]:
        key = f"recommendations_{employee_id}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for employee %d recommendations", employee_id)
            return cached

        logger.info("Cache miss for employee %d recommendations, generating new ones", employee_id)
        recommendations = await self.inner.generate_recommendations(employee_id, cancel_event)
        # A cancelled run is partial; don't serve it for the next 15 minutes.
        if cancel_event is None or not cancel_event.is_set():
            self.cache.set(key, recommendations, self.recommendations_ttl)
        self.cache.remove(f"employee_recommendations_{employee_id}")
        return recommendations

    async def accept_recommendation(self, recommendation_id: int) -> Recommendation:
        result = await self.inner.accept_recommendation(recommendation_id)
        self.invalidate(result.employee_id)
        logger.info(
            "Invalidated cache for employee %d after accepting recommendation %d",
            result.employee_id, recommendation_id,
        )
        return result

    async def get_employee_recommendations(self, employee_id: int) -> list[Recommendation]:
        key = f"employee_recommendations_{employee_id}"
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for employee %d stored recommendations", employee_id)
            return cached

        logger.info("Cache miss for employee %d stored recommendations", employee_id)
        recommendations = await self.inner.get_employee_recommendations(employee_id)
        self.cache.set(key, recommendations, self.employee_recommendations_ttl)
        return recommendations

    async def analyze_skill_gaps(self, employee_id: int, target_position: str) -> SkillGapAnalysis:
        return await self.inner.analyze_skill_gaps(employee_id, target_position)

    def invalidate(self, employee_id: int) -> None:
        self.cache.remove(f"recommendations_{employee_id}")
        self.cache.remove(f"employee_recommendations_{employee_id}")
