"""Recommendation aggregator: wires scorers, reasoning and persistence together.

Flow per employee:
    load employee snapshot
      ├─ courses   (catalog minus enrolled)  → CourseRelevanceScorer.rank
      ├─ mentors   (more experienced peers)  → MentorEligibilityScorer.rank
      └─ projects  (Planning/Active, seats)  → ProjectMatchScorer.rank
    each kept candidate → reasoning → Recommendation → saved
    union sorted by priority desc, confidence desc

Stages run one after another against one snapshot; the repositories are not
assumed to be safe for concurrent use.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from models.schemas.employee import EmployeeProfile
from models.schemas.recommendation import Recommendation
from models.schemas.skill_gap import SkillGapAnalysis
from services.errors import EmployeeNotFoundError, NotFoundError, RecommendationNotFoundError
from services.reasoning import ReasoningGenerator
from services.recommendation.base import BaseScorer
from services.recommendation.skill_gap_analyzer import SkillGapAnalyzer
from services.repositories import (
    CourseRepository,
    EmployeeRepository,
    ProjectRepository,
    RecommendationRepository,
)

logger = logging.getLogger(__name__)

FALLBACK_REASONING = "This recommendation aligns with your profile and development goals."


class GenerationCancelled(Exception):
    """Raised internally when the caller's cancel event is set."""


def sort_recommendations(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    return sorted(
        recommendations,
        key=lambda r: (r.priority, r.confidence_score),
        reverse=True,
    )


class RecommendationAggregator:
    """Produces, persists and manages recommendations for one employee at a time."""

    def __init__(
        self,
        employee_repo: EmployeeRepository,
        course_repo: CourseRepository,
        project_repo: ProjectRepository,
        recommendation_repo: RecommendationRepository,
        reasoning_generator: ReasoningGenerator,
        course_scorer: BaseScorer,
        mentor_scorer: BaseScorer,
        project_scorer: BaseScorer,
        analyzer: SkillGapAnalyzer,
    ) -> None:
        self.employee_repo = employee_repo
        self.course_repo = course_repo
        self.project_repo = project_repo
        self.recommendation_repo = recommendation_repo
        self.reasoning_generator = reasoning_generator
        self.course_scorer = course_scorer
        self.mentor_scorer = mentor_scorer
        self.project_scorer = project_scorer
        self.analyzer = analyzer

    async def _load_employee(self, employee_id: int) -> EmployeeProfile:
        employee = await self.employee_repo.get_with_skills(employee_id)
        if employee is None:
            logger.warning("Employee %d not found", employee_id)
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def generate_recommendations(
        self, employee_id: int, cancel_event: asyncio.Event | None = None
    ) -> list[Recommendation]:
        """Score every catalog, persist the kept candidates and return them ranked.

        Setting ``cancel_event`` stops further repository and reasoning calls;
        whatever was already saved is returned and stays saved. A missing
        employee raises; any other failure is logged and yields an empty list.
        """
        saved: list[Recommendation] = []

        try:
            employee = await self._load_employee(employee_id)
            self._checkpoint(cancel_event)
            courses = await self.course_repo.list_all()
            self._checkpoint(cancel_event)
            enrolled = await self.course_repo.list_enrolled_ids(employee_id)
            await self._run_stage(employee, self.course_scorer, courses, enrolled, cancel_event, saved)

            self._checkpoint(cancel_event)
            mentors = await self.employee_repo.list_mentor_candidates(employee_id)
            await self._run_stage(employee, self.mentor_scorer, mentors, (), cancel_event, saved)

            self._checkpoint(cancel_event)
            projects = await self.project_repo.list_available()
            await self._run_stage(employee, self.project_scorer, projects, (), cancel_event, saved)

        except GenerationCancelled:
            logger.warning(
                "Recommendation run for employee %d cancelled after %d saved",
                employee_id, len(saved),
            )
        except NotFoundError:
            raise
        except Exception:
            logger.exception("Error generating recommendations for employee %d", employee_id)
            return []

        ranked = sort_recommendations(saved)
        logger.info("Generated %d recommendations for employee %d", len(ranked), employee_id)
        return ranked

    @staticmethod
    def _checkpoint(cancel_event: asyncio.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise GenerationCancelled()

    async def _run_stage(
        self,
        employee: EmployeeProfile,
        scorer: BaseScorer,
        candidates: list[Any],
        exclude_ids: Iterable[int],
        cancel_event: asyncio.Event | None,
        saved: list[Recommendation],
    ) -> None:
        for scored in scorer.rank(employee, candidates, exclude_ids=exclude_ids):
            self._checkpoint(cancel_event)
            ai_text = await self._reasoning_for(employee, scored.item)
            recommendation = scorer.build_recommendation(
                employee, scored, f"{scored.reason_text} {ai_text}"
            )
            self._checkpoint(cancel_event)
            saved.append(await self.recommendation_repo.save(recommendation))

    async def _reasoning_for(self, employee: EmployeeProfile, candidate: Any) -> str:
        """Generator text for one candidate; failures degrade to FALLBACK_REASONING."""
        try:
            return await self.reasoning_generator.generate(employee, candidate)
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            logger.warning("Reasoning cancelled for %s %d, using fallback",
                           type(candidate).__name__, candidate.id)
        except Exception as e:
            logger.warning("Reasoning failed for %s %d, using fallback: %s",
                           type(candidate).__name__, candidate.id, e)
        return FALLBACK_REASONING

    async def accept_recommendation(self, recommendation_id: int) -> Recommendation:
        existing = await self.recommendation_repo.load(recommendation_id)
        if existing is None:
            raise RecommendationNotFoundError(recommendation_id)
        updated = await self.recommendation_repo.mark_accepted(
            recommendation_id, datetime.now(timezone.utc)
        )
        if updated is None:
            raise RecommendationNotFoundError(recommendation_id)
        logger.info("Recommendation %d accepted by employee %d", recommendation_id, updated.employee_id)
        return updated

    async def get_employee_recommendations(self, employee_id: int) -> list[Recommendation]:
        """Stored recommendations for an employee, newest first."""
        return await self.recommendation_repo.list_for_employee(employee_id)

    async def analyze_skill_gaps(self, employee_id: int, target_position: str) -> SkillGapAnalysis:
        employee = await self._load_employee(employee_id)
        return self.analyzer.analyze_employee(employee, target_position)
