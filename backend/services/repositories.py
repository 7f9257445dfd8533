"""Repository ports consumed by the recommendation engine, plus in-memory adapters.

Lookups return None for a missing entity; callers decide whether that is
an error. The in-memory adapters back the demo API and the tests.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable

from models.schemas.catalog import Course, ProjectCandidate
from models.schemas.employee import EmployeeProfile
from models.schemas.recommendation import Recommendation

logger = logging.getLogger(__name__)


class EmployeeRepository(ABC):
    @abstractmethod
    async def get_with_skills(self, employee_id: int) -> EmployeeProfile | None: ...

    @abstractmethod
    async def list_mentor_candidates(self, employee_id: int) -> list[EmployeeProfile]:
        """Other employees with strictly more experience than ``employee_id``."""


class CourseRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[Course]: ...

    @abstractmethod
    async def list_enrolled_ids(self, employee_id: int) -> set[int]: ...


class ProjectRepository(ABC):
    @abstractmethod
    async def list_available(self) -> list[ProjectCandidate]:
        """Projects in Planning or Active status, required skills attached."""


class RecommendationRepository(ABC):
    @abstractmethod
    async def save(self, recommendation: Recommendation) -> Recommendation:
        """Persist a new recommendation, assigning id and created_date."""

    @abstractmethod
    async def load(self, recommendation_id: int) -> Recommendation | None: ...

    @abstractmethod
    async def mark_accepted(self, recommendation_id: int, now: datetime) -> Recommendation | None: ...

    @abstractmethod
    async def list_for_employee(self, employee_id: int) -> list[Recommendation]: ...


# ---------------------------------------------------------------------------
# In-memory adapters
# ---------------------------------------------------------------------------


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[EmployeeProfile] = ()) -> None:
        self._employees = {e.id: e for e in employees}

    def add(self, employee: EmployeeProfile) -> None:
        self._employees[employee.id] = employee

    async def get_with_skills(self, employee_id: int) -> EmployeeProfile | None:
        return self._employees.get(employee_id)

    async def list_mentor_candidates(self, employee_id: int) -> list[EmployeeProfile]:
        employee = self._employees.get(employee_id)
        if employee is None:
            return []
        candidates = [
            e for e in self._employees.values()
            if e.id != employee_id and e.years_of_experience > employee.years_of_experience
        ]
        return sorted(candidates, key=lambda e: e.years_of_experience, reverse=True)


class InMemoryCourseRepository(CourseRepository):
    def __init__(
        self,
        courses: Iterable[Course] = (),
        enrollments: dict[int, set[int]] | None = None,
    ) -> None:
        self._courses = {c.id: c for c in courses}
        self._enrollments = {k: set(v) for k, v in (enrollments or {}).items()}

    def enroll(self, employee_id: int, course_id: int) -> None:
        self._enrollments.setdefault(employee_id, set()).add(course_id)

    async def list_all(self) -> list[Course]:
        return list(self._courses.values())

    async def list_enrolled_ids(self, employee_id: int) -> set[int]:
        return set(self._enrollments.get(employee_id, set()))


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self, projects: Iterable[ProjectCandidate] = ()) -> None:
        self._projects = {p.id: p for p in projects}

    async def list_available(self) -> list[ProjectCandidate]:
        return [p for p in self._projects.values() if p.is_open]


class InMemoryRecommendationRepository(RecommendationRepository):
    def __init__(self) -> None:
        self._records: dict[int, Recommendation] = {}
        self._ids = itertools.count(1)

    async def save(self, recommendation: Recommendation) -> Recommendation:
        saved = recommendation.model_copy(update={
            "id": next(self._ids),
            "created_date": datetime.now(timezone.utc),
        })
        self._records[saved.id] = saved
        return saved

    async def load(self, recommendation_id: int) -> Recommendation | None:
        return self._records.get(recommendation_id)

    async def mark_accepted(self, recommendation_id: int, now: datetime) -> Recommendation | None:
        record = self._records.get(recommendation_id)
        if record is None:
            return None
        updated = record.model_copy(update={"is_accepted": True, "accepted_date": now})
        self._records[recommendation_id] = updated
        return updated

    async def list_for_employee(self, employee_id: int) -> list[Recommendation]:
        records = [r for r in self._records.values() if r.employee_id == employee_id]
        return sorted(records, key=lambda r: (r.created_date, r.id), reverse=True)
