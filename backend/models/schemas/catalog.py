"""Catalog items the engine scores against an employee: courses and projects."""

from enum import Enum

from pydantic import BaseModel, Field

from models.schemas.employee import SkillLevel


class Course(BaseModel):
    """A training course from the course catalog."""
    id: int
    title: str
    provider: str = ""
    category: str = ""
    duration_hours: int = 0
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    price: float = 0.0
    url: str = ""
    description: str = ""

    model_config = {"frozen": True}


class ProjectStatus(str, Enum):
    PLANNING = "Planning"
    ACTIVE = "Active"
    ON_HOLD = "OnHold"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


OPEN_PROJECT_STATUSES = frozenset({ProjectStatus.PLANNING, ProjectStatus.ACTIVE})


class ProjectSkillRequirement(BaseModel):
    required_level: SkillLevel
    is_required: bool = True

    model_config = {"frozen": True}


class ProjectCandidate(BaseModel):
    """An internal project an employee could join.

    required_skills is keyed by skill_id.
    """
    id: int
    name: str
    description: str = ""
    department: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    required_skills: dict[int, ProjectSkillRequirement] = {}
    max_team_size: int = 0
    assigned_count: int = 0

    model_config = {"frozen": True}

    @property
    def open_seats(self) -> int:
        return max(0, self.max_team_size - self.assigned_count)

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_PROJECT_STATUSES and self.open_seats > 0
