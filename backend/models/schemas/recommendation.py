"""Persisted recommendation produced by the aggregator."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RecommendationType(str, Enum):
    COURSE = "Course"
    MENTOR = "Mentor"
    PROJECT = "Project"
    CERTIFICATION = "Certification"
    SKILL_DEVELOPMENT = "SkillDevelopment"


_REFERENCE_FIELDS = {
    RecommendationType.COURSE: "course_id",
    RecommendationType.MENTOR: "mentor_employee_id",
    RecommendationType.PROJECT: "project_id",
}


class Recommendation(BaseModel):
    """A ranked suggestion for one employee.

    Course, Mentor and Project recommendations carry exactly one reference
    id, the one matching their type. Only accept/view flags change after
    creation.
    """
    id: int | None = None  # assigned by the repository
    employee_id: int
    type: RecommendationType
    title: str = ""
    description: str = ""
    reasoning: str = ""
    priority: int = Field(default=3, ge=1, le=5)
    confidence_score: float = Field(default=0.0, ge=0.0, le=1.0)
    created_date: datetime | None = None  # assigned by the repository
    is_viewed: bool = False
    is_accepted: bool = False
    accepted_date: datetime | None = None

    course_id: int | None = None
    mentor_employee_id: int | None = None
    project_id: int | None = None

    @model_validator(mode="after")
    def _check_reference(self) -> "Recommendation":
        set_fields = {
            name for name in _REFERENCE_FIELDS.values()
            if getattr(self, name) is not None
        }
        expected = _REFERENCE_FIELDS.get(self.type)
        if expected is None:
            if set_fields:
                raise ValueError(f"{self.type.value} recommendations take no reference id")
        elif set_fields != {expected}:
            raise ValueError(f"{self.type.value} recommendation must set only {expected}")
        return self
