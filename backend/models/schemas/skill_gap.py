"""Skill-gap analysis output: gaps, learning path and milestone timeline."""

from datetime import datetime

from pydantic import BaseModel, Field

from models.schemas.employee import SkillLevel


class SkillGap(BaseModel):
    """One required skill the employee has not reached yet."""
    skill_name: str
    current_level: SkillLevel
    required_level: SkillLevel
    priority: int = Field(default=1, ge=1, le=5)
    reasoning: str = ""
    category: str = ""
    estimated_learning_months: int = 0
    recommended_resources: list[str] = []
    importance_score: float = Field(default=0.5, ge=0.0, le=1.0)

    @property
    def level_gap(self) -> int:
        return int(self.required_level) - int(self.current_level)


class CareerMilestone(BaseModel):
    month: int
    title: str
    description: str = ""
    skills_to_complete: list[str] = []
    is_completed: bool = False


class SkillGapAnalysis(BaseModel):
    """Structured roadmap from an employee's current skills to a target position.

    missing_skills holds gaps starting at Beginner, skills_to_improve the rest.
    Both are ordered by priority, highest first.
    """
    missing_skills: list[SkillGap] = []
    skills_to_improve: list[SkillGap] = []
    learning_path: str = ""
    estimated_months: int = Field(default=3, ge=3, le=24)
    readiness_percentage: float = Field(default=100.0, ge=0.0, le=100.0)
    milestone_timeline: list[CareerMilestone] = []

    target_position: str = ""
    employee_name: str = ""
    current_position: str = ""
    years_of_experience: int = 0
    analysis_date: datetime | None = None
    total_skills_required: int = 0
    skills_met: int = 0
    high_priority_gaps: int = 0
    next_action_items: list[str] = []
