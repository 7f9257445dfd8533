"""Employee snapshot consumed by the scorers and the skill-gap analyzer."""

from datetime import date
from enum import IntEnum

from pydantic import BaseModel


class SkillLevel(IntEnum):
    """Ordinal proficiency tier. Gaps are integer differences."""
    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    EXPERT = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class EmployeeSkill(BaseModel):
    """A single skill held by an employee."""
    skill_id: int
    name: str
    category: str = ""
    level: SkillLevel = SkillLevel.BEGINNER
    acquired_date: date | None = None

    model_config = {"frozen": True}


class EmployeeProfile(BaseModel):
    """Read-only snapshot of an employee with their skills attached.

    Also used for mentor candidates, which are just other employees.
    """
    id: int
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    position: str = ""
    department: str = ""
    years_of_experience: int = 0
    skills: list[EmployeeSkill] = []

    model_config = {"frozen": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def skill_map(self) -> dict[int, SkillLevel]:
        """skill_id -> level."""
        return {s.skill_id: s.level for s in self.skills}

    def skill_names(self) -> dict[str, SkillLevel]:
        """skill name -> level."""
        return {s.name: s.level for s in self.skills}

    def skill_categories(self) -> set[str]:
        return {s.category for s in self.skills if s.category}
