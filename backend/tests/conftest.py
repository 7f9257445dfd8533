"""Shared test configuration, pytest markers and model factories."""

import pytest

from models.schemas.catalog import Course, ProjectCandidate, ProjectSkillRequirement, ProjectStatus
from models.schemas.employee import EmployeeProfile, EmployeeSkill, SkillLevel
from services.reference_data import get_reference_data


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: exercises the FastAPI app over seeded demo data"
    )


@pytest.fixture
def reference():
    return get_reference_data()


@pytest.fixture
def make_employee():
    """Factory: skills are (skill_id, name, category, level) tuples."""

    def _make(
        id: int = 1,
        position: str = "Developer",
        department: str = "Engineering",
        years: int = 3,
        skills: list[tuple[int, str, str, SkillLevel]] | None = None,
        first_name: str = "Test",
        last_name: str = "Employee",
    ) -> EmployeeProfile:
        return EmployeeProfile(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=f"employee{id}@company.com",
            position=position,
            department=department,
            years_of_experience=years,
            skills=[
                EmployeeSkill(skill_id=sid, name=name, category=category, level=level)
                for sid, name, category, level in (skills or [])
            ],
        )

    return _make


@pytest.fixture
def make_course():
    def _make(
        id: int = 1,
        title: str = "Course",
        category: str = "Programming",
        duration_hours: int = 35,
        rating: float = 4.0,
        provider: str = "Udemy",
    ) -> Course:
        return Course(
            id=id,
            title=title,
            provider=provider,
            category=category,
            duration_hours=duration_hours,
            rating=rating,
            description=f"{title} description",
        )

    return _make


@pytest.fixture
def make_project():
    """Factory: requirements map skill_id -> required level."""

    def _make(
        id: int = 1,
        name: str = "Project",
        department: str = "Engineering",
        status: ProjectStatus = ProjectStatus.PLANNING,
        requirements: dict[int, SkillLevel] | None = None,
        max_team_size: int = 4,
        assigned_count: int = 0,
    ) -> ProjectCandidate:
        return ProjectCandidate(
            id=id,
            name=name,
            description=f"{name} description",
            department=department,
            status=status,
            required_skills={
                sid: ProjectSkillRequirement(required_level=level)
                for sid, level in (requirements or {}).items()
            },
            max_team_size=max_team_size,
            assigned_count=assigned_count,
        )

    return _make
