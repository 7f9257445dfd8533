"""Prompt templates for Gemini reasoning calls."""

from models.schemas.catalog import Course, ProjectCandidate
from models.schemas.employee import EmployeeProfile

_INSTRUCTIONS = """You are a career development advisor inside a company's internal platform.

Write 2-3 sentences (max 80 words) explaining to the employee why the
recommendation below fits their growth. Address the employee as "you".
Plain text only, no markdown, no lists, no greeting."""


def _employee_block(employee: EmployeeProfile) -> str:
    skills = ", ".join(f"{s.name} ({s.level.label})" for s in employee.skills) or "none recorded"
    return f"""EMPLOYEE:
- Position: {employee.position}
- Department: {employee.department}
- Experience: {employee.years_of_experience} years
- Skills: {skills}"""


def build_course_prompt(employee: EmployeeProfile, course: Course) -> str:
    return f"""{_INSTRUCTIONS}

{_employee_block(employee)}

RECOMMENDED COURSE:
- Title: {course.title}
- Provider: {course.provider}
- Category: {course.category}
- Duration: {course.duration_hours} hours
- Rating: {course.rating}/5
---
{course.description}
---
"""


def build_mentor_prompt(employee: EmployeeProfile, mentor: EmployeeProfile) -> str:
    gap = mentor.years_of_experience - employee.years_of_experience
    return f"""{_INSTRUCTIONS}

{_employee_block(employee)}

RECOMMENDED MENTOR:
- Name: {mentor.full_name}
- Position: {mentor.position}
- Department: {mentor.department}
- Experience: {mentor.years_of_experience} years ({gap} more than the employee)
"""


def build_project_prompt(employee: EmployeeProfile, project: ProjectCandidate) -> str:
    return f"""{_INSTRUCTIONS}

{_employee_block(employee)}

RECOMMENDED PROJECT:
- Name: {project.name}
- Department: {project.department}
- Status: {project.status.value}
- Open seats: {project.open_seats}
---
{project.description}
---
"""
