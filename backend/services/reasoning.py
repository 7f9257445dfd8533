"""Reasoning-text generators for recommendations.

The aggregator only sees ReasoningGenerator.generate(). Two strategies:

    template  picks one of several fixed sentences per item type. The
              random.Random is injectable, so a seed makes it deterministic.
    gemini    asks Gemini for a short explanation, raising
              ReasoningUnavailableError when it cannot.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any

from config import settings
from models.schemas.catalog import Course, ProjectCandidate
from models.schemas.employee import EmployeeProfile
from services import gemini_client, prompt_builder
from services.errors import ReasoningUnavailableError

logger = logging.getLogger(__name__)

GENERIC_REASONING = "AI analysis suggests this recommendation aligns well with your career goals."


class ReasoningGenerator(ABC):
    """Port: explanatory text for one candidate, given the employee."""

    name: str = ""

    @abstractmethod
    async def generate(self, employee: EmployeeProfile, candidate: Any) -> str:
        """Return supplementary reasoning text. May raise or be cancelled."""


class TemplateReasoningGenerator(ReasoningGenerator):
    name = "template"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def generate(self, employee: EmployeeProfile, candidate: Any) -> str:
        if isinstance(candidate, Course):
            templates = _course_templates(employee, candidate)
        elif isinstance(candidate, EmployeeProfile):
            templates = _mentor_templates(employee, candidate)
        elif isinstance(candidate, ProjectCandidate):
            templates = _project_templates(candidate)
        else:
            return GENERIC_REASONING
        return self._rng.choice(templates)


def _course_templates(employee: EmployeeProfile, course: Course) -> list[str]:
    return [
        f"Based on your {employee.years_of_experience} years of experience as a {employee.position}, "
        f"this {course.category} course will help you advance your skills and stay current with "
        f"industry trends.",
        f"This course is highly rated ({course.rating}/5) and aligns perfectly with your career goals "
        f"in the {employee.department} department. It will strengthen your expertise in {course.title}.",
        f"Given your current skill level, this {course.duration_hours}-hour course provides the right "
        f"depth to enhance your knowledge while fitting into your learning schedule.",
        f"This course from {course.provider} covers essential concepts that are directly applicable to "
        f"your role as {employee.position} and will boost your career prospects.",
    ]


def _mentor_templates(employee: EmployeeProfile, mentor: EmployeeProfile) -> list[str]:
    gap = mentor.years_of_experience - employee.years_of_experience
    return [
        f"{mentor.full_name} brings {mentor.years_of_experience} years of experience in "
        f"{mentor.department} and has advanced skills that complement your current expertise. "
        f"Their guidance will accelerate your professional growth.",
        f"As a {mentor.position}, {mentor.full_name} has navigated similar career challenges and can "
        f"provide valuable insights for your progression from {employee.position}.",
        f"The {gap} years of additional experience that {mentor.full_name} has will provide you with "
        f"strategic career advice and industry knowledge.",
        f"{mentor.full_name}'s expertise in {mentor.department} makes them an ideal mentor to help you "
        f"develop leadership skills and technical competencies.",
    ]


def _project_templates(project: ProjectCandidate) -> list[str]:
    return [
        f"The {project.name} project in {project.department} offers hands-on experience with modern "
        f"technologies and methodologies that align with your career development goals.",
        "This project provides an excellent opportunity to apply your current skills while learning "
        "new ones. The collaborative environment will enhance your teamwork and communication abilities.",
        f"Working on {project.name} will give you exposure to enterprise-level challenges and help you "
        f"build a portfolio of impactful work that demonstrates your capabilities.",
        "The project timeline and scope are well-suited to your experience level, providing the right "
        "balance of challenge and achievable outcomes.",
    ]


class GeminiReasoningGenerator(ReasoningGenerator):
    name = "gemini"

    async def generate(self, employee: EmployeeProfile, candidate: Any) -> str:
        if isinstance(candidate, Course):
            prompt = prompt_builder.build_course_prompt(employee, candidate)
        elif isinstance(candidate, EmployeeProfile):
            prompt = prompt_builder.build_mentor_prompt(employee, candidate)
        elif isinstance(candidate, ProjectCandidate):
            prompt = prompt_builder.build_project_prompt(employee, candidate)
        else:
            return GENERIC_REASONING

        text = await gemini_client.generate_text(prompt)
        if not text:
            raise ReasoningUnavailableError(f"Gemini returned no reasoning for {type(candidate).__name__}")
        return text


_generator: ReasoningGenerator | None = None


def get_reasoning_generator() -> ReasoningGenerator:
    """Process-wide generator selected by settings.reasoning_mode."""
    global _generator
    if _generator is None:
        if settings.reasoning_mode == "gemini":
            _generator = GeminiReasoningGenerator()
        else:
            if settings.reasoning_mode != "template":
                logger.warning("Unknown reasoning_mode %r, using templates", settings.reasoning_mode)
            _generator = TemplateReasoningGenerator(random.Random(settings.reasoning_seed))
        logger.info("Reasoning generator: %s", _generator.name)
    return _generator
