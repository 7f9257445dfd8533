"""Lazy registry for the scorers and the skill-gap analyzer.

Global singletons, created on first use with thresholds from settings.
"""

import logging

from config import settings
from services.recommendation.base import BaseScorer
from services.recommendation.skill_gap_analyzer import SkillGapAnalyzer

logger = logging.getLogger(__name__)

_registry: dict[str, BaseScorer | SkillGapAnalyzer] = {}


def _create_scorer(name: str) -> BaseScorer | SkillGapAnalyzer:
    """Factory: create a scorer by name with deferred imports."""
    if name == "course":
        from services.recommendation.course_scorer import CourseRelevanceScorer
        return CourseRelevanceScorer(
            min_score=settings.course_min_score,
            top_n=settings.course_top_n,
            max_workers=settings.scoring_max_workers,
        )
    elif name == "mentor":
        from services.recommendation.mentor_scorer import MentorEligibilityScorer
        return MentorEligibilityScorer(
            min_score=settings.mentor_min_score,
            top_n=settings.mentor_top_n,
            max_workers=settings.scoring_max_workers,
        )
    elif name == "project":
        from services.recommendation.project_scorer import ProjectMatchScorer
        return ProjectMatchScorer(
            min_score=settings.project_min_score,
            top_n=settings.project_top_n,
            max_workers=settings.scoring_max_workers,
        )
    elif name == "skill_gap":
        return SkillGapAnalyzer()
    else:
        raise ValueError(f"Unknown scorer: {name}")


def get_scorer(name: str) -> BaseScorer | SkillGapAnalyzer:
    """Get a scorer by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_scorer(name)
        logger.info("Created scorer %s", name)
    return _registry[name]


def clear() -> None:
    """Drop all scorers. Useful for testing."""
    _registry.clear()
