"""Pydantic contracts shared by the scorers, the aggregator and the API."""

from models.schemas.catalog import Course, ProjectCandidate, ProjectSkillRequirement, ProjectStatus
from models.schemas.employee import EmployeeProfile, EmployeeSkill, SkillLevel
from models.schemas.recommendation import Recommendation, RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from models.schemas.skill_gap import CareerMilestone, SkillGap, SkillGapAnalysis

__all__ = [
    "SkillLevel",
    "EmployeeSkill",
    "EmployeeProfile",
    "Course",
    "ProjectStatus",
    "ProjectSkillRequirement",
    "ProjectCandidate",
    "ScoredCandidate",
    "RecommendationType",
    "Recommendation",
    "SkillGap",
    "CareerMilestone",
    "SkillGapAnalysis",
]
