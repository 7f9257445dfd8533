"""Project match scoring.

Only projects in Planning or Active status with open seats are scored.
"""

import logging
from typing import Any, Mapping

from models.schemas.catalog import OPEN_PROJECT_STATUSES, ProjectCandidate, ProjectSkillRequirement
from models.schemas.employee import EmployeeProfile, SkillLevel
from models.schemas.recommendation import Recommendation, RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from services.recommendation.base import BaseScorer

logger = logging.getLogger(__name__)

W_SKILL_MATCH = 0.40
W_GROWTH = 0.30
W_SAME_DEPARTMENT = 0.20
W_RELATED_DEPARTMENT = 0.10
W_TIMING = 0.10

NO_REQUIREMENTS_MATCH = 0.8
NO_REQUIREMENTS_GROWTH = 0.5
GROWTH_OVERLOAD_RATIO = 0.7  # beyond this, gaps signal poor fit
GROWTH_OVERLOAD_CAP = 0.3


def skill_match_ratio(
    employee_skills: Mapping[int, SkillLevel],
    required: Mapping[int, ProjectSkillRequirement],
) -> float:
    if not required:
        return NO_REQUIREMENTS_MATCH
    met = sum(
        1 for skill_id, req in required.items()
        if skill_id in employee_skills and employee_skills[skill_id] >= req.required_level
    )
    return met / len(required)


def growth_opportunity(
    employee_skills: Mapping[int, SkillLevel],
    required: Mapping[int, ProjectSkillRequirement],
) -> float:
    if not required:
        return NO_REQUIREMENTS_GROWTH
    gaps = sum(
        1 for skill_id, req in required.items()
        if skill_id not in employee_skills or employee_skills[skill_id] < req.required_level
    )
    ratio = gaps / len(required)
    return GROWTH_OVERLOAD_CAP if ratio > GROWTH_OVERLOAD_RATIO else ratio


class ProjectMatchScorer(BaseScorer):
    scorer_name = "project"
    recommendation_type = RecommendationType.PROJECT
    inclusive_threshold = True

    def is_candidate(self, employee: EmployeeProfile, candidate: Any) -> bool:
        return candidate.is_open

    def score(self, employee: EmployeeProfile, candidate: Any) -> ScoredCandidate:
        project: ProjectCandidate = candidate
        employee_skills = employee.skill_map()
        total = 0.0
        reasons: list[str] = []

        match = skill_match_ratio(employee_skills, project.required_skills)
        total += match * W_SKILL_MATCH
        if match > 0.7:
            reasons.append(f"Excellent skill match ({match:.0%})")
        elif match > 0.5:
            reasons.append(f"Good skill match ({match:.0%})")

        growth = growth_opportunity(employee_skills, project.required_skills)
        total += growth * W_GROWTH
        if growth > 0.6:
            reasons.append("Significant learning opportunities")

        if project.department == employee.department:
            total += W_SAME_DEPARTMENT
            reasons.append("Within your department")
        elif self.reference.is_related_department(project.department, employee.department):
            total += W_RELATED_DEPARTMENT
            reasons.append("Cross-functional opportunity")

        if project.status in OPEN_PROJECT_STATUSES:
            total += W_TIMING
            reasons.append("Perfect timing to join")

        return ScoredCandidate(
            item=project,
            score=round(total, 4),
            reasons=reasons,
            fallback_reason="Suitable for your skill level.",
        )

    def priority(self, employee: EmployeeProfile, scored: ScoredCandidate) -> int:
        if scored.score > 0.9:
            return 5
        if scored.score > 0.7:
            return 4
        if scored.score > 0.5:
            return 3
        return 2

    def confidence(self, score: float) -> float:
        return round(min(0.95, 0.7 + score * 0.3), 4)

    def build_recommendation(
        self, employee: EmployeeProfile, scored: ScoredCandidate, reasoning: str
    ) -> Recommendation:
        project: ProjectCandidate = scored.item
        return Recommendation(
            employee_id=employee.id,
            type=self.recommendation_type,
            title=f"Join Project: {project.name}",
            description=project.description,
            reasoning=reasoning,
            priority=self.priority(employee, scored),
            confidence_score=self.confidence(scored.score),
            project_id=project.id,
        )
