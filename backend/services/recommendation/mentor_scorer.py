"""Mentor eligibility scoring.

Two hard gates zero the score before anything else is weighed:
    1. the mentor's position must be reachable from the employee's on the
       career-track graph (unmapped positions fall back to same department
       with strictly more seniority keywords in the title)
    2. the mentor must have at least MIN_EXPERIENCE_GAP more years

Eligible mentors then collect experience-gap, department and
skill-advancement signals.
"""

import logging
from typing import Any

from models.schemas.employee import EmployeeProfile
from models.schemas.recommendation import Recommendation, RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from services.recommendation.base import BaseScorer

logger = logging.getLogger(__name__)

MIN_EXPERIENCE_GAP = 3
IDEAL_EXPERIENCE_GAP_MAX = 8

W_IDEAL_GAP = 0.30
W_LARGE_GAP = 0.20  # diminishing returns past the ideal range
W_SAME_DEPARTMENT = 0.30
W_RELATED_DEPARTMENT = 0.20
W_ADVANCEMENT = 0.40


def skill_advancement_potential(mentor: EmployeeProfile, employee: EmployeeProfile) -> float:
    """Share of common skills where the mentor is strictly ahead."""
    employee_skills = employee.skill_map()
    shared = 0
    ahead = 0
    for skill in mentor.skills:
        level = employee_skills.get(skill.skill_id)
        if level is None:
            continue
        shared += 1
        if skill.level > level:
            ahead += 1
    return ahead / shared if shared else 0.0


class MentorEligibilityScorer(BaseScorer):
    scorer_name = "mentor"
    recommendation_type = RecommendationType.MENTOR

    def is_candidate(self, employee: EmployeeProfile, candidate: Any) -> bool:
        return candidate.id != employee.id and candidate.years_of_experience > employee.years_of_experience

    def is_on_career_track(self, employee: EmployeeProfile, mentor: EmployeeProfile) -> bool:
        ref = self.reference
        if ref.is_position_mapped(employee.position):
            return ref.is_reachable(employee.position, mentor.position)
        if mentor.department == employee.department:
            return ref.seniority_count(mentor.position) > ref.seniority_count(employee.position)
        return False

    def score(self, employee: EmployeeProfile, candidate: Any) -> ScoredCandidate:
        mentor: EmployeeProfile = candidate

        if not self.is_on_career_track(employee, mentor):
            return ScoredCandidate(item=mentor, score=0.0,
                                   fallback_reason="Not on same career progression track")

        gap = mentor.years_of_experience - employee.years_of_experience
        if gap < MIN_EXPERIENCE_GAP:
            return ScoredCandidate(item=mentor, score=0.0,
                                   fallback_reason="Insufficient experience gap for mentoring")

        total = 0.0
        reasons: list[str] = []

        if gap <= IDEAL_EXPERIENCE_GAP_MAX:
            total += W_IDEAL_GAP
            reasons.append(f"{gap} years more experience in same track")
        else:
            total += W_LARGE_GAP
            reasons.append(f"{gap} years more experience (senior mentor)")

        if mentor.department == employee.department:
            total += W_SAME_DEPARTMENT
            reasons.append("Same department and career track expertise")
        elif self.reference.is_related_department(mentor.department, employee.department):
            total += W_RELATED_DEPARTMENT
            reasons.append("Related department in same career track")

        advancement = skill_advancement_potential(mentor, employee)
        total += advancement * W_ADVANCEMENT
        if advancement > 0.7:
            reasons.append("Excellent skill advancement opportunities in same track")
        elif advancement > 0.4:
            reasons.append("Good skill development potential in career track")

        return ScoredCandidate(
            item=mentor,
            score=round(total, 4),
            reasons=reasons,
            fallback_reason="Same career track mentor opportunity.",
        )

    def priority(self, employee: EmployeeProfile, scored: ScoredCandidate) -> int:
        mentor: EmployeeProfile = scored.item
        if scored.score > 0.8:
            return 5
        if scored.score > 0.6 and mentor.department == employee.department:
            return 5
        if scored.score > 0.5:
            return 4
        return 3

    def confidence(self, score: float) -> float:
        return round(min(0.92, 0.65 + score * 0.35), 4)

    def build_recommendation(
        self, employee: EmployeeProfile, scored: ScoredCandidate, reasoning: str
    ) -> Recommendation:
        mentor: EmployeeProfile = scored.item
        return Recommendation(
            employee_id=employee.id,
            type=self.recommendation_type,
            title=f"Connect with: {mentor.full_name}",
            description=(
                f"{mentor.position} in {mentor.department} • "
                f"{mentor.years_of_experience} years experience"
            ),
            reasoning=reasoning,
            priority=self.priority(employee, scored),
            confidence_score=self.confidence(scored.score),
            mentor_employee_id=mentor.id,
        )
