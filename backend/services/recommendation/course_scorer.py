"""Course relevance scoring.

Five weighted signals, summing to at most 1.0:

    category match      0.30  employee already has a skill in the course category
    career boost        0.25  category helps the next career step
    quality             0.20  rating / 5
    duration fit        0.15  closeness to the optimal length for the tier
    high demand         0.10  market keyword in category or title
"""

import logging
from typing import Any

from models.schemas.catalog import Course
from models.schemas.employee import EmployeeProfile
from models.schemas.recommendation import Recommendation, RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from services.recommendation.base import BaseScorer

logger = logging.getLogger(__name__)

W_CATEGORY = 0.30
W_CAREER_BOOST = 0.25
W_QUALITY = 0.20
W_DURATION = 0.15
W_HIGH_DEMAND = 0.10

# (upper bound on years, exclusive; optimal hours)
OPTIMAL_HOURS_TIERS = ((2, 20), (5, 35))
OPTIMAL_HOURS_SENIOR = 50


def optimal_duration_hours(years_of_experience: int) -> int:
    for upper, hours in OPTIMAL_HOURS_TIERS:
        if years_of_experience < upper:
            return hours
    return OPTIMAL_HOURS_SENIOR


def duration_score(duration_hours: int, years_of_experience: int) -> float:
    optimal = optimal_duration_hours(years_of_experience)
    return max(0.0, 1.0 - abs(duration_hours - optimal) / optimal)


def base_course_priority(course: Course) -> int:
    if "AI" in course.category or "Cloud" in course.category:
        return 5
    if course.rating >= 4.5:
        return 4
    if course.rating >= 4.0:
        return 3
    return 2


class CourseRelevanceScorer(BaseScorer):
    scorer_name = "course"
    recommendation_type = RecommendationType.COURSE

    def score(self, employee: EmployeeProfile, candidate: Any) -> ScoredCandidate:
        course: Course = candidate
        total = 0.0
        reasons: list[str] = []

        if course.category in employee.skill_categories():
            total += W_CATEGORY
            reasons.append(f"Matches your {course.category} expertise")

        boost = self.reference.career_boost_categories(
            employee.position, employee.years_of_experience
        )
        if course.category in boost:
            total += W_CAREER_BOOST
            reasons.append(f"Essential for advancing to senior {employee.position} role")

        total += (course.rating / 5.0) * W_QUALITY
        if course.rating >= 4.5:
            reasons.append(f"Highly rated course ({course.rating}/5.0)")

        fit = duration_score(course.duration_hours, employee.years_of_experience)
        total += fit * W_DURATION
        if fit > 0.7:
            reasons.append("Perfect duration for your experience level")

        if self.reference.is_high_demand(course.category, course.title):
            total += W_HIGH_DEMAND
            reasons.append("High-demand skill in current market")

        return ScoredCandidate(
            item=course,
            score=round(total, 4),
            reasons=reasons,
            fallback_reason="Relevant to your professional development.",
        )

    def priority(self, employee: EmployeeProfile, scored: ScoredCandidate) -> int:
        course: Course = scored.item
        base = base_course_priority(course)
        if scored.score > 0.8 and employee.years_of_experience < 3:
            return 5
        if scored.score > 0.7 and self.reference.is_leadership_track(course.category, employee.position):
            return 5
        if scored.score > 0.6:
            return min(5, base + 1)
        return base

    def confidence(self, score: float) -> float:
        return round(min(0.95, 0.6 + score * 0.4), 4)

    def build_recommendation(
        self, employee: EmployeeProfile, scored: ScoredCandidate, reasoning: str
    ) -> Recommendation:
        course: Course = scored.item
        return Recommendation(
            employee_id=employee.id,
            type=self.recommendation_type,
            title=f"Complete: {course.title}",
            description=course.description,
            reasoning=reasoning,
            priority=self.priority(employee, scored),
            confidence_score=self.confidence(scored.score),
            course_id=course.id,
        )
