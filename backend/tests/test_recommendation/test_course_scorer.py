"""Tests for CourseRelevanceScorer."""

import pytest

from models.schemas.employee import SkillLevel
from models.schemas.recommendation import RecommendationType
from services.recommendation.course_scorer import (
    CourseRelevanceScorer,
    base_course_priority,
    duration_score,
    optimal_duration_hours,
)

AZURE = (6, "Azure", "Cloud", SkillLevel.INTERMEDIATE)
CSHARP = (1, "C#", "Programming", SkillLevel.INTERMEDIATE)


@pytest.fixture
def scorer():
    return CourseRelevanceScorer(min_score=0.3, top_n=5)


class TestDuration:
    def test_optimal_hours_by_experience(self):
        assert optimal_duration_hours(1) == 20
        assert optimal_duration_hours(2) == 35
        assert optimal_duration_hours(4) == 35
        assert optimal_duration_hours(5) == 50

    def test_duration_score(self):
        assert duration_score(20, 1) == 1.0
        assert duration_score(40, 1) == 0.0
        assert duration_score(60, 1) == 0.0  # floored at zero
        assert duration_score(25, 6) == pytest.approx(0.5)


class TestBasePriority:
    def test_cloud_and_ai_categories(self, make_course):
        assert base_course_priority(make_course(category="Cloud", rating=3.0)) == 5
        assert base_course_priority(make_course(category="AI Engineering", rating=3.0)) == 5

    def test_rating_tiers(self, make_course):
        assert base_course_priority(make_course(rating=4.7)) == 4
        assert base_course_priority(make_course(rating=4.2)) == 3
        assert base_course_priority(make_course(rating=3.9)) == 2


class TestScoring:
    def test_cloud_course_for_cloud_developer(self, scorer, make_employee, make_course):
        employee = make_employee(position="Developer", years=3, skills=[AZURE])
        course = make_course(category="Cloud", rating=4.8, duration_hours=35, title="Azure Deep Dive")

        scored = scorer.score(employee, course)
        # 0.30 category + 0.25 boost + 0.192 quality + 0.15 duration + 0.10 demand
        assert scored.score == pytest.approx(0.992)
        assert "Matches your Cloud expertise" in scored.reasons
        assert "Essential for advancing to senior Developer role" in scored.reasons
        assert "Highly rated course (4.8/5.0)" in scored.reasons
        assert "High-demand skill in current market" in scored.reasons
        assert scorer.priority(employee, scored) == 5

    def test_quality_only(self, scorer, make_employee, make_course):
        employee = make_employee(position="Accountant", years=3, skills=[])
        course = make_course(category="Finance", rating=4.0, duration_hours=70, title="Ledgers")

        scored = scorer.score(employee, course)
        assert scored.score == pytest.approx(0.16)
        assert scored.reasons == []
        assert scored.reason_text == "Relevant to your professional development."

    def test_score_bounded(self, scorer, make_employee, make_course):
        employee = make_employee(position="Developer", years=1, skills=[CSHARP])
        course = make_course(category="Programming", rating=5.0, duration_hours=20, title="Python")
        scored = scorer.score(employee, course)
        assert 0.0 <= scored.score <= 1.0
        assert scored.score == pytest.approx(1.0)


class TestPriorityAndConfidence:
    def test_early_career_high_score(self, scorer, make_employee, make_course):
        employee = make_employee(position="Developer", years=1, skills=[CSHARP])
        course = make_course(category="Programming", rating=4.1, duration_hours=20, title="Python")
        scored = scorer.score(employee, course)
        assert scored.score > 0.8
        assert scorer.priority(employee, scored) == 5

    def test_leadership_track_boost(self, scorer, make_employee, make_course):
        employee = make_employee(
            position="Engineering Manager", years=10,
            skills=[(7, "Leadership", "Leadership", SkillLevel.ADVANCED)],
        )
        course = make_course(category="Leadership", rating=4.0, duration_hours=50, title="Leading Teams")
        scored = scorer.score(employee, course)
        # 0.30 + 0.25 + 0.16 + 0.15, no demand keyword
        assert scored.score == pytest.approx(0.86)
        assert scorer.priority(employee, scored) == 5

    def test_low_score_keeps_base_priority(self, scorer, make_employee, make_course):
        employee = make_employee(position="Accountant", years=3)
        course = make_course(category="Finance", rating=3.5, duration_hours=70, title="Ledgers")
        scored = scorer.score(employee, course)
        assert scorer.priority(employee, scored) == 2

    @pytest.mark.parametrize("score", [0.0, 0.3, 0.7, 1.0])
    def test_confidence_bounds(self, scorer, score):
        confidence = scorer.confidence(score)
        assert 0.6 <= confidence <= 0.95

    def test_confidence_capped(self, scorer):
        assert scorer.confidence(1.0) == 0.95
        assert scorer.confidence(0.5) == pytest.approx(0.8)


class TestRank:
    def test_excludes_enrolled_courses(self, scorer, make_employee, make_course):
        employee = make_employee(position="Developer", years=3, skills=[AZURE])
        courses = [
            make_course(id=1, category="Cloud", rating=4.8, title="Azure"),
            make_course(id=2, category="Cloud", rating=4.5, title="AWS"),
        ]
        ranked = scorer.rank(employee, courses, exclude_ids={1})
        assert [s.item.id for s in ranked] == [2]

    def test_threshold_is_exclusive(self, make_employee, make_course):
        scorer = CourseRelevanceScorer(min_score=0.16, top_n=5)
        employee = make_employee(position="Accountant", years=3)
        course = make_course(category="Finance", rating=4.0, duration_hours=70, title="Ledgers")
        assert scorer.rank(employee, [course]) == []

    def test_sorted_and_truncated(self, make_employee, make_course):
        scorer = CourseRelevanceScorer(min_score=0.0, top_n=2)
        employee = make_employee(position="Developer", years=3, skills=[AZURE])
        courses = [
            make_course(id=1, category="Finance", rating=3.0, duration_hours=70, title="Ledgers"),
            make_course(id=2, category="Cloud", rating=4.8, title="Azure"),
            make_course(id=3, category="Programming", rating=4.0, title="C# Basics"),
        ]
        ranked = scorer.rank(employee, courses)
        assert [s.item.id for s in ranked] == [2, 3]

    def test_thread_pool_matches_sequential(self, make_employee, make_course):
        employee = make_employee(position="Developer", years=3, skills=[AZURE])
        courses = [make_course(id=i, rating=3.0 + i / 10, title=f"Course {i}") for i in range(1, 9)]
        sequential = CourseRelevanceScorer(min_score=0.0, top_n=10).rank(employee, courses)
        parallel = CourseRelevanceScorer(min_score=0.0, top_n=10, max_workers=4).rank(employee, courses)
        assert [s.item.id for s in parallel] == [s.item.id for s in sequential]


class TestBuildRecommendation:
    def test_course_reference(self, scorer, make_employee, make_course):
        employee = make_employee(position="Developer", years=3, skills=[AZURE])
        course = make_course(id=7, category="Cloud", rating=4.8, title="Azure Deep Dive")
        scored = scorer.score(employee, course)

        rec = scorer.build_recommendation(employee, scored, "reason")
        assert rec.type == RecommendationType.COURSE
        assert rec.title == "Complete: Azure Deep Dive"
        assert rec.course_id == 7
        assert rec.mentor_employee_id is None and rec.project_id is None
        assert rec.reasoning == "reason"
        assert 1 <= rec.priority <= 5
