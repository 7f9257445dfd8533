"""Tests for ProjectMatchScorer."""

import pytest
from pydantic import ValidationError

from models.schemas.catalog import Course, ProjectStatus
from models.schemas.employee import SkillLevel
from models.schemas.recommendation import RecommendationType
from models.schemas.scored_candidate import ScoredCandidate
from services.recommendation.project_scorer import (
    ProjectMatchScorer,
    growth_opportunity,
    skill_match_ratio,
)

I, A, E = SkillLevel.INTERMEDIATE, SkillLevel.ADVANCED, SkillLevel.EXPERT


@pytest.fixture
def scorer():
    return ProjectMatchScorer(min_score=0.5, top_n=4)


@pytest.fixture
def csharp_dev(make_employee):
    return make_employee(position="Developer", department="Engineering",
                         skills=[(1, "C#", "Programming", A)])


class TestRatios:
    def test_no_requirements_defaults(self, make_project):
        project = make_project()
        assert skill_match_ratio({}, project.required_skills) == 0.8
        assert growth_opportunity({}, project.required_skills) == 0.5

    def test_partial_match(self, make_project):
        project = make_project(requirements={1: A, 2: A})
        skills = {1: E, 2: I}
        assert skill_match_ratio(skills, project.required_skills) == 0.5
        assert growth_opportunity(skills, project.required_skills) == 0.5

    def test_too_many_gaps_caps_growth(self, make_project):
        project = make_project(requirements={1: A, 2: A, 3: A, 4: A})
        assert growth_opportunity({}, project.required_skills) == 0.3


class TestScoring:
    def test_full_match_same_department(self, scorer, csharp_dev, make_project):
        scored = scorer.score(csharp_dev, make_project(requirements={1: A}))
        # 0.40 match + 0.00 growth + 0.20 department + 0.10 timing
        assert scored.score == pytest.approx(0.7)
        assert "Excellent skill match (100%)" in scored.reasons
        assert "Within your department" in scored.reasons
        assert "Perfect timing to join" in scored.reasons
        assert scorer.priority(csharp_dev, scored) == 3

    def test_no_requirements_same_department(self, scorer, csharp_dev, make_project):
        scored = scorer.score(csharp_dev, make_project())
        assert scored.score == pytest.approx(0.77)
        assert scorer.priority(csharp_dev, scored) == 4

    def test_cross_functional(self, scorer, csharp_dev, make_project):
        scored = scorer.score(csharp_dev, make_project(department="IT Operations"))
        assert scored.score == pytest.approx(0.67)
        assert "Cross-functional opportunity" in scored.reasons

    def test_unqualified_employee_falls_below_threshold(self, scorer, make_employee, make_project):
        employee = make_employee(position="Developer", department="Engineering")
        scored = scorer.score(employee, make_project(requirements={1: A, 2: A}))
        assert scored.score == pytest.approx(0.39)
        assert scorer.rank(employee, [make_project(requirements={1: A, 2: A})]) == []

    def test_threshold_is_inclusive(self, scorer):
        assert scorer.passes(0.5)
        assert not scorer.passes(0.4999)


class TestEligibility:
    @pytest.mark.parametrize("status", [ProjectStatus.ON_HOLD, ProjectStatus.COMPLETED, ProjectStatus.CANCELLED])
    def test_closed_status_excluded(self, scorer, csharp_dev, make_project, status):
        assert scorer.rank(csharp_dev, [make_project(status=status)]) == []

    def test_full_team_excluded(self, scorer, csharp_dev, make_project):
        full = make_project(max_team_size=3, assigned_count=3)
        assert full.open_seats == 0
        assert scorer.rank(csharp_dev, [full]) == []

    def test_rank_orders_by_score(self, scorer, csharp_dev, make_project):
        projects = [
            make_project(id=1, department="IT Operations"),
            make_project(id=2),
            make_project(id=3, requirements={1: A}),
        ]
        assert [s.item.id for s in scorer.rank(csharp_dev, projects)] == [2, 3, 1]


class TestPriorityAndConfidence:
    @pytest.mark.parametrize("score,expected", [(0.95, 5), (0.8, 4), (0.6, 3), (0.5, 2)])
    def test_priority_tiers(self, scorer, csharp_dev, make_project, score, expected):
        scored = ScoredCandidate(item=make_project(), score=score)
        assert scorer.priority(csharp_dev, scored) == expected

    def test_confidence(self, scorer):
        assert scorer.confidence(0.5) == pytest.approx(0.85)
        assert scorer.confidence(1.0) == 0.95


class TestBuildRecommendation:
    def test_project_reference(self, scorer, csharp_dev, make_project):
        project = make_project(id=4, name="Cloud Migration")
        rec = scorer.build_recommendation(csharp_dev, scorer.score(csharp_dev, project), "why")
        assert rec.type == RecommendationType.PROJECT
        assert rec.title == "Join Project: Cloud Migration"
        assert rec.project_id == 4
        assert rec.course_id is None and rec.mentor_employee_id is None


class TestScoreBounds:
    @pytest.mark.parametrize("score", [-0.1, 1.5])
    def test_out_of_range_score_rejected(self, make_project, score):
        with pytest.raises(ValidationError):
            ScoredCandidate(item=make_project(), score=score)

    @pytest.mark.parametrize("score", [0.0, 1.0])
    def test_edges_accepted(self, make_project, score):
        assert ScoredCandidate(item=make_project(), score=score).score == score

    def test_course_rating_above_five_rejected(self):
        with pytest.raises(ValidationError):
            Course(id=1, title="Overrated", rating=6.0)

    def test_full_match_scores_at_most_one(self, scorer, make_employee, make_project):
        employee = make_employee(department="Engineering", skills=[(1, "C#", "Programming", E)])
        project = make_project(department="Engineering", requirements={1: I})
        assert 0.0 <= scorer.score(employee, project).score <= 1.0
