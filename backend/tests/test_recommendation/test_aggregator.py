"""Tests for RecommendationAggregator over the in-memory repositories."""

import asyncio

import pytest

from models.schemas.catalog import ProjectStatus
from models.schemas.employee import SkillLevel
from models.schemas.recommendation import RecommendationType
from services.errors import EmployeeNotFoundError, RecommendationNotFoundError
from services.reasoning import ReasoningGenerator
from services.recommendation.aggregator import FALLBACK_REASONING, RecommendationAggregator
from services.recommendation.course_scorer import CourseRelevanceScorer
from services.recommendation.mentor_scorer import MentorEligibilityScorer
from services.recommendation.project_scorer import ProjectMatchScorer
from services.recommendation.skill_gap_analyzer import SkillGapAnalyzer
from services.repositories import (
    InMemoryCourseRepository,
    InMemoryEmployeeRepository,
    InMemoryProjectRepository,
    InMemoryRecommendationRepository,
)

I = SkillLevel.INTERMEDIATE


class FixedReasoning(ReasoningGenerator):
    name = "fixed"

    def __init__(self, text="AI text.", on_call=None):
        self.text = text
        self.on_call = on_call
        self.calls = 0

    async def generate(self, employee, candidate):
        self.calls += 1
        if self.on_call is not None:
            self.on_call(self.calls)
        return self.text


class FailingReasoning(ReasoningGenerator):
    name = "failing"

    def __init__(self, error):
        self.error = error

    async def generate(self, employee, candidate):
        raise self.error


class BrokenCourseRepository(InMemoryCourseRepository):
    async def list_all(self):
        raise RuntimeError("catalog offline")


class BrokenEmployeeRepository(InMemoryEmployeeRepository):
    async def get_with_skills(self, employee_id):
        raise RuntimeError("db offline")


@pytest.fixture
def repos(make_employee, make_course, make_project):
    employee = make_employee(
        id=1, position="Developer", department="Engineering", years=3,
        skills=[(1, "C#", "Programming", I), (6, "Azure", "Cloud", I)],
    )
    mentors = [
        make_employee(id=2, position="Senior Developer", department="Engineering", years=8,
                      first_name="Benjamin", last_name="King"),
        make_employee(id=3, position="Tech Lead", department="Engineering", years=5),
    ]
    courses = [
        make_course(id=1, title="Azure Deep Dive", category="Cloud", rating=4.8),
        make_course(id=2, title="Advanced C#", category="Programming", rating=4.6, duration_hours=40),
        make_course(id=3, title="Watercolours", category="Art", rating=2.0, duration_hours=90),
    ]
    projects = [
        make_project(id=1, name="Cloud Migration"),
        make_project(id=2, name="Frozen", status=ProjectStatus.ON_HOLD),
    ]
    return {
        "employees": InMemoryEmployeeRepository([employee, *mentors]),
        "courses": InMemoryCourseRepository(courses),
        "projects": InMemoryProjectRepository(projects),
        "recommendations": InMemoryRecommendationRepository(),
    }


def build_aggregator(repos, generator=None, course_repo=None, employee_repo=None):
    return RecommendationAggregator(
        employee_repo=employee_repo or repos["employees"],
        course_repo=course_repo or repos["courses"],
        project_repo=repos["projects"],
        recommendation_repo=repos["recommendations"],
        reasoning_generator=generator or FixedReasoning(),
        course_scorer=CourseRelevanceScorer(min_score=0.3, top_n=5),
        mentor_scorer=MentorEligibilityScorer(min_score=0.4, top_n=3),
        project_scorer=ProjectMatchScorer(min_score=0.5, top_n=4),
        analyzer=SkillGapAnalyzer(),
    )


class TestGenerate:
    @pytest.mark.asyncio
    async def test_generates_all_three_types(self, repos):
        aggregator = build_aggregator(repos)
        recs = await aggregator.generate_recommendations(1)

        by_type = {}
        for rec in recs:
            by_type.setdefault(rec.type, []).append(rec)
        assert [r.course_id for r in by_type[RecommendationType.COURSE]] == [1, 2]
        assert [r.mentor_employee_id for r in by_type[RecommendationType.MENTOR]] == [2]
        assert [r.project_id for r in by_type[RecommendationType.PROJECT]] == [1]

    @pytest.mark.asyncio
    async def test_sorted_and_bounded(self, repos):
        recs = await build_aggregator(repos).generate_recommendations(1)
        keys = [(r.priority, r.confidence_score) for r in recs]
        assert keys == sorted(keys, reverse=True)
        for rec in recs:
            assert 1 <= rec.priority <= 5
            assert 0.0 <= rec.confidence_score <= 1.0

    @pytest.mark.asyncio
    async def test_records_are_persisted(self, repos):
        recs = await build_aggregator(repos).generate_recommendations(1)
        stored = await repos["recommendations"].list_for_employee(1)
        assert {r.id for r in stored} == {r.id for r in recs}
        assert all(r.id is not None and r.created_date is not None for r in recs)

    @pytest.mark.asyncio
    async def test_reasoning_combines_signals_and_generator(self, repos):
        recs = await build_aggregator(repos).generate_recommendations(1)
        mentor = next(r for r in recs if r.type == RecommendationType.MENTOR)
        assert mentor.reasoning == (
            "5 years more experience in same track; "
            "Same department and career track expertise. AI text."
        )

    @pytest.mark.asyncio
    async def test_enrolled_courses_excluded(self, repos):
        repos["courses"].enroll(1, 1)
        recs = await build_aggregator(repos).generate_recommendations(1)
        course_ids = {r.course_id for r in recs if r.type == RecommendationType.COURSE}
        assert course_ids == {2}

    @pytest.mark.asyncio
    async def test_missing_employee_raises(self, repos):
        with pytest.raises(EmployeeNotFoundError, match="Employee with ID 99 not found"):
            await build_aggregator(repos).generate_recommendations(99)

    @pytest.mark.asyncio
    async def test_unexpected_failure_returns_empty(self, repos):
        aggregator = build_aggregator(repos, course_repo=BrokenCourseRepository())
        assert await aggregator.generate_recommendations(1) == []

    @pytest.mark.asyncio
    async def test_employee_lookup_failure_returns_empty(self, repos):
        aggregator = build_aggregator(repos, employee_repo=BrokenEmployeeRepository())
        assert await aggregator.generate_recommendations(1) == []
        assert await repos["recommendations"].list_for_employee(1) == []


class TestReasoningFailures:
    @pytest.mark.asyncio
    async def test_generator_error_uses_fallback(self, repos):
        aggregator = build_aggregator(repos, FailingReasoning(RuntimeError("quota")))
        recs = await aggregator.generate_recommendations(1)
        assert len(recs) == 4
        assert all(r.reasoning.endswith(FALLBACK_REASONING) for r in recs)

    @pytest.mark.asyncio
    async def test_generator_cancellation_uses_fallback(self, repos):
        aggregator = build_aggregator(repos, FailingReasoning(asyncio.CancelledError()))
        recs = await aggregator.generate_recommendations(1)
        assert len(recs) == 4
        assert all(r.reasoning.endswith(FALLBACK_REASONING) for r in recs)


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancelled_before_start(self, repos):
        event = asyncio.Event()
        event.set()
        generator = FixedReasoning()
        recs = await build_aggregator(repos, generator).generate_recommendations(1, event)
        assert recs == []
        assert generator.calls == 0
        assert await repos["recommendations"].list_for_employee(1) == []

    @pytest.mark.asyncio
    async def test_cancel_mid_run_keeps_saved_records(self, repos):
        event = asyncio.Event()

        def cancel_on_second(call):
            if call == 2:
                event.set()

        generator = FixedReasoning(on_call=cancel_on_second)
        recs = await build_aggregator(repos, generator).generate_recommendations(1, event)
        assert len(recs) == 1
        assert recs[0].course_id == 1
        stored = await repos["recommendations"].list_for_employee(1)
        assert [r.id for r in stored] == [recs[0].id]
        assert generator.calls == 2


class TestAccept:
    @pytest.mark.asyncio
    async def test_accept_marks_record(self, repos):
        aggregator = build_aggregator(repos)
        recs = await aggregator.generate_recommendations(1)

        accepted = await aggregator.accept_recommendation(recs[0].id)
        assert accepted.is_accepted
        assert accepted.accepted_date is not None
        assert (await repos["recommendations"].load(recs[0].id)).is_accepted

    @pytest.mark.asyncio
    async def test_accept_missing_raises(self, repos):
        with pytest.raises(RecommendationNotFoundError):
            await build_aggregator(repos).accept_recommendation(12345)


class TestSkillGaps:
    @pytest.mark.asyncio
    async def test_delegates_to_analyzer(self, repos):
        result = await build_aggregator(repos).analyze_skill_gaps(1, "Senior Software Engineer")
        assert result.current_position == "Developer"
        assert {g.skill_name for g in result.skills_to_improve} == {"C#"}
        assert 3 <= result.estimated_months <= 24

    @pytest.mark.asyncio
    async def test_missing_employee_raises(self, repos):
        with pytest.raises(EmployeeNotFoundError):
            await build_aggregator(repos).analyze_skill_gaps(42, "Tech Lead")
