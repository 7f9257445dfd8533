"""Skill-gap analysis toward a target position.

A pure function of the employee's skill snapshot, the target position text
and the reference data: identical inputs give identical gaps, estimate and
readiness.
"""

import logging
from datetime import datetime, timezone
from typing import Mapping

from models.schemas.employee import EmployeeProfile, SkillLevel
from models.schemas.skill_gap import CareerMilestone, SkillGap, SkillGapAnalysis
from services.reference_data import ReferenceData, get_reference_data

logger = logging.getLogger(__name__)

MIN_MONTHS = 3
MAX_MONTHS = 24
MISSING_MONTHS_PER_LEVEL = 2
IMPROVE_MONTHS_PER_LEVEL = 1

LEARNING_MONTHS_BY_GAP = {1: 2, 2: 4, 3: 6}
LEARNING_MONTHS_DEFAULT = 8


def gap_priority(level_gap: int, is_critical: bool) -> int:
    if level_gap >= 3:
        return 5 if is_critical else 4
    if level_gap == 2:
        return 4 if is_critical else 3
    if level_gap == 1:
        return 3 if is_critical else 2
    return 1


def learning_months(level_gap: int) -> int:
    return LEARNING_MONTHS_BY_GAP.get(level_gap, LEARNING_MONTHS_DEFAULT)


def gap_reasoning(skill: str, current: SkillLevel, required: SkillLevel, target: str) -> str:
    s = skill.lower()
    cur, req = current.label, required.label
    if "leadership" in s:
        return (f"Strong leadership skills are essential for {target}. Moving from {cur} "
                f"to {req} will enable you to guide teams effectively.")
    if "communication" in s:
        return (f"Excellent communication is crucial in {target} roles. Enhancing from "
                f"{cur} to {req} will improve stakeholder interactions.")
    if "system design" in s or "architecture" in s:
        return (f"System design expertise is fundamental for {target}. Advancing from "
                f"{cur} to {req} will allow you to architect scalable solutions.")
    if "c#" in s or "javascript" in s:
        return (f"Advanced {skill} proficiency is required for {target}. Growing from "
                f"{cur} to {req} will enhance your technical capabilities.")
    if "cloud" in s:
        return (f"Cloud computing skills are increasingly important in modern {target} "
                f"roles. Upgrading from {cur} to {req} will keep you competitive.")
    return (f"{skill} proficiency at {req} level is needed for {target}. Current {cur} "
            f"level needs improvement to meet role expectations.")


def estimate_months(missing: list[SkillGap], improve: list[SkillGap]) -> int:
    raw = (
        sum(g.level_gap for g in missing) * MISSING_MONTHS_PER_LEVEL
        + sum(g.level_gap for g in improve) * IMPROVE_MONTHS_PER_LEVEL
    )
    return max(MIN_MONTHS, min(MAX_MONTHS, raw))


def _by_priority(gaps: list[SkillGap]) -> list[SkillGap]:
    return sorted(gaps, key=lambda g: g.priority, reverse=True)


def build_learning_path(missing: list[SkillGap], improve: list[SkillGap]) -> str:
    lines = [
        "**Phase 1: Foundation Building (Months 1-3)**",
        "• Start with highest priority missing skills",
        "• Focus on fundamental concepts and practical application",
        "• Complete online courses and tutorials",
        "",
    ]
    if missing:
        lines.append("**Critical Skills to Acquire:**")
        lines += [f"• {g.skill_name}: {g.current_level.label} → {g.required_level.label}"
                  for g in _by_priority(missing)[:3]]
        lines.append("")

    lines += [
        "**Phase 2: Skill Enhancement (Months 4-6)**",
        "• Work on improving existing skills",
        "• Seek challenging projects that utilize target skills",
        "• Consider mentorship opportunities",
        "",
    ]
    if improve:
        lines.append("**Skills to Enhance:**")
        lines += [f"• {g.skill_name}: {g.current_level.label} → {g.required_level.label}"
                  for g in _by_priority(improve)[:3]]
        lines.append("")

    lines += [
        "**Phase 3: Mastery & Application (Months 7+)**",
        "• Apply learned skills in real-world scenarios",
        "• Lead projects that demonstrate your capabilities",
        "• Share knowledge through mentoring or presentations",
        "• Prepare for role transition or promotion",
    ]
    return "\n".join(lines)


def build_milestones(
    missing: list[SkillGap], improve: list[SkillGap], total_months: int
) -> list[CareerMilestone]:
    combined = _by_priority(missing + improve)
    # quarter points of the estimate, ending on it
    months = [max(1, round(total_months * k / 4)) for k in (1, 2, 3)] + [total_months]
    names = [g.skill_name for g in combined]

    return [
        CareerMilestone(
            month=months[0],
            title="Foundation Phase Complete",
            description="Complete basic skill development and start practical application",
            skills_to_complete=[g.skill_name for g in combined if g.priority >= 4][:3],
        ),
        CareerMilestone(
            month=months[1],
            title="Intermediate Proficiency",
            description="Demonstrate improved skills in real projects",
            skills_to_complete=names[3:6],
        ),
        CareerMilestone(
            month=months[2],
            title="Advanced Application",
            description="Lead initiatives using newly acquired skills",
            skills_to_complete=names[6:8],
        ),
        CareerMilestone(
            month=total_months,
            title="Ready for Target Role",
            description="All skill gaps addressed, prepared for role transition",
            skills_to_complete=["All target skills mastered"],
        ),
    ]


def build_action_items(missing: list[SkillGap], improve: list[SkillGap]) -> list[str]:
    items: list[str] = []
    if missing:
        top = _by_priority(missing)[0]
        items.append(f"Start learning {top.skill_name} immediately - this is your highest priority gap")
    if improve:
        top = _by_priority(improve)[0]
        items.append(f"Find a mentor or advanced course for {top.skill_name}")
    items += [
        "Schedule weekly review sessions to track progress",
        "Set up practice projects to apply new skills",
        "Join relevant professional communities or forums",
    ]
    return items


class SkillGapAnalyzer:
    """Computes missing and to-improve skills against a target position."""

    def __init__(self, reference: ReferenceData | None = None) -> None:
        self.reference = reference or get_reference_data()

    def build_gap(
        self, skill: str, current: SkillLevel, required: SkillLevel, target_position: str
    ) -> SkillGap:
        ref = self.reference
        level_gap = int(required) - int(current)
        return SkillGap(
            skill_name=skill,
            current_level=current,
            required_level=required,
            priority=gap_priority(level_gap, ref.is_critical_skill(skill)),
            reasoning=gap_reasoning(skill, current, required, target_position),
            category=ref.skill_category(skill),
            estimated_learning_months=learning_months(level_gap),
            recommended_resources=ref.recommended_resources(skill),
            importance_score=ref.importance_score(skill, target_position),
        )

    def analyze(
        self,
        skills: Mapping[str, SkillLevel],
        target_position: str,
        employee: EmployeeProfile | None = None,
    ) -> SkillGapAnalysis:
        """Analyze a name -> level skill snapshot against ``target_position``."""
        rule_name, requirements = self.reference.requirements_for(target_position)

        missing: list[SkillGap] = []
        improve: list[SkillGap] = []
        for skill, required in requirements.items():
            current = SkillLevel(skills.get(skill, SkillLevel.BEGINNER))
            if current >= required:
                continue
            gap = self.build_gap(skill, current, required, target_position)
            if current == SkillLevel.BEGINNER:
                missing.append(gap)
            else:
                improve.append(gap)

        missing = _by_priority(missing)
        improve = _by_priority(improve)
        months = estimate_months(missing, improve)

        total = len(requirements)
        met = total - len(missing) - len(improve)
        readiness = met / total * 100 if total else 100.0

        logger.info(
            "Skill gaps for %r (rule=%s): %d missing, %d to improve, %d months, %.1f%% ready",
            target_position, rule_name, len(missing), len(improve), months, readiness,
        )

        return SkillGapAnalysis(
            missing_skills=missing,
            skills_to_improve=improve,
            learning_path=build_learning_path(missing, improve),
            estimated_months=months,
            readiness_percentage=round(readiness, 2),
            milestone_timeline=build_milestones(missing, improve, months),
            target_position=target_position,
            employee_name=employee.full_name if employee else "",
            current_position=employee.position if employee else "",
            years_of_experience=employee.years_of_experience if employee else 0,
            analysis_date=datetime.now(timezone.utc),
            total_skills_required=total,
            skills_met=met,
            high_priority_gaps=sum(1 for g in missing + improve if g.priority >= 4),
            next_action_items=build_action_items(missing, improve),
        )

    def analyze_employee(self, employee: EmployeeProfile, target_position: str) -> SkillGapAnalysis:
        return self.analyze(employee.skill_names(), target_position, employee=employee)
