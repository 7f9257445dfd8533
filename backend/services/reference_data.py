"""Static reference tables used by the scorers and the skill-gap analyzer.

Everything here is built once per process into an immutable ReferenceData
value and handed to each scorer by reference. Tables that select by
substring are ordered rule lists: the first matching rule wins, and each
list ends with an explicit default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from models.schemas.employee import SkillLevel

logger = logging.getLogger(__name__)

REFERENCE_DATA_VERSION = "2024.1"

I, A, E = (
    SkillLevel.INTERMEDIATE,
    SkillLevel.ADVANCED,
    SkillLevel.EXPERT,
)

# ---------------------------------------------------------------------------
# (a) Career tracks: position -> positions reachable by upward progression
# ---------------------------------------------------------------------------
CAREER_TRACKS: dict[str, tuple[str, ...]] = {
    # Engineering
    "Junior Developer": (
        "Developer", "Software Developer", "Senior Developer", "Tech Lead",
        "Principal Engineer", "Engineering Manager", "VP of Engineering",
        "Chief Technology Officer", "Chief Architect",
    ),
    "Developer": (
        "Software Developer", "Senior Developer", "Tech Lead",
        "Principal Engineer", "Engineering Manager", "VP of Engineering",
    ),
    "Software Developer": (
        "Senior Developer", "Tech Lead", "Principal Engineer",
        "Engineering Manager", "VP of Engineering",
    ),
    "Frontend Developer": (
        "Senior Frontend Developer", "Tech Lead", "Principal Engineer",
        "Engineering Manager", "VP of Engineering",
    ),
    "Backend Developer": (
        "Senior Backend Developer", "DevOps Engineer", "Senior Systems Architect",
        "Tech Lead", "Principal Engineer", "Engineering Manager",
    ),
    "Mobile Developer": (
        "Senior Mobile Developer", "Tech Lead", "Principal Engineer", "Engineering Manager",
    ),
    "Database Developer": (
        "Senior Database Administrator", "Senior Systems Architect", "Tech Lead",
        "Principal Engineer",
    ),
    "Senior Developer": (
        "Tech Lead", "Principal Engineer", "Engineering Manager", "VP of Engineering",
    ),
    "Senior Frontend Developer": ("Tech Lead", "Principal Engineer", "Engineering Manager"),
    "Senior Backend Developer": (
        "DevOps Engineer", "Senior Systems Architect", "Tech Lead",
        "Principal Engineer", "Engineering Manager",
    ),
    "Senior Mobile Developer": ("Tech Lead", "Principal Engineer", "Engineering Manager"),
    "DevOps Engineer": (
        "Senior Cloud Engineer", "Senior Systems Architect", "Tech Lead",
        "Principal Engineer", "Engineering Manager",
    ),
    "Tech Lead": ("Principal Engineer", "Engineering Manager", "VP of Engineering"),
    "Principal Engineer": (
        "Chief Architect", "Engineering Manager", "VP of Engineering",
        "Chief Technology Officer",
    ),
    "Engineering Manager": ("VP of Engineering", "Chief Technology Officer"),
    # Quality assurance
    "QA Engineer": ("Senior QA Engineer", "QA Manager"),
    "Senior QA Engineer": ("QA Manager",),
    # Data & analytics
    "Data Analyst": ("Senior Data Scientist", "Director of Analytics"),
    "Senior Data Scientist": ("Director of Analytics",),
    "Business Analyst": (
        "Senior Business Analyst", "Senior Product Manager", "Director of Product",
    ),
    "Senior Business Analyst": ("Senior Product Manager", "Director of Product"),
    # Design
    "UX Designer": ("Senior UX Designer",),
    "UI Designer": ("Senior UX Designer",),
    "Senior UX Designer": ("Director of Product",),
    # Product
    "Product Owner": ("Senior Product Manager", "Director of Product"),
    "Senior Product Manager": ("Director of Product",),
    # Marketing
    "Marketing Coordinator": ("Marketing Manager", "VP of Marketing"),
    "Content Writer": ("Senior Content Strategist", "Marketing Manager"),
    "Marketing Manager": ("VP of Marketing",),
    "Senior Content Strategist": ("Marketing Manager", "VP of Marketing"),
    # Operations & support
    "Systems Administrator": (
        "Senior Database Administrator", "Senior Systems Architect", "VP of Operations",
    ),
    "Support Engineer": ("Senior Systems Architect", "Engineering Manager"),
    "Security Analyst": ("Senior Security Engineer", "Chief Security Officer"),
    "Senior Security Engineer": ("Chief Security Officer",),
    # HR
    "HR Coordinator": ("Senior HR Manager",),
    "Senior HR Manager": ("VP of Operations",),
    # Sales
    "Sales Associate": ("Senior Sales Manager",),
    "Senior Sales Manager": ("VP of Marketing",),
}

# ---------------------------------------------------------------------------
# (b) Target-position skill requirements, evaluated top-down
# ---------------------------------------------------------------------------
SENIOR_REQUIREMENTS = {
    "C#": A,
    "JavaScript": A,
    "SQL": A,
    "Cloud Computing": I,
    "System Design": A,
    "Leadership": A,
    "Mentoring": I,
    "Problem Solving": A,
}

LEAD_REQUIREMENTS = {
    "Leadership": A,
    "Project Management": A,
    "Communication": A,
    "Mentoring": A,
    "Technical Architecture": A,
    "C#": E,
    "System Design": E,
}

MANAGER_REQUIREMENTS = {
    "Leadership": E,
    "Project Management": E,
    "Team Management": E,
    "Strategic Planning": A,
    "Budgeting": I,
    "Communication": E,
    "Performance Management": A,
}

ARCHITECT_REQUIREMENTS = {
    "System Design": E,
    "Technical Architecture": E,
    "Cloud Computing": E,
    "Microservices": A,
    "Database Design": A,
    "Security": A,
    "Performance Optimization": A,
}

FULLSTACK_REQUIREMENTS = {
    "C#": A,
    "JavaScript": A,
    "React": A,
    "SQL": A,
    "HTML/CSS": A,
    "API Development": A,
    "Database Design": I,
}

DEFAULT_REQUIREMENTS = {
    "C#": I,
    "JavaScript": I,
    "SQL": I,
    "Problem Solving": I,
    "Communication": I,
}


@dataclass(frozen=True)
class RequirementRule:
    """Matches a lower-cased target position by substring.

    Every ``all_of`` term must be present, and at least one ``any_of`` term
    when any are given.
    """

    name: str
    requirements: Mapping[str, SkillLevel]
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()

    def matches(self, target: str) -> bool:
        if not all(term in target for term in self.all_of):
            return False
        return not self.any_of or any(term in target for term in self.any_of)


REQUIREMENT_RULES: tuple[RequirementRule, ...] = (
    RequirementRule("senior", MappingProxyType(SENIOR_REQUIREMENTS),
                    all_of=("senior",), any_of=("developer", "engineer")),
    RequirementRule("lead", MappingProxyType(LEAD_REQUIREMENTS), any_of=("lead",)),
    RequirementRule("manager", MappingProxyType(MANAGER_REQUIREMENTS), any_of=("manager",)),
    RequirementRule("architect", MappingProxyType(ARCHITECT_REQUIREMENTS), any_of=("architect",)),
    RequirementRule("full stack", MappingProxyType(FULLSTACK_REQUIREMENTS), any_of=("full stack",)),
)

# ---------------------------------------------------------------------------
# (c) Department adjacency, (d) seniority keywords, (e) high-demand keywords
# ---------------------------------------------------------------------------
RELATED_DEPARTMENTS: dict[str, tuple[str, ...]] = {
    "Engineering": ("IT Operations", "Quality Assurance", "Security", "Analytics"),
    "Product": ("Engineering", "Marketing", "Design"),
    "Marketing": ("Product", "Sales", "Design"),
    "Analytics": ("Engineering", "Business", "Marketing"),
}

SENIORITY_KEYWORDS: tuple[str, ...] = (
    "Senior", "Principal", "Lead", "Manager", "Director", "VP", "Chief",
)

HIGH_DEMAND_KEYWORDS: tuple[str, ...] = (
    "AI", "Machine Learning", "Cloud", "Kubernetes", "Docker",
    "React", "Angular", "Vue", "Python", "JavaScript", "TypeScript",
    "DevOps", "Microservices", "Blockchain", "Cybersecurity",
)

# ---------------------------------------------------------------------------
# Course career-boost categories
# ---------------------------------------------------------------------------
# (upper bound on years, exclusive; categories). Last tier is open-ended.
EXPERIENCE_BOOST_TIERS: tuple[tuple[int | None, frozenset[str]], ...] = (
    (2, frozenset({"Programming", "Frontend", "Backend"})),
    (5, frozenset({"Cloud", "DevOps", "Database", "Management"})),
    (None, frozenset({"Leadership", "Management", "Analytics", "AI"})),
)

# Position keyword groups, first match wins.
POSITION_BOOST_RULES: tuple[tuple[tuple[str, ...], frozenset[str]], ...] = (
    (("Developer", "Engineer"), frozenset({"Programming", "Cloud", "DevOps"})),
    (("Manager", "Lead"), frozenset({"Leadership", "Management", "Analytics"})),
    (("Designer",), frozenset({"Design", "Frontend"})),
)

LEADERSHIP_COURSE_CATEGORIES: tuple[str, ...] = ("Leadership", "Management")
SENIOR_SOFT_SKILL_CATEGORY = "Soft Skills"

# ---------------------------------------------------------------------------
# Skill-gap annotations (case-insensitive substring rules, first match wins)
# ---------------------------------------------------------------------------
CRITICAL_SKILLS: tuple[str, ...] = (
    "Leadership", "Communication", "System Design", "Technical Architecture",
)

SKILL_CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("c#", "javascript", "sql"), "Programming"),
    (("leadership", "communication", "management"), "Soft Skills"),
    (("cloud", "architecture", "design"), "Architecture & Cloud"),
    (("project",), "Project Management"),
)
DEFAULT_SKILL_CATEGORY = "Technical"

RESOURCE_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("c#",), ("Microsoft Learn C# Path", "Pluralsight C# Courses", "C# in Depth Book")),
    (("javascript",), ("MDN JavaScript Guide", "freeCodeCamp", "You Don't Know JS Series")),
    (("leadership",), (
        "LinkedIn Leadership Courses", "Harvard Business Review",
        "The 7 Habits of Highly Effective People",
    )),
    (("cloud",), ("Azure Fundamentals", "AWS Cloud Practitioner", "Google Cloud Platform Training")),
    (("sql",), ("SQL Server Documentation", "W3Schools SQL Tutorial", "PostgreSQL Tutorial")),
)
DEFAULT_RESOURCES: tuple[str, ...] = ("Online Courses", "Documentation", "Hands-on Practice")

# (target terms, skill terms, score): contextual importance, checked first
TARGET_IMPORTANCE_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], float], ...] = (
    (("senior", "lead"), ("leadership", "communication"), 0.9),
    (("architect",), ("design", "architecture"), 0.95),
)
SKILL_IMPORTANCE_RULES: tuple[tuple[tuple[str, ...], float], ...] = (
    (("c#", "javascript"), 0.8),
    (("leadership",), 0.75),
    (("cloud",), 0.85),
)
DEFAULT_IMPORTANCE = 0.5


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


@dataclass(frozen=True)
class ReferenceData:
    """Immutable bundle of every reference table the engine reads."""

    version: str
    career_tracks: Mapping[str, frozenset[str]]
    requirement_rules: tuple[RequirementRule, ...]
    default_requirements: Mapping[str, SkillLevel]
    related_departments: Mapping[str, frozenset[str]]
    seniority_keywords: tuple[str, ...]
    high_demand_keywords: tuple[str, ...]
    experience_boost_tiers: tuple[tuple[int | None, frozenset[str]], ...] = EXPERIENCE_BOOST_TIERS
    position_boost_rules: tuple[tuple[tuple[str, ...], frozenset[str]], ...] = POSITION_BOOST_RULES
    critical_skills: tuple[str, ...] = CRITICAL_SKILLS
    skill_category_rules: tuple[tuple[tuple[str, ...], str], ...] = SKILL_CATEGORY_RULES
    resource_rules: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = RESOURCE_RULES

    # --- career tracks -----------------------------------------------------

    def is_position_mapped(self, position: str) -> bool:
        return position in self.career_tracks

    def is_reachable(self, from_position: str, to_position: str) -> bool:
        return to_position in self.career_tracks.get(from_position, frozenset())

    def seniority_count(self, title: str) -> int:
        return sum(1 for keyword in self.seniority_keywords if keyword in title)

    def is_related_department(self, dept1: str, dept2: str) -> bool:
        return (
            dept2 in self.related_departments.get(dept1, frozenset())
            or dept1 in self.related_departments.get(dept2, frozenset())
        )

    # --- courses -----------------------------------------------------------

    def career_boost_categories(self, position: str, years_of_experience: int) -> set[str]:
        categories: set[str] = set()
        for upper, tier in self.experience_boost_tiers:
            if upper is None or years_of_experience < upper:
                categories |= tier
                break
        for keywords, extra in self.position_boost_rules:
            if _contains_any(position, keywords):
                categories |= extra
                break
        return categories

    def is_high_demand(self, category: str, title: str) -> bool:
        category, title = category.lower(), title.lower()
        return any(
            kw.lower() in category or kw.lower() in title
            for kw in self.high_demand_keywords
        )

    @staticmethod
    def is_leadership_track(course_category: str, position: str) -> bool:
        if _contains_any(course_category, LEADERSHIP_COURSE_CATEGORIES):
            return True
        return "Senior" in position and SENIOR_SOFT_SKILL_CATEGORY in course_category

    # --- skill-gap annotations ---------------------------------------------

    def requirements_for(self, target_position: str) -> tuple[str, Mapping[str, SkillLevel]]:
        """Return (rule name, skill -> required level) for a target position."""
        target = target_position.lower()
        for rule in self.requirement_rules:
            if rule.matches(target):
                return rule.name, rule.requirements
        return "default", self.default_requirements

    def is_critical_skill(self, skill_name: str) -> bool:
        lowered = skill_name.lower()
        return any(cs.lower() in lowered for cs in self.critical_skills)

    def skill_category(self, skill_name: str) -> str:
        lowered = skill_name.lower()
        for terms, category in self.skill_category_rules:
            if _contains_any(lowered, terms):
                return category
        return DEFAULT_SKILL_CATEGORY

    def recommended_resources(self, skill_name: str) -> list[str]:
        lowered = skill_name.lower()
        for terms, resources in self.resource_rules:
            if _contains_any(lowered, terms):
                return list(resources)
        return list(DEFAULT_RESOURCES)

    @staticmethod
    def importance_score(skill_name: str, target_position: str) -> float:
        skill, target = skill_name.lower(), target_position.lower()
        for target_terms, skill_terms, score in TARGET_IMPORTANCE_RULES:
            if _contains_any(target, target_terms) and _contains_any(skill, skill_terms):
                return score
        for terms, score in SKILL_IMPORTANCE_RULES:
            if _contains_any(skill, terms):
                return score
        return DEFAULT_IMPORTANCE


def build_reference_data() -> ReferenceData:
    """Freeze the module tables into a ReferenceData value."""
    return ReferenceData(
        version=REFERENCE_DATA_VERSION,
        career_tracks=MappingProxyType(
            {pos: frozenset(targets) for pos, targets in CAREER_TRACKS.items()}
        ),
        requirement_rules=REQUIREMENT_RULES,
        default_requirements=MappingProxyType(dict(DEFAULT_REQUIREMENTS)),
        related_departments=MappingProxyType(
            {dept: frozenset(rel) for dept, rel in RELATED_DEPARTMENTS.items()}
        ),
        seniority_keywords=SENIORITY_KEYWORDS,
        high_demand_keywords=HIGH_DEMAND_KEYWORDS,
    )


_reference_data: ReferenceData | None = None


def get_reference_data() -> ReferenceData:
    """Process-wide reference data, built on first use."""
    global _reference_data
    if _reference_data is None:
        _reference_data = build_reference_data()
        logger.info(
            "Reference data %s loaded: %d career tracks, %d requirement rules",
            _reference_data.version,
            len(_reference_data.career_tracks),
            len(_reference_data.requirement_rules),
        )
    return _reference_data
