"""Demo catalog for the in-memory repositories.

Backs the HTTP API when no real persistence is wired in. Ids are stable
across runs so the demo endpoints can be called with fixed ids.
"""

import logging
from dataclasses import dataclass

from models.schemas.catalog import Course, ProjectCandidate, ProjectSkillRequirement, ProjectStatus
from models.schemas.employee import EmployeeProfile, EmployeeSkill, SkillLevel
from services.repositories import (
    InMemoryCourseRepository,
    InMemoryEmployeeRepository,
    InMemoryProjectRepository,
    InMemoryRecommendationRepository,
)

logger = logging.getLogger(__name__)

B, I, A, E = SkillLevel.BEGINNER, SkillLevel.INTERMEDIATE, SkillLevel.ADVANCED, SkillLevel.EXPERT

# skill_id -> (name, category)
SKILLS: dict[int, tuple[str, str]] = {
    1: ("C#", "Programming"),
    2: ("JavaScript", "Programming"),
    3: ("React", "Frontend"),
    4: ("ASP.NET Core", "Backend"),
    5: ("SQL Server", "Database"),
    6: ("Azure", "Cloud"),
    7: ("Leadership", "Soft Skills"),
    8: ("Project Management", "Management"),
    9: ("Docker", "DevOps"),
    10: ("Kubernetes", "DevOps"),
}

# (title, provider, category, hours, rating, price, url, description)
_COURSES = (
    ("Advanced C# Programming", "Udemy", "Programming", 40, 4.6, 89.99,
     "https://udemy.com/course/advanced-csharp", "Master advanced C# concepts and design patterns"),
    ("JavaScript Fundamentals", "freeCodeCamp", "Programming", 30, 4.7, 0.0,
     "https://freecodecamp.org/javascript", "Complete JavaScript course for beginners"),
    ("Python for Data Science", "Coursera", "Programming", 45, 4.5, 79.99,
     "https://coursera.org/python-data", "Learn Python for data analysis and machine learning"),
    ("React for Beginners", "freeCodeCamp", "Frontend", 25, 4.4, 0.0,
     "https://freecodecamp.org/react", "Learn React fundamentals for free"),
    ("Angular Advanced Patterns", "Pluralsight", "Frontend", 28, 4.5, 199.99,
     "https://pluralsight.com/angular", "Advanced Angular development patterns"),
    ("Azure Fundamentals", "Microsoft Learn", "Cloud", 15, 4.7, 0.0,
     "https://learn.microsoft.com/azure", "Free Azure certification path"),
    ("AWS Solutions Architect", "A Cloud Guru", "Cloud", 60, 4.8, 299.99,
     "https://acloudguru.com/aws-sa", "Prepare for AWS Solutions Architect certification"),
    ("Docker Mastery", "YouTube", "DevOps", 8, 4.3, 0.0,
     "https://youtube.com/docker", "Free Docker tutorial series"),
    ("Kubernetes in Production", "Udemy", "DevOps", 42, 4.7, 119.99,
     "https://udemy.com/kubernetes-prod", "Deploy and manage Kubernetes clusters in production"),
    ("SQL Server Performance Tuning", "Pluralsight", "Database", 32, 4.6, 199.99,
     "https://pluralsight.com/sql-performance", "Optimize SQL Server queries and database performance"),
    ("ASP.NET Core Web API", "Udemy", "Backend", 38, 4.7, 94.99,
     "https://udemy.com/aspnet-webapi", "Build scalable web APIs with ASP.NET Core"),
    ("Leadership Excellence", "Coursera", "Leadership", 20, 4.5, 49.99,
     "https://coursera.org/leadership", "Develop leadership and management skills"),
    ("Agile Project Management", "edX", "Management", 16, 4.3, 149.99,
     "https://edx.org/agile-pm", "Master Agile and Scrum methodologies"),
    ("Technical Team Leadership", "Pluralsight", "Leadership", 18, 4.6, 199.99,
     "https://pluralsight.com/tech-leadership", "Lead technical teams effectively"),
    ("Machine Learning Foundations", "edX", "Analytics", 48, 4.7, 249.99,
     "https://edx.org/ml-foundations", "Introduction to machine learning concepts and algorithms"),
    ("UI/UX Design Fundamentals", "Coursera", "Design", 26, 4.5, 59.99,
     "https://coursera.org/ux-fundamentals", "Learn user experience design principles"),
)

# (first, last, position, department, years, {skill_id: level})
_EMPLOYEES = (
    ("Alex", "Johnson", "Junior Developer", "Engineering", 1, {1: I, 2: B, 5: B}),
    ("Emma", "Thompson", "Frontend Developer", "Engineering", 2, {2: A, 3: I}),
    ("Ryan", "Brown", "QA Engineer", "Quality Assurance", 1, {2: I}),
    ("Sophie", "Wilson", "UX Designer", "Design", 3, {3: B}),
    ("Jake", "Davis", "Backend Developer", "Engineering", 2, {1: I, 4: I, 5: I}),
    ("Maya", "Patel", "Data Analyst", "Analytics", 1, {5: I}),
    ("Ethan", "Taylor", "Software Developer", "Engineering", 2, {1: I, 2: I, 9: B}),
    ("Benjamin", "King", "Senior Developer", "Engineering", 6, {1: A, 2: A, 5: A, 6: I, 7: I}),
    ("Harper", "Wright", "Senior Data Scientist", "Analytics", 7, {5: A, 6: I}),
    ("Elijah", "Lopez", "Senior Frontend Developer", "Engineering", 8, {2: E, 3: E, 7: I}),
    ("William", "Scott", "DevOps Engineer", "Engineering", 6, {6: A, 9: E, 10: A}),
    ("Abigail", "Green", "Senior QA Engineer", "Quality Assurance", 7, {2: A, 7: I}),
    ("James", "Adams", "Tech Lead", "Engineering", 8, {1: E, 2: A, 4: A, 7: A, 8: I}),
    ("Henry", "Gonzalez", "Senior Backend Developer", "Engineering", 6, {1: A, 4: E, 5: A}),
    ("David", "Evans", "Senior Cloud Engineer", "Engineering", 8, {6: E, 9: A, 10: A}),
    ("Michael", "Collins", "Principal Engineer", "Engineering", 12, {1: E, 2: E, 4: E, 6: A, 7: A}),
    ("Joshua", "Cook", "Engineering Manager", "Engineering", 11, {1: A, 7: E, 8: E}),
    ("Amanda", "Bailey", "Director of Analytics", "Analytics", 10, {5: E, 7: A, 8: A}),
    ("Sarah", "Stewart", "VP of Engineering", "Engineering", 15, {7: E, 8: E, 6: A}),
    ("Anthony", "Rogers", "Chief Architect", "Engineering", 16, {1: E, 6: E, 10: E}),
)

# (name, department, status, max team, assigned, description, {skill_id: (level, required)})
_PROJECTS = (
    ("E-commerce Platform", "Engineering", ProjectStatus.PLANNING, 5, 1,
     "Build next-gen e-commerce platform using modern web technologies",
     {1: (A, True), 3: (I, True), 5: (I, False)}),
    ("Mobile App Redesign", "Engineering", ProjectStatus.ACTIVE, 3, 1,
     "Redesign company mobile application with React Native",
     {2: (A, True), 3: (E, True)}),
    ("Cloud Migration", "Engineering", ProjectStatus.PLANNING, 4, 0,
     "Migrate legacy systems to Azure cloud platform",
     {6: (A, True), 9: (I, False)}),
    ("Microservices Architecture", "Engineering", ProjectStatus.PLANNING, 6, 2,
     "Decompose monolithic application into microservices",
     {1: (E, True), 9: (A, True), 10: (I, False)}),
    ("Performance Optimization", "Engineering", ProjectStatus.ACTIVE, 3, 3,
     "Optimize application performance and reduce load times",
     {1: (A, True), 5: (A, True)}),
    ("Customer Analytics Dashboard", "Analytics", ProjectStatus.PLANNING, 3, 0,
     "Build comprehensive analytics dashboard for customer insights",
     {2: (I, True), 5: (A, True)}),
    ("Security Infrastructure Upgrade", "IT Operations", ProjectStatus.ACTIVE, 3, 1,
     "Upgrade cybersecurity infrastructure and monitoring",
     {9: (I, True), 10: (I, False)}),
    ("Test Automation Framework", "Quality Assurance", ProjectStatus.ACTIVE, 3, 1,
     "Build comprehensive automated testing framework",
     {2: (I, True)}),
    ("Website Redesign", "Marketing", ProjectStatus.ON_HOLD, 4, 0,
     "Complete redesign of company website",
     {2: (I, True), 3: (I, True)}),
    ("Process Optimization Study", "Business", ProjectStatus.COMPLETED, 3, 2,
     "Analyze and optimize key business processes",
     {8: (A, True)}),
)

# employee_id -> course ids already enrolled
_ENROLLMENTS = {
    1: {2},
    8: {1, 10},
}


@dataclass
class SeededRepositories:
    employees: InMemoryEmployeeRepository
    courses: InMemoryCourseRepository
    projects: InMemoryProjectRepository
    recommendations: InMemoryRecommendationRepository


def build_courses() -> list[Course]:
    return [
        Course(id=i, title=title, provider=provider, category=category,
               duration_hours=hours, rating=rating, price=price, url=url,
               description=description)
        for i, (title, provider, category, hours, rating, price, url, description)
        in enumerate(_COURSES, start=1)
    ]


def build_employees() -> list[EmployeeProfile]:
    employees = []
    for i, (first, last, position, department, years, levels) in enumerate(_EMPLOYEES, start=1):
        skills = [
            EmployeeSkill(skill_id=skill_id, name=SKILLS[skill_id][0],
                          category=SKILLS[skill_id][1], level=level)
            for skill_id, level in levels.items()
        ]
        employees.append(EmployeeProfile(
            id=i,
            first_name=first,
            last_name=last,
            email=f"{first.lower()}.{last.lower()}@company.com",
            position=position,
            department=department,
            years_of_experience=years,
            skills=skills,
        ))
    return employees


def build_projects() -> list[ProjectCandidate]:
    return [
        ProjectCandidate(
            id=i,
            name=name,
            description=description,
            department=department,
            status=status,
            max_team_size=max_team,
            assigned_count=assigned,
            required_skills={
                skill_id: ProjectSkillRequirement(required_level=level, is_required=required)
                for skill_id, (level, required) in requirements.items()
            },
        )
        for i, (name, department, status, max_team, assigned, description, requirements)
        in enumerate(_PROJECTS, start=1)
    ]


def build_seeded_repositories() -> SeededRepositories:
    """Fresh in-memory repositories loaded with the demo catalog."""
    employees = build_employees()
    courses = build_courses()
    projects = build_projects()
    logger.info(
        "Seeded demo data: %d employees, %d courses, %d projects",
        len(employees), len(courses), len(projects),
    )
    return SeededRepositories(
        employees=InMemoryEmployeeRepository(employees),
        courses=InMemoryCourseRepository(courses, _ENROLLMENTS),
        projects=InMemoryProjectRepository(projects),
        recommendations=InMemoryRecommendationRepository(),
    )
