"""
Seed script - populates the database with reference data for development.

Usage:
    python -m scripts.seed

Creates:
- the six discipline domains
- the generic skill catalog and per-domain skill sets
- a sample team with two team skills
- a sample frontend ladder for that team
- a development admin (sign in with subject "dev-admin" using a token
  signed with IDENTITY_SHARED_SECRET)

This script is IDEMPOTENT - running it twice won't create duplicates.
Every record is looked up by its natural key before inserting.
"""
import asyncio
import sys
import os

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.database import async_session_maker, init_db
from career_ladder.models.domain import Domain
from career_ladder.models.ladder_config import LadderConfig
from career_ladder.models.skill import Skill, SkillCategory
from career_ladder.models.team import Team
from career_ladder.models.user import Role, User
from career_ladder.services.domain_service import slugify


ALL = [1, 2, 3, 4, 5, 6, 7]


# ─── Dev Admin ─────────────────────────────────────────────────

DEV_ADMIN = {
    "subject": "dev-admin",
    "email": "admin@career-ladder.local",
    "name": "Dev Admin",
}


# ─── Domains ───────────────────────────────────────────────────

DOMAINS = [
    ("Frontend", "User interface and user experience development"),
    ("Backend", "Server-side development and API design"),
    ("DevOps", "Infrastructure, deployment, and operational excellence"),
    ("Mobile", "iOS and Android application development"),
    ("Data Engineering", "Data pipelines, analytics, and machine learning infrastructure"),
    ("QA Engineering", "Quality assurance, testing automation, and release management"),
]


# ─── Generic Skills ────────────────────────────────────────────
# Order matters: the sample ladder takes prefixes of this list.

GENERIC_SKILLS = [
    ("Problem Solving", "Ability to analyze complex problems and develop effective solutions", ALL),
    ("Communication", "Clear written and verbal communication with team members and stakeholders", ALL),
    ("Code Quality", "Writing clean, maintainable, and well-documented code", ALL),
    ("Testing", "Writing and maintaining automated tests", ALL[1:]),
    ("Code Review", "Providing constructive feedback on code changes", ALL[1:]),
    ("Documentation", "Creating and maintaining technical documentation", ALL[1:]),
    ("System Design", "Designing scalable and maintainable software architectures", ALL[3:]),
    ("Mentoring", "Guiding and developing junior team members", ALL[2:]),
    ("Technical Leadership", "Leading technical decisions and driving architectural changes", ALL[4:]),
    ("Strategic Thinking", "Understanding business impact and long-term technical strategy", ALL[5:]),
]


# ─── Domain Skills ─────────────────────────────────────────────

DOMAIN_SKILLS = {
    "frontend": [
        ("HTML/CSS", "Proficiency in semantic HTML and modern CSS", ALL),
        ("JavaScript", "Deep understanding of JavaScript fundamentals and ES6+ features", ALL),
        ("React/Vue.js", "Proficiency in modern frontend frameworks", ALL),
        ("State Management", "Managing application state with Redux, Zustand, or similar", ALL[1:]),
        ("Performance Optimization", "Frontend performance analysis and optimization techniques", ALL[2:]),
        ("Accessibility", "Building accessible web applications following WCAG guidelines", ALL[1:]),
        ("Build Tools", "Webpack, Vite, or similar build tool configuration", ALL[1:]),
    ],
    "backend": [
        ("Programming Language", "Proficiency in Python, Java, Go, or similar backend language", ALL),
        ("API Design", "Designing RESTful APIs and GraphQL schemas", ALL[1:]),
        ("Database Design", "Relational and NoSQL database design and optimization", ALL[1:]),
        ("Authentication & Authorization", "Implementing secure authentication and authorization systems", ALL[1:]),
        ("Microservices", "Designing and implementing microservice architectures", ALL[3:]),
        ("Message Queues", "Working with message brokers like RabbitMQ, Kafka, or Redis", ALL[2:]),
        ("Caching Strategies", "Implementing effective caching at various levels", ALL[2:]),
    ],
    "devops": [
        ("Linux Administration", "Proficiency in Linux system administration and shell scripting", ALL),
        ("Containerization", "Docker and container orchestration with Kubernetes", ALL[1:]),
        ("CI/CD Pipelines", "Building and maintaining continuous integration and deployment pipelines", ALL[1:]),
        ("Cloud Platforms", "AWS, GCP, or Azure infrastructure and services", ALL[1:]),
        ("Infrastructure as Code", "Terraform, CloudFormation, or similar IaC tools", ALL[2:]),
        ("Monitoring & Observability", "Setting up monitoring, logging, and alerting systems", ALL[1:]),
        ("Security Best Practices", "Implementing security measures and compliance requirements", ALL[2:]),
    ],
    "mobile": [
        ("iOS Development", "Swift and iOS app development with UIKit or SwiftUI", ALL),
        ("Android Development", "Kotlin/Java and Android app development", ALL),
        ("Cross-Platform Development", "React Native, Flutter, or similar cross-platform frameworks", ALL[1:]),
        ("Mobile UI/UX", "Designing intuitive mobile user interfaces", ALL[1:]),
        ("App Store Deployment", "Publishing and maintaining apps on App Store and Google Play", ALL[1:]),
    ],
    "data-engineering": [
        ("Data Modeling", "Designing data models and schemas for analytics", ALL[1:]),
        ("ETL/ELT Pipelines", "Building data pipelines for extraction, transformation, and loading", ALL[1:]),
        ("Big Data Technologies", "Hadoop, Spark, or similar big data processing frameworks", ALL[2:]),
        ("Data Warehousing", "Designing and maintaining data warehouses", ALL[2:]),
        ("Machine Learning Infrastructure", "Building infrastructure for ML model training and deployment", ALL[3:]),
    ],
    "qa-engineering": [
        ("Manual Testing", "Comprehensive manual testing strategies and techniques", ALL),
        ("Test Automation", "Building automated test suites for web and mobile applications", ALL[1:]),
        ("Performance Testing", "Load testing and performance analysis of applications", ALL[2:]),
        ("Security Testing", "Identifying security vulnerabilities in applications", ALL[2:]),
        ("Test Strategy", "Developing comprehensive testing strategies for complex systems", ALL[3:]),
    ],
}


# ─── Sample Team ───────────────────────────────────────────────

SAMPLE_TEAM = {
    "name": "Sample Development Team",
    "domains": ["frontend", "backend", "devops"],
}

TEAM_SKILLS = [
    ("Next.js Framework", "Proficiency in Next.js for full-stack React applications", ALL),
    ("Identity Provider Integration", "Working with the company's sign-in provider and session handling", ALL[1:]),
]

# level -> (how many generic skills, how many frontend skills); None = all
FRONTEND_LADDER = {
    1: (3, 2),
    2: (5, 4),
    3: (7, 6),
    4: (8, None),
    5: (9, None),
    6: (None, None),
    7: (None, None),
}


async def _get_or_create_skill(db: AsyncSession, **fields) -> tuple[Skill, bool]:
    result = await db.execute(
        select(Skill).where(
            Skill.name == fields["name"],
            Skill.category == fields["category"],
        )
    )
    for skill in result.scalars().all():
        if skill.domain == fields.get("domain") and skill.team_id == fields.get("team_id"):
            return skill, False

    skill = Skill(**fields)
    db.add(skill)
    await db.flush()
    return skill, True


async def seed_database(db: AsyncSession) -> dict:
    """
    Insert whatever reference data is missing and commit.

    Returns counts of newly created records.
    """
    created = {"users": 0, "domains": 0, "skills": 0, "teams": 0, "ladders": 0}

    # ── Dev admin ─────────────────────────────────────────
    admin = (await db.execute(
        select(User).where(User.subject == DEV_ADMIN["subject"])
    )).scalar_one_or_none()
    if admin is None:
        db.add(User(**DEV_ADMIN, role=Role.ADMIN.value, current_level=1))
        created["users"] += 1

    # ── Domains ───────────────────────────────────────────
    for name, description in DOMAINS:
        slug = slugify(name)
        existing = await db.execute(select(Domain).where(Domain.slug == slug))
        if existing.scalar_one_or_none() is None:
            db.add(Domain(name=name, slug=slug, description=description))
            created["domains"] += 1
    await db.flush()

    # ── Generic skills ────────────────────────────────────
    generic = []
    for name, description, levels in GENERIC_SKILLS:
        skill, is_new = await _get_or_create_skill(
            db,
            name=name,
            description=description,
            category=SkillCategory.GENERIC.value,
            applicable_levels=levels,
        )
        generic.append(skill)
        created["skills"] += int(is_new)

    # ── Domain skills ─────────────────────────────────────
    by_domain = {}
    for domain, skills in DOMAIN_SKILLS.items():
        by_domain[domain] = []
        for name, description, levels in skills:
            skill, is_new = await _get_or_create_skill(
                db,
                name=name,
                description=description,
                category=SkillCategory.DOMAIN.value,
                domain=domain,
                applicable_levels=levels,
            )
            by_domain[domain].append(skill)
            created["skills"] += int(is_new)

    # ── Sample team + team skills ─────────────────────────
    team = (await db.execute(
        select(Team).where(Team.name == SAMPLE_TEAM["name"])
    )).scalars().first()
    if team is None:
        team = Team(name=SAMPLE_TEAM["name"], domains=list(SAMPLE_TEAM["domains"]))
        db.add(team)
        await db.flush()
        created["teams"] += 1

    for name, description, levels in TEAM_SKILLS:
        _, is_new = await _get_or_create_skill(
            db,
            name=name,
            description=description,
            category=SkillCategory.TEAM.value,
            team_id=team.id,
            applicable_levels=levels,
        )
        created["skills"] += int(is_new)

    # ── Sample frontend ladder ────────────────────────────
    # Team skills are left for the team leader to add.
    ladder = (await db.execute(
        select(LadderConfig).where(
            LadderConfig.team_id == team.id,
            LadderConfig.domain == "frontend",
        )
    )).scalar_one_or_none()
    if ladder is None:
        frontend = by_domain["frontend"]
        skills_by_level = {
            str(level): {
                "generic_skills": [str(s.id) for s in generic[:n_generic]],
                "domain_skills": [str(s.id) for s in frontend[:n_domain]],
                "team_skills": [],
            }
            for level, (n_generic, n_domain) in FRONTEND_LADDER.items()
        }
        db.add(LadderConfig(team_id=team.id, domain="frontend", skills_by_level=skills_by_level))
        created["ladders"] += 1

    await db.commit()
    return created


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        created = await seed_database(db)

    for kind, count in created.items():
        if count:
            print(f"  Created {count} {kind}")
        else:
            print(f"  {kind.capitalize()} already exist, skipping...")

    print("\nDone. Next steps:")
    print("  1. Sign in once with your identity provider account")
    print("  2. As dev-admin, assign yourself a role, team and domain")
    print(f"  3. Make someone leader of '{SAMPLE_TEAM['name']}'")


if __name__ == "__main__":
    asyncio.run(seed())
