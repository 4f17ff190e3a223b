"""
Seed a database with demo data.

Usage:
    python -m database.seed

Clears all rows, then creates one employer, three talents, two open jobs,
one manual application and one pending invitation. Signed tokens for every
seeded user are printed so the API can be exercised straight away.
"""

import asyncio
import logging
from datetime import timedelta

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.integrations.descriptions import DescriptionGenerator
from core.middleware.logging import setup_logging
from core.security import create_access_token
from core.utils.datetime import now
from database.engine import Database
from database.models import (
    Application,
    ApplicationSource,
    Invitation,
    InvitationStatus,
    Job,
    User,
    UserRole,
)

logger = logging.getLogger(__name__)

EMPLOYER_ID = "550e8400-e29b-41d4-a716-446655440001"
TALENT_IDS = (
    "550e8400-e29b-41d4-a716-446655440002",
    "550e8400-e29b-41d4-a716-446655440003",
    "550e8400-e29b-41d4-a716-446655440004",
)
JOB_IDS = (
    "550e8400-e29b-41d4-a716-446655440005",
    "550e8400-e29b-41d4-a716-446655440006",
)
APPLICATION_ID = "550e8400-e29b-41d4-a716-446655440007"
INVITATION_ID = "550e8400-e29b-41d4-a716-446655440008"

USERS = [
    (EMPLOYER_ID, "John Smith", "john.smith@techcorp.com", UserRole.EMPLOYER),
    (TALENT_IDS[0], "Alice Johnson", "alice.johnson@email.com", UserRole.TALENT),
    (TALENT_IDS[1], "Bob Wilson", "bob.wilson@email.com", UserRole.TALENT),
    (TALENT_IDS[2], "Carol Davis", "carol.davis@email.com", UserRole.TALENT),
]

JOBS = [
    (
        JOB_IDS[0],
        "Senior Frontend Developer",
        ["React", "TypeScript", "Next.js", "Tailwind CSS"],
        timedelta(days=30),
    ),
    (
        JOB_IDS[1],
        "Full Stack Engineer",
        ["Node.js", "Express", "PostgreSQL", "React", "TypeScript"],
        timedelta(days=45),
    ),
]

COMPANY_NAME = "TechCorp Inc"


async def clear(session: AsyncSession) -> None:
    """Delete all rows in reverse dependency order."""
    for model in (Invitation, Application, Job, User):
        await session.execute(delete(model))
    await session.commit()


async def seed(session: AsyncSession, generator: DescriptionGenerator) -> None:
    """
    Replace the database contents with the demo data set.

    Args:
        session: Database session
        generator: Description generator used for the seeded jobs
    """
    await clear(session)
    logger.info("Cleared existing data")

    for user_id, name, email, role in USERS:
        session.add(User(id=user_id, name=name, email=email, role=role))
    await session.flush()

    created_at = now()
    for job_id, title, tech_stack, open_for in JOBS:
        description = await generator.generate(title, COMPANY_NAME, tech_stack)
        session.add(
            Job(
                id=job_id,
                title=title,
                company_name=COMPANY_NAME,
                tech_stack=tech_stack,
                deadline=created_at + open_for,
                description=description,
                employer_id=EMPLOYER_ID,
            )
        )
    await session.flush()

    # Alice applied to the frontend role herself
    session.add(
        Application(
            id=APPLICATION_ID,
            job_id=JOB_IDS[0],
            talent_id=TALENT_IDS[0],
            source=ApplicationSource.MANUAL,
        )
    )
    # Bob is invited to the full stack role
    session.add(
        Invitation(
            id=INVITATION_ID,
            job_id=JOB_IDS[1],
            talent_id=TALENT_IDS[1],
            employer_id=EMPLOYER_ID,
            status=InvitationStatus.PENDING,
        )
    )
    await session.commit()

    logger.info(
        f"Seeded {len(USERS)} users, {len(JOBS)} jobs, 1 application, 1 invitation"
    )


async def main() -> None:
    db = Database(settings.database_url, echo=settings.database_echo)
    generator = DescriptionGenerator(
        api_key=settings.google_api_key,
        model=settings.description_model,
        timeout=settings.description_timeout_seconds,
    )
    try:
        await db.init()
        async with db.session() as session:
            await seed(session, generator)
    finally:
        await db.close()

    print("\nAccess tokens (valid for 24 hours):")
    for user_id, name, _, role in USERS:
        token = create_access_token(
            user_id, role, settings.jwt_secret_key, settings.jwt_algorithm
        )
        print(f"  {role.value:<8} {name:<14} {token}")


if __name__ == "__main__":
    setup_logging(log_level=settings.log_level, json_logs=False)
    asyncio.run(main())
