"""Tests for the demo data seed."""

import pytest
from sqlalchemy import func, select

from core.utils.datetime import is_expired
from database import seed as seed_module
from database.models import (
    Application,
    ApplicationSource,
    Invitation,
    InvitationStatus,
    Job,
    User,
    UserRole,
)


async def count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


class TestSeed:

    @pytest.mark.asyncio
    async def test_seed_creates_demo_data(self, session, description_generator):
        await seed_module.seed(session, description_generator)

        assert await count(session, User) == 4
        assert await count(session, Job) == 2
        assert await count(session, Application) == 1
        assert await count(session, Invitation) == 1

        result = await session.execute(select(User).where(User.role == UserRole.TALENT))
        assert {user.name for user in result.scalars()} == {
            "Alice Johnson",
            "Bob Wilson",
            "Carol Davis",
        }

        result = await session.execute(select(Job))
        jobs = result.scalars().all()
        assert all(not is_expired(job.deadline) for job in jobs)
        assert all(job.description == "Generated description" for job in jobs)
        assert len(description_generator.calls) == 2

        application = await session.get(Application, seed_module.APPLICATION_ID)
        assert application.source == ApplicationSource.MANUAL

        invitation = await session.get(Invitation, seed_module.INVITATION_ID)
        assert invitation.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_seed_replaces_existing_rows(self, session, description_generator):
        await seed_module.seed(session, description_generator)
        await seed_module.seed(session, description_generator)

        assert await count(session, User) == 4
        assert await count(session, Job) == 2
