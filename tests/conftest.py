"""Shared fixtures and utilities for tests."""

import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-min-32-chars-long-for-security")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JSON_LOGS", "false")
os.environ.pop("GOOGLE_API_KEY", None)

from datetime import timedelta
from typing import Sequence

import httpx
import pytest
import pytest_asyncio

from core.config import settings
from core.integrations.descriptions import DescriptionGenerator
from core.security import AuthenticatedUser, create_access_token
from core.utils.datetime import now
from database.engine import Database
from database.models import Job, User, UserRole


EMPLOYER_ID = "11111111-1111-4111-8111-111111111111"
OTHER_EMPLOYER_ID = "22222222-2222-4222-8222-222222222222"
TALENT_ID = "33333333-3333-4333-8333-333333333333"
OTHER_TALENT_ID = "44444444-4444-4444-8444-444444444444"
OPEN_JOB_ID = "55555555-5555-4555-8555-555555555555"
EXPIRED_JOB_ID = "66666666-6666-4666-8666-666666666666"
MISSING_ID = "99999999-9999-4999-8999-999999999999"


class StubDescriptionGenerator(DescriptionGenerator):
    """Generator that never calls a model and records its calls."""

    def __init__(self, text: str = "Generated description"):
        super().__init__(api_key=None)
        self.text = text
        self.calls = []

    async def generate(self, title: str, company_name: str, tech_stack: Sequence[str]) -> str:
        self.calls.append((title, company_name, list(tech_stack)))
        return self.text


def make_token(user_id: str, role: UserRole, **kwargs) -> str:
    """Sign a token with the test secret."""
    return create_access_token(
        user_id, role, settings.jwt_secret_key, settings.jwt_algorithm, **kwargs
    )


def auth_headers(user_id: str, role: UserRole) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, role)}"}


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database per test."""
    database = Database("sqlite+aiosqlite:///:memory:")
    await database.init()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(db):
    async with db.session() as session:
        yield session


async def add_seed_rows(session) -> None:
    """
    Two employers, two talents, one open job and one expired job.

    Both jobs belong to the first employer.
    """
    session.add_all([
        User(id=EMPLOYER_ID, name="Erin Employer", email="erin@corp.test", role=UserRole.EMPLOYER),
        User(id=OTHER_EMPLOYER_ID, name="Oscar Other", email="oscar@corp.test", role=UserRole.EMPLOYER),
        User(id=TALENT_ID, name="Tara Talent", email="tara@mail.test", role=UserRole.TALENT),
        User(id=OTHER_TALENT_ID, name="Theo Talent", email="theo@mail.test", role=UserRole.TALENT),
    ])
    await session.flush()

    session.add_all([
        Job(
            id=OPEN_JOB_ID,
            title="Backend Engineer",
            company_name="Acme",
            tech_stack=["Python", "PostgreSQL"],
            deadline=now() + timedelta(days=7),
            description="Build APIs",
            employer_id=EMPLOYER_ID,
        ),
        Job(
            id=EXPIRED_JOB_ID,
            title="Frontend Engineer",
            company_name="Acme",
            tech_stack=["React"],
            deadline=now() - timedelta(days=1),
            description="Build UIs",
            employer_id=EMPLOYER_ID,
        ),
    ])
    await session.commit()


@pytest_asyncio.fixture
async def seeded(session):
    await add_seed_rows(session)
    return session


@pytest_asyncio.fixture
async def file_db(tmp_path):
    """
    Seeded database backed by a file.

    Each session opens its own connection, so operations can run
    concurrently against shared rows.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'talentx.db'}")
    await database.init()
    async with database.session() as session:
        await add_seed_rows(session)
    yield database
    await database.close()


@pytest.fixture
def employer() -> AuthenticatedUser:
    return AuthenticatedUser(id=EMPLOYER_ID, role=UserRole.EMPLOYER)


@pytest.fixture
def other_employer() -> AuthenticatedUser:
    return AuthenticatedUser(id=OTHER_EMPLOYER_ID, role=UserRole.EMPLOYER)


@pytest.fixture
def talent() -> AuthenticatedUser:
    return AuthenticatedUser(id=TALENT_ID, role=UserRole.TALENT)


@pytest.fixture
def other_talent() -> AuthenticatedUser:
    return AuthenticatedUser(id=OTHER_TALENT_ID, role=UserRole.TALENT)


@pytest.fixture
def description_generator() -> StubDescriptionGenerator:
    return StubDescriptionGenerator()


@pytest_asyncio.fixture
async def client(db, seeded, description_generator):
    """
    HTTP client bound to the app without running its lifespan.

    The app shares the test database, so rows created through ``seeded`` are
    visible to requests.
    """
    from api.main import app

    app.state.db = db
    app.state.description_generator = description_generator

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
