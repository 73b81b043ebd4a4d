"""Test configuration and fixtures."""

import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Disable rate limiting in tests

from jobtracker.core.auth import create_access_token, get_password_hash  # noqa: E402
from jobtracker.core.config import settings  # noqa: E402
from jobtracker.db import Base, Job, User, get_db  # noqa: E402
from jobtracker.domain.context import OwnerContext  # noqa: E402
from jobtracker.main import app  # noqa: E402 - must set env vars before importing

DEFAULT_PASSWORD = "Secret123"

engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(email: str, name: str = "Tester", password: str = DEFAULT_PASSWORD) -> User:
        user = User(name=name, email=email, hashed_password=get_password_hash(password))
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com", name="Owner")


@pytest.fixture
def other_owner(make_user):
    return make_user("other@example.com", name="Other")


@pytest.fixture
def demo_user(make_user):
    return make_user(settings.demo_user_email, name="Demo")


@pytest.fixture
def owner_context(owner):
    return OwnerContext(user=owner)


@pytest.fixture
def other_context(other_owner):
    return OwnerContext(user=other_owner)


@pytest.fixture
def make_job(db_session):
    """Insert a job directly, bypassing the service layer."""

    def _make_job(
        user: User,
        *,
        company: str = "Acme",
        position: str = "Developer",
        status: str = "pending",
        job_type: str = "full-time",
        created_at: datetime | None = None,
    ) -> Job:
        job = Job(
            owner_id=user.id,
            company=company,
            position=position,
            status=status,
            job_type=job_type,
        )
        if created_at is not None:
            job.created_at = created_at
            job.updated_at = created_at
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def auth_headers(owner):
    return {"Authorization": f"Bearer {create_access_token(owner)}"}


@pytest.fixture
def other_headers(other_owner):
    return {"Authorization": f"Bearer {create_access_token(other_owner)}"}


@pytest.fixture
def demo_headers(demo_user):
    return {"Authorization": f"Bearer {create_access_token(demo_user)}"}
