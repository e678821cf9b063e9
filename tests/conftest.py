"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Admin and regular accounts with auth headers
- Sample job and test (50-question pool)
- Mocked LLM generation
"""

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.crud import test as test_crud
from app.models.job import Job
from app.models.test import TestComplexity
from app.models.user import User
from app.schemas.job import JobDetailsResponse
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "AdminPass123"


def make_questions(count):
    """Question pool where question i has correct option i % 4."""
    return [
        {
            "question": f"Question {i}?",
            "options": [f"Q{i} option {letter}" for letter in "ABCD"],
            "correct_answer": i % 4,
            "explanation": f"Option {'ABCD'[i % 4]} is correct",
        }
        for i in range(count)
    ]


def auth_headers_for(user):
    token = create_access_token(data={"sub": str(user.id), "is_admin": user.is_admin})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
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
def admin_user(db_session):
    user = User(
        id=uuid.uuid4(),
        email="admin@example.com",
        hashed_password=get_password_hash(ADMIN_PASSWORD),
        full_name="Admin User",
        is_active=True,
        is_admin=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers_for(admin_user)


@pytest.fixture
def regular_user(db_session):
    user = User(
        id=uuid.uuid4(),
        email="user@example.com",
        hashed_password=get_password_hash("UserPass123"),
        is_active=True,
        is_admin=False,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user_headers(regular_user):
    return auth_headers_for(regular_user)


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "description": "Build and maintain FastAPI services backed by PostgreSQL.",
        "experience": "3-5 years",
        "skills": ["Python", "FastAPI", "PostgreSQL", "Docker"],
    }


@pytest.fixture
def sample_job(db_session, sample_job_data):
    job = Job(**sample_job_data)
    db_session.add(job)
    db_session.commit()
    db_session.refresh(job)
    return job


@pytest.fixture
def sample_test(db_session, sample_job):
    """Medium complexity test with a 50-question pool."""
    return test_crud.create_with_short_code(
        db_session, sample_job.id, TestComplexity.MEDIUM, make_questions(50)
    )


@pytest.fixture
def mock_generator(monkeypatch):
    """
    Replace the LLM calls used by the API with canned results.

    Set `mock.fail = True` to make both calls raise QuestionGenerationError.
    """
    from app.services.question_generator import QuestionGenerationError

    class MockGenerator:
        fail = False
        calls = []

        async def question_pool(self, job, complexity, count=None, **kwargs):
            self.calls.append(("question_pool", job.id, complexity))
            if self.fail:
                raise QuestionGenerationError("LLM unavailable")
            return make_questions(count or 50)

        async def job_details(self, title, **kwargs):
            self.calls.append(("job_details", title))
            if self.fail:
                raise QuestionGenerationError("LLM unavailable")
            return JobDetailsResponse(
                description=f"Draft description for the {title} role.",
                skills=["Communication", "Problem Solving"],
                experience="2-4 years",
            )

    mock = MockGenerator()
    mock.calls = []
    monkeypatch.setattr("app.api.endpoints.tests.generate_question_pool", mock.question_pool)
    monkeypatch.setattr("app.api.endpoints.jobs.generate_job_details", mock.job_details)
    return mock
