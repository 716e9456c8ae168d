"""
Shared fixtures: an isolated app on in-memory SQLite, a client that runs the
app lifespan, and a repository on its own database.
"""

import pytest
from fastapi.testclient import TestClient

from salary_api.config import Settings
from salary_api.database import build_engine, build_session_factory, init_db
from salary_api.main import create_app
from salary_api.repositories.employee import EmployeeRepository


JOHN = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "jobTitle": "Software Engineer",
    "country": "US",
    "grossSalaryCents": 10_000_000,  # $100,000.00
}

JANE = {
    "name": "Jane Smith",
    "email": "jane.smith@example.com",
    "jobTitle": "Product Manager",
    "country": "UK",
    "grossSalaryCents": 15_000_000,
}

RAJ = {
    "name": "Raj Kumar",
    "email": "raj.kumar@example.com",
    "jobTitle": "Software Engineer",
    "country": "IN",
    "grossSalaryCents": 5_000_000,
}

ALICE = {
    "name": "Alice Johnson",
    "email": "alice.johnson@example.com",
    "jobTitle": "Engineering Manager",
    "country": "CA",
    "grossSalaryCents": 12_000_000,
}


def make_settings(**overrides) -> Settings:
    values = {
        "ENVIRONMENT": "test",
        "DATABASE_URL": "sqlite://",
        "RATE_LIMIT_MAX_REQUESTS": 10_000,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    engine = build_engine("sqlite://")
    init_db(engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def repository(db_session):
    return EmployeeRepository(db_session)
