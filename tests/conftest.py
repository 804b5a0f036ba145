"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies and jobs
- FastAPI test client
- User and admin bearer tokens
"""

import os

# Must be set before the app settings are loaded
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db, run_query
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.models.company import Company
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces foreign keys when asked to"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


SEED_JOBS = [
    ("j1", 10000, "0.1", "c1"),
    ("j2", 20000, "0.2", "c1"),
    ("j3", 30000, "0", "c1"),
    ("j4", None, None, "c1"),
]


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test with three companies and four jobs.
    All tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        db.add_all([
            Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
            Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
            Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
        ])
        db.commit()

        for title, salary, equity, handle in SEED_JOBS:
            run_query(
                db,
                "INSERT INTO jobs (title, salary, equity, company_handle) VALUES ($1, $2, $3, $4)",
                [title, salary, equity, handle],
            )
        db.commit()

        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_job_ids(db_session):
    """IDs of the seeded jobs, in title order (j1..j4)"""
    result = run_query(db_session, "SELECT id FROM jobs ORDER BY title")
    return [row.id for row in result]


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
def test_users(db_session):
    """Register a regular user (u1) and an admin (admin)"""
    user_crud.register(
        db_session, username="u1", password="password1",
        first_name="U1F", last_name="U1L", email="user1@user.com",
    )
    user_crud.register(
        db_session, username="admin", password="password2",
        first_name="AdF", last_name="AdL", email="admin@user.com", is_admin=True,
    )


@pytest.fixture
def u1_headers():
    """Authorization headers for a non-admin user"""
    return {"Authorization": f"Bearer {create_access_token('u1', is_admin=False)}"}


@pytest.fixture
def admin_headers():
    """Authorization headers for an admin user"""
    return {"Authorization": f"Bearer {create_access_token('admin', is_admin=True)}"}
