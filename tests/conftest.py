"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- In-memory MongoDB (mongomock) setup/teardown
- FastAPI test client
- Sample request payloads
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.database import get_db, init_db
from main import app


@pytest.fixture
def db_session():
    """
    Create a fresh in-memory database for each test, with the same
    indexes as production.
    """
    mongo_client = mongomock.MongoClient()
    db = mongo_client["jps_test"]
    init_db(db)
    try:
        yield db
    finally:
        mongo_client.drop_database("jps_test")
        mongo_client.close()


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.

    Not used as a context manager, so the lifespan hook (which talks to
    the real MongoDB) does not run.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "position": "Software Engineer",
        "company": "Acme Corp",
        "location": "Bangalore",
        "experience": "3+ years",
        "description": "Build and maintain backend services in Python.",
        "skills": ["Python", "MongoDB", "FastAPI"],
    }


@pytest.fixture
def sample_recruiter_data():
    """Sample recruiter signup data for testing"""
    return {
        "name": "Jane Recruiter",
        "email": "jane@acme.example.com",
        "password": "Sup3rSecret!",
        "company": "Acme Corp",
        "location": "Bangalore",
    }
