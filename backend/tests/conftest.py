"""Shared test configuration, pytest markers and fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_record_store
from api.router import limiter
from main import app
from models.schemas.records import ApplicationRecord, JobRecord, ResumeRecord
from services.store import RecordStore

AS_OF = datetime(2024, 6, 30, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP layer through the ASGI app"
    )


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    """TestClient bound to a fresh store, with rate limiting off."""
    app.dependency_overrides[get_record_store] = lambda: store
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()


@pytest.fixture
def manila_job():
    return JobRecord(
        id="job-1",
        title="Frontend Engineer",
        company="Acme",
        location="Manila",
        remote_type="none",
        min_experience_years=3,
        required_skills=["javascript", "node"],
        preferred_skills=["react"],
    )


@pytest.fixture
def manila_resume():
    return ResumeRecord(
        id="resume-1",
        candidate_name="Maria Santos",
        email="maria@example.com",
        location="Manila",
        skills=["JavaScript", "React"],
        education=["BS Computer Science, University of the Philippines"],
        summary="Frontend developer building React single-page apps",
        experience=["Built dashboards with React and TypeScript"],
        total_experience_years=4,
        experience_level="mid",
    )


@pytest.fixture
def seeded_store(store, manila_job, manila_resume):
    """Store with one job, two resumes and two applications."""
    store.add_job(manila_job)
    store.add_resume(manila_resume)
    store.add_resume(ResumeRecord(
        id="resume-2",
        candidate_name="Jose Cruz",
        location="Cebu",
        skills=["php"],
        total_experience_years=1,
    ))
    store.add_application(ApplicationRecord(
        id="app-1",
        job_id="job-1",
        resume_id="resume-1",
        applied_at=datetime(2024, 6, 28, tzinfo=timezone.utc),
    ))
    store.add_application(ApplicationRecord(
        id="app-2",
        job_id="job-1",
        resume_id="resume-2",
        status="reviewed",
        priority=1,
        applied_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
    ))
    return store
