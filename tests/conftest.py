"""Shared fixtures for Job Scout tests."""

from datetime import datetime, timedelta, timezone

import pytest

from job_scout.schemas.job import Job


@pytest.fixture
def now():
    """Fixed clock so recency buckets are deterministic."""
    return datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def ago(now):
    """ISO timestamp for a moment before `now`."""

    def _ago(**delta) -> str:
        return (now - timedelta(**delta)).isoformat()

    return _ago


@pytest.fixture
def make_job():
    """Build a Job with sensible defaults."""

    def _make_job(**overrides) -> Job:
        data = {
            "title": "Backend Engineer",
            "company": "Acme",
            "location": "Remote",
            "postedDate": "",
            "salaryRange": "Not specified",
            "link": "https://jobs.example.com/1",
            "description": "Build APIs in Python.",
        }
        data.update(overrides)
        return Job.model_validate(data)

    return _make_job
