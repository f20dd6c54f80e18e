"""Shared test fixtures for the job board client test suite."""

import json
import os
from datetime import datetime, timezone

import pytest

from models import Company, Job
from reporting import ErrorReporter

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

BASE_URL = "http://jobs.test"
JOBS_URL = f"{BASE_URL}/api/jobs"


def _load_sample_settings():
    with open(os.path.join(FIXTURES_DIR, "sample_settings.json")) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch):
    """Autouse fixture that injects known test settings for every test.

    Resets settings._settings so get_settings() returns the test data,
    and calls config.reload() to refresh all config globals.
    """
    import config
    import settings

    data = _load_sample_settings()
    monkeypatch.delenv("JOBBOARD_API_URL", raising=False)
    monkeypatch.delenv("JOBBOARD_SETTINGS", raising=False)
    monkeypatch.setattr(settings, "_settings", data)
    config.reload()
    yield data


class CollectingErrorReporter(ErrorReporter):
    def __init__(self):
        self.reports = []

    def report(self, context, error):
        self.reports.append((context, error))


@pytest.fixture
def reporter():
    return CollectingErrorReporter()


@pytest.fixture
def navigator():
    from navigation import HistoryNavigator

    return HistoryNavigator()


@pytest.fixture
def client():
    from api_client import JobsClient

    return JobsClient(base_url=BASE_URL, timeout=5)


@pytest.fixture
def make_job():
    """Factory fixture for creating Job instances with defaults."""

    def _make(**overrides):
        defaults = {
            "title": "Software Engineer",
            "type": "Full-Time",
            "description": "Develop amazing software",
            "location": "Helsinki",
            "salary": 5000,
            "company": Company(
                name="Tech Corp",
                contact_email="hr@tech.com",
                contact_phone="123-456-7890",
            ),
            "id": "123",
            "posted_date": datetime(2025, 11, 1, tzinfo=timezone.utc),
        }
        defaults.update(overrides)
        return Job(**defaults)

    return _make


@pytest.fixture
def job_payload():
    """Wire representation of a single job, as the backend returns it."""
    return load_fixture("job.json")


@pytest.fixture
def jobs_payload():
    """Wire representation of a job list; the last entry uses _id and a string salary."""
    return load_fixture("jobs.json")


def load_fixture(filename):
    """Load a fixture file by name."""
    path = os.path.join(FIXTURES_DIR, filename)
    with open(path) as f:
        if filename.endswith(".json"):
            return json.load(f)
        return f.read()
