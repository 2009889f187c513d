from datetime import UTC, datetime

import pytest
import structlog

from core.config import get_settings


class FakeTimestamp:
    """Stand-in for the document store's timestamp type."""

    def __init__(self, seconds: int, nanoseconds: int = 0):
        self.seconds = seconds
        self.nanoseconds = nanoseconds

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds + self.nanoseconds / 1e9, tz=UTC)


class BrokenTimestamp(FakeTimestamp):
    """Timestamp whose converter fails, like one detached from its backend."""

    def to_datetime(self) -> datetime:
        raise RuntimeError("backend gone")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("JOB_SCHEMA_LOG_REJECTIONS", "JOB_SCHEMA_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def now():
    return datetime(2024, 3, 1, 12, 30, tzinfo=UTC)


@pytest.fixture
def queue_item(now):
    return {
        "type": "job",
        "status": "pending",
        "url": "https://jobs.example.com/123",
        "company_name": "Acme",
        "company_id": None,
        "source": "user_submission",
        "submitted_by": "user-1",
        "retry_count": 0,
        "max_retries": 3,
        "created_at": now,
        "updated_at": FakeTimestamp(1709296200),
    }


@pytest.fixture
def job_match(now):
    return {
        "url": "https://jobs.example.com/123",
        "company_name": "Acme",
        "job_title": "Backend Engineer",
        "job_description": "Build services.",
        "match_score": 87,
        "experience_match": 72.5,
        "application_priority": "High",
        "matched_skills": ["python", "postgres"],
        "missing_skills": [],
        "match_reasons": ["Strong backend background"],
        "key_strengths": ["APIs"],
        "potential_concerns": [],
        "customization_recommendations": ["Lead with API work"],
        "requirements": ["5+ years Python"],
        "analyzed_at": now,
        "created_at": now,
        "submitted_by": None,
        "queue_item_id": "q-1",
    }


@pytest.fixture
def content_base(now):
    return {
        "id": "item-1",
        "userId": "user-1",
        "parentId": None,
        "order": 0,
        "createdAt": now,
        "updatedAt": now,
        "createdBy": "me@example.com",
        "updatedBy": "me@example.com",
    }


@pytest.fixture
def content_variants(content_base):
    """One valid document per content item type."""
    return {
        "company": {**content_base, "type": "company", "company": "Acme"},
        "project": {**content_base, "type": "project", "name": "Queue worker"},
        "skill-group": {
            **content_base,
            "type": "skill-group",
            "category": "Languages",
            "skills": ["Python", "TypeScript"],
        },
        "education": {**content_base, "type": "education", "institution": "State U"},
        "profile-section": {
            **content_base,
            "type": "profile-section",
            "heading": "About",
            "content": "Engineer.",
        },
        "accomplishment": {
            **content_base,
            "type": "accomplishment",
            "description": "Cut p99 latency in half",
        },
    }
