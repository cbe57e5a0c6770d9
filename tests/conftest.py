"""
Shared test fixtures for the TechMatch test suite.

Sets environment variables before any techmatch imports so settings load
in testing mode, then provides profile factories, in-memory stores and
stub MongoDB collections.
"""

import os

# === Set environment BEFORE any techmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "techmatch_test")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

from datetime import datetime
from typing import Any, Optional

import pytest

from techmatch.data.models import CandidateProfile, JobPosting
from techmatch.data.repositories import InMemoryCandidateStore, InMemoryJobPostingStore
from techmatch.utils.config import MatchingSettings


LONG_BIO = "Full-stack engineer who enjoys building reliable web products for users."
assert len(LONG_BIO) > 50


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_profile():
    """Factory that returns a callable to build CandidateProfile models."""

    counter = {"n": 0}

    def _factory(
        skills: Optional[list[str]] = None,
        experience_level: Optional[str] = None,
        bio: Optional[str] = None,
        location: Optional[str] = None,
        full_name: Optional[str] = "Jane Smith",
        id: Optional[str] = None,
        **kwargs: Any,
    ) -> CandidateProfile:
        counter["n"] += 1
        return CandidateProfile(
            id=id or f"cand-{counter['n']}",
            full_name=full_name,
            skills=skills if skills is not None else [],
            experience_level=experience_level,
            bio=bio,
            location=location,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_posting():
    """Factory that returns a callable to build JobPosting models."""

    counter = {"n": 0}

    def _factory(
        required_skills: Optional[list[str]] = None,
        title: str = "Frontend Engineer",
        status: str = "active",
        employer_id: str = "emp-1",
        created_at: Optional[datetime] = None,
        id: Optional[str] = None,
        **kwargs: Any,
    ) -> JobPosting:
        counter["n"] += 1
        return JobPosting(
            id=id or f"job-{counter['n']}",
            title=title,
            required_skills=required_skills if required_skills is not None else ["React"],
            status=status,
            employer_id=employer_id,
            created_at=created_at or datetime(2024, 1, counter["n"]),
            company_name="Acme Corp",
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def senior_react_profile(make_profile):
    """Senior candidate who scores 75 against React + Node.js."""
    return make_profile(
        id="cand-senior",
        full_name="Alex Rivera",
        skills=["React", "TypeScript"],
        experience_level="senior",
        bio="x" * 60,
        location="NY",
    )


@pytest.fixture
def sample_profile_records() -> list[dict[str, Any]]:
    """Stored profile records as they come out of the profiles collection."""
    return [
        {
            "_id": "p-1",
            "user_id": "u-1",
            "user_type": "candidate",
            "full_name": "Alex Rivera",
            "location": "NY",
            "skills": ["React", "TypeScript", "Node.js"],
            "experience_level": "senior",
            "bio": LONG_BIO,
        },
        {
            "_id": "p-2",
            "user_id": "u-2",
            "user_type": "candidate",
            "full_name": None,
            "location": None,
            "skills": ["Go"],
            "experience_level": None,
            "bio": None,
        },
        {
            "_id": "p-3",
            "user_id": "u-3",
            "user_type": "candidate",
            "full_name": "Sam Lee",
            "skills": None,
        },
        {
            "_id": "p-4",
            "user_id": "u-4",
            "user_type": "employer",
            "full_name": "Hiring Manager",
            "skills": ["React"],
        },
    ]


@pytest.fixture
def candidate_store(sample_profile_records):
    return InMemoryCandidateStore.from_records(sample_profile_records)


@pytest.fixture
def job_store(make_posting):
    return InMemoryJobPostingStore(
        [
            make_posting(id="job-react", title="React Developer", required_skills=["React", "Node.js"]),
            make_posting(id="job-go", title="Go Developer", required_skills=["Go", "Kubernetes"]),
            make_posting(id="job-closed", title="Old Role", required_skills=["React"], status="closed"),
            make_posting(id="job-other", title="Other Employer", required_skills=["TypeScript"], employer_id="emp-2"),
            make_posting(id="job-empty", title="No Skills", required_skills=[]),
        ]
    )


@pytest.fixture
def matching_settings():
    return MatchingSettings()


# ---------------------------------------------------------------------------
# Stub MongoDB access (no server required)
# ---------------------------------------------------------------------------


class StubCursor:
    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents
        self.sort_args: Optional[tuple[str, int]] = None
        self.to_list_length: Any = "unset"

    def sort(self, key: str, direction: int) -> "StubCursor":
        self.sort_args = (key, direction)
        self._documents = sorted(
            self._documents, key=lambda d: d.get(key), reverse=direction < 0
        )
        return self

    async def to_list(self, length: Any = None) -> list[dict[str, Any]]:
        self.to_list_length = length
        return list(self._documents)


class StubCollection:
    """Records the queries it receives and returns canned documents."""

    def __init__(
        self,
        documents: Optional[list[dict[str, Any]]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.documents = documents or []
        self.error = error
        self.queries: list[dict[str, Any]] = []
        self.cursors: list[StubCursor] = []

    def find(self, query: dict[str, Any]) -> StubCursor:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        cursor = StubCursor(self.documents)
        self.cursors.append(cursor)
        return cursor

    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.documents[0] if self.documents else None


class StubDatabaseManager:
    def __init__(self, collection: StubCollection) -> None:
        self.collection = collection
        self.requested: list[str] = []

    def get_async_collection(self, name: str) -> StubCollection:
        self.requested.append(name)
        return self.collection


@pytest.fixture
def stub_collection_factory():
    def _factory(documents=None, error=None):
        collection = StubCollection(documents, error)
        return collection, StubDatabaseManager(collection)

    return _factory
