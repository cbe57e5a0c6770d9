"""
In-memory stores for TechMatch.

Hold profiles and job postings in lists and answer the same queries as
the MongoDB repositories. Used for fixtures in tests and by the CLI
when matching against a JSON file.
"""

import json
from pathlib import Path
from typing import Any, Iterable, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from techmatch.data.models import CandidateProfile, JobPosting
from techmatch.utils.constants import JobStatus
from techmatch.utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _load_records(model_class: type[ModelT], records: Iterable[Any]) -> list[ModelT]:
    """Validate fixture records, skipping malformed ones with a warning."""
    models = []
    for record in records:
        try:
            models.append(model_class.model_validate(record))
        except PydanticValidationError as e:
            record_id = record.get("_id", record.get("id")) if isinstance(record, dict) else None
            logger.warning(
                f"Skipping malformed {model_class.__name__} record {record_id}: "
                f"{e.error_count()} invalid field(s)"
            )
    return models


class InMemoryCandidateStore:
    """Candidate store backed by a list of profiles."""

    def __init__(self, profiles: Iterable[CandidateProfile] = ()) -> None:
        self._profiles = list(profiles)
        self.fetch_count = 0

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "InMemoryCandidateStore":
        """Load stored profile records; records without skills are left out."""
        return cls(
            _load_records(
                CandidateProfile,
                (r for r in records if not isinstance(r, dict) or r.get("skills") is not None),
            )
        )

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryCandidateStore":
        """Load profiles from a JSON array of profile records."""
        records = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(records, dict):
            records = records.get("profiles", [])
        return cls.from_records(records)

    async def fetch_candidates(self) -> list[CandidateProfile]:
        self.fetch_count += 1
        return [p for p in self._profiles if p.is_candidate]

    async def get_candidate(self, candidate_id: str) -> Optional[CandidateProfile]:
        for profile in self._profiles:
            if profile.id == candidate_id and profile.is_candidate:
                return profile
        return None


class InMemoryJobPostingStore:
    """Job posting store backed by a list of postings."""

    def __init__(self, postings: Iterable[JobPosting] = ()) -> None:
        self._postings = list(postings)

    @classmethod
    def from_json_file(cls, path: Path) -> "InMemoryJobPostingStore":
        """Load postings from a JSON array of job posting records."""
        records = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(records, dict):
            records = records.get("job_postings", [])
        return cls(_load_records(JobPosting, records))

    async def get_posting(self, job_id: str) -> Optional[JobPosting]:
        for posting in self._postings:
            if posting.id == job_id:
                return posting
        return None

    async def fetch_active_postings(
        self, employer_id: Optional[str] = None
    ) -> list[JobPosting]:
        postings = [
            p
            for p in self._postings
            if p.status == JobStatus.ACTIVE.value
            and (employer_id is None or p.employer_id == employer_id)
        ]
        # Newest first; postings without a timestamp sort last
        return sorted(
            postings,
            key=lambda p: p.created_at.timestamp() if p.created_at else float("-inf"),
            reverse=True,
        )
