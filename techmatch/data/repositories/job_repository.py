"""
Job posting repository for TechMatch.

Reads employer job postings so they can be matched against candidates.
"""

from typing import Any, Optional

from techmatch.data.database import DatabaseManager
from techmatch.data.models import JobPosting
from techmatch.utils.config import get_settings
from techmatch.utils.constants import JobStatus
from techmatch.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)


class JobPostingRepository(BaseRepository[JobPosting]):
    """Repository for job posting reads."""

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        collection_name: Optional[str] = None,
    ) -> None:
        super().__init__(db_manager)
        self._collection_name = (
            collection_name or get_settings().database.job_postings_collection
        )

    @property
    def collection_name(self) -> str:
        return self._collection_name

    @property
    def model_class(self) -> type[JobPosting]:
        return JobPosting

    async def get_posting(self, job_id: str) -> Optional[JobPosting]:
        """Get a job posting by id."""
        return await self.get_by_id_async(job_id)

    async def fetch_active_postings(
        self, employer_id: Optional[str] = None
    ) -> list[JobPosting]:
        """
        Get active job postings, newest first.

        Args:
            employer_id: Restrict to one employer's postings
        """
        query: dict[str, Any] = {"status": JobStatus.ACTIVE.value}
        if employer_id is not None:
            query["employer_id"] = employer_id

        postings = await self.find_all_async(query, sort_by="created_at", sort_order=-1)
        logger.debug(f"Fetched {len(postings)} active job postings")
        return postings


# Singleton instance
_job_posting_repository: Optional[JobPostingRepository] = None


def get_job_posting_repository() -> JobPostingRepository:
    """Get the job posting repository singleton instance."""
    global _job_posting_repository
    if _job_posting_repository is None:
        _job_posting_repository = JobPostingRepository()
    return _job_posting_repository
