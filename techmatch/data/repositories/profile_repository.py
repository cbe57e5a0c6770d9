"""
Profile repository for TechMatch.

Reads candidate profiles from the profiles collection.
"""

from typing import Any, Optional

from techmatch.data.database import DatabaseManager
from techmatch.data.models import CandidateProfile
from techmatch.utils.config import get_settings
from techmatch.utils.constants import CANDIDATE_USER_TYPE
from techmatch.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)

# Candidates eligible for matching: candidate accounts with a skills attribute
MATCHABLE_CANDIDATES_QUERY: dict[str, Any] = {
    "user_type": CANDIDATE_USER_TYPE,
    "skills": {"$ne": None},
}


class ProfileRepository(BaseRepository[CandidateProfile]):
    """Repository for candidate profile reads."""

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        collection_name: Optional[str] = None,
    ) -> None:
        super().__init__(db_manager)
        self._collection_name = (
            collection_name or get_settings().database.profiles_collection
        )

    @property
    def collection_name(self) -> str:
        return self._collection_name

    @property
    def model_class(self) -> type[CandidateProfile]:
        return CandidateProfile

    async def fetch_candidates(self) -> list[CandidateProfile]:
        """
        Fetch every candidate profile that has a skills attribute.

        This is a single full read with no pagination.

        Raises:
            UpstreamFetchError: If the query fails
        """
        candidates = await self.find_all_async(MATCHABLE_CANDIDATES_QUERY)
        logger.debug(f"Fetched {len(candidates)} candidate profiles")
        return candidates

    async def get_candidate(self, candidate_id: str) -> Optional[CandidateProfile]:
        """Get a candidate profile by id; other account types are not returned."""
        return await self.find_one_async(
            {"_id": self._to_id_query(candidate_id), "user_type": CANDIDATE_USER_TYPE}
        )


# Singleton instance
_profile_repository: Optional[ProfileRepository] = None


def get_profile_repository() -> ProfileRepository:
    """Get the profile repository singleton instance."""
    global _profile_repository
    if _profile_repository is None:
        _profile_repository = ProfileRepository()
    return _profile_repository
