"""
Candidate profile model for TechMatch.

Profiles are created and edited by candidates elsewhere; matching
only ever reads them.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from techmatch.utils.constants import CANDIDATE_USER_TYPE

from .base import BaseDocument, StoredId


class CandidateProfile(BaseDocument):
    """
    A job seeker's public attributes relevant to matching.

    Every attribute except the identifier may be absent; matching
    substitutes defaults instead of rejecting the record.
    """

    user_id: Optional[StoredId] = None
    user_type: Optional[str] = CANDIDATE_USER_TYPE

    full_name: Optional[str] = None
    location: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    experience_level: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def default_skills(cls, v: Any) -> Any:
        """Treat a null skills attribute as an empty list."""
        if v is None:
            return []
        return v

    @property
    def is_candidate(self) -> bool:
        return self.user_type == CANDIDATE_USER_TYPE
