"""
Data access for TechMatch.

Repositories read profiles and job postings from MongoDB; the in-memory
stores answer the same queries from lists.
"""

# Base repository and store interfaces
from .base import BaseRepository, CandidateStore, JobPostingStore

# Entity repositories
from .profile_repository import (
    MATCHABLE_CANDIDATES_QUERY,
    ProfileRepository,
    get_profile_repository,
)
from .job_repository import JobPostingRepository, get_job_posting_repository

# In-memory stores
from .memory import InMemoryCandidateStore, InMemoryJobPostingStore

__all__ = [
    # Base
    "BaseRepository",
    "CandidateStore",
    "JobPostingStore",
    # Profile
    "MATCHABLE_CANDIDATES_QUERY",
    "ProfileRepository",
    "get_profile_repository",
    # Job posting
    "JobPostingRepository",
    "get_job_posting_repository",
    # In-memory
    "InMemoryCandidateStore",
    "InMemoryJobPostingStore",
]
