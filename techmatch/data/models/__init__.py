"""
Pydantic data models for TechMatch.

This module provides the stored record models (profiles, job postings)
and the transient matching models (requirements, results).
"""

# Base models
from .base import BaseDocument, StoredId

# Profile models
from .profile import CandidateProfile

# Job models
from .job import JobPosting, JobRequirement

# Match models
from .match import JobMatch, MatchResult

__all__ = [
    # Base
    "BaseDocument",
    "StoredId",
    # Profile
    "CandidateProfile",
    # Job
    "JobPosting",
    "JobRequirement",
    # Match
    "JobMatch",
    "MatchResult",
]
