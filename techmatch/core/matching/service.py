"""
Matching service.

Runs the matching engine against candidates read from a store. The HTTP
handler and the CLI both go through these functions; neither keeps state
between calls.
"""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from techmatch.core.exceptions import ValidationError
from techmatch.data.models import JobMatch, JobRequirement, MatchResult
from techmatch.data.repositories import CandidateStore, JobPostingStore
from techmatch.utils.config import MatchingSettings, get_settings
from techmatch.utils.constants import AuditAction
from techmatch.utils.logger import audit_log, get_logger

from .matching_engine import compute_job_matches, compute_matches

logger = get_logger(__name__)


async def match_candidates(
    requirement: JobRequirement,
    store: CandidateStore,
    settings: Optional[MatchingSettings] = None,
) -> list[MatchResult]:
    """
    Find the best candidates for a job requirement.

    Reads the candidate pool exactly once; read failures propagate
    unchanged and are not retried.

    Args:
        requirement: Job requirement with at least one required skill
        store: Source of candidate profiles
        settings: Score threshold and result limit

    Returns:
        Ranked matches

    Raises:
        UpstreamFetchError: If the candidate read fails
    """
    settings = settings or get_settings().matching

    logger.info(f"Starting candidate matching for job: {requirement.display_title}")
    logger.debug(f"Required skills: {requirement.required_skills}")

    candidates = await store.fetch_candidates()
    logger.info(f"Found {len(candidates)} candidates to analyze")

    if not candidates:
        return []

    matches = compute_matches(
        requirement.required_skills,
        requirement.job_title,
        candidates,
        min_score=settings.min_score,
        max_results=settings.max_results,
    )
    logger.info(f"Generated {len(matches)} matches")

    audit_log(
        AuditAction.CANDIDATES_MATCHED,
        {
            "job_id": requirement.job_id,
            "candidates_scored": len(candidates),
            "matches": [(m.id, m.match_score) for m in matches],
        },
    )
    return matches


async def match_job_posting(
    job_id: str,
    job_store: JobPostingStore,
    store: CandidateStore,
    settings: Optional[MatchingSettings] = None,
) -> list[MatchResult]:
    """
    Find the best candidates for a stored job posting.

    Raises:
        ValidationError: If the posting does not exist or lists no skills
        UpstreamFetchError: If a store read fails
    """
    posting = await job_store.get_posting(job_id)
    if posting is None:
        raise ValidationError(f"Job posting not found: {job_id}")

    try:
        requirement = posting.to_requirement()
    except PydanticValidationError as e:
        raise ValidationError(f"Job posting {job_id} has no required skills") from e

    return await match_candidates(requirement, store, settings)


async def recommend_jobs(
    candidate_id: str,
    store: CandidateStore,
    job_store: JobPostingStore,
    settings: Optional[MatchingSettings] = None,
) -> list[JobMatch]:
    """
    Find the active job postings that best fit a candidate.

    Raises:
        ValidationError: If the candidate does not exist
        UpstreamFetchError: If a store read fails
    """
    settings = settings or get_settings().matching

    candidate = await store.get_candidate(candidate_id)
    if candidate is None:
        raise ValidationError(f"Candidate not found: {candidate_id}")

    postings = await job_store.fetch_active_postings()
    logger.info(f"Scoring {len(postings)} active postings for candidate {candidate_id}")

    recommendations = compute_job_matches(
        candidate,
        postings,
        min_score=settings.min_score,
        max_results=settings.max_results,
    )

    audit_log(
        AuditAction.JOBS_RECOMMENDED,
        {
            "candidate_id": candidate_id,
            "postings_scored": len(postings),
            "matches": [(m.job_id, m.match_score) for m in recommendations],
        },
    )
    return recommendations
