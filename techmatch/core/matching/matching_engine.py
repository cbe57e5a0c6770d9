"""
Candidate-job matching engine.

Scores candidate profiles against a job's required skills and returns a
filtered, ranked shortlist. The score is the share of required skills the
candidate covers, plus bonuses for experience level and profile
completeness, capped at 100.

Skills match when either label contains the other, ignoring case. Short
labels therefore over-match ("c" matches "javascript"); this is kept
deliberately simple rather than backed by a skill taxonomy.

Everything here is a pure function of its arguments: no I/O, no
randomness, no shared state. Candidates are scored independently.
"""

from collections.abc import Iterable, Sequence
from typing import Optional, TypeVar

from techmatch.data.models import CandidateProfile, JobMatch, JobPosting, MatchResult
from techmatch.utils.constants import (
    ANONYMOUS_NAME,
    BIO_MIN_LENGTH,
    COMPLETENESS_BONUS,
    EXPERIENCE_LEVEL_BONUS,
    MAX_MATCH_RESULTS,
    MAX_MATCH_SCORE,
    MIN_MATCH_SCORE,
    SKILLS_MIN_COUNT,
)

# Scored results of either direction
RankedT = TypeVar("RankedT", MatchResult, JobMatch)


def skills_overlap(required_skill: str, candidate_skill: str) -> bool:
    """Check whether either skill label contains the other, ignoring case."""
    required = required_skill.lower()
    candidate = candidate_skill.lower()
    return candidate in required or required in candidate


def find_matching_skills(
    required_skills: Sequence[str],
    candidate_skills: Optional[Sequence[str]],
) -> list[str]:
    """
    Get the required skills covered by at least one candidate skill.

    Order and duplicates follow ``required_skills``.
    """
    candidate_skills = candidate_skills or []
    return [
        required
        for required in required_skills
        if any(skills_overlap(required, candidate) for candidate in candidate_skills)
    ]


def base_score(matched_count: int, required_count: int) -> int:
    """
    Percentage of required skills matched, rounded half up.

    Integer arithmetic keeps the rounding exact (12.5 -> 13).

    Raises:
        ValueError: If ``required_count`` is not positive.
    """
    if required_count <= 0:
        raise ValueError("required_count must be positive")
    return (200 * matched_count + required_count) // (2 * required_count)


def experience_bonus(experience_level: Optional[str]) -> int:
    """Bonus for the candidate's experience level; unknown levels get 0."""
    if not experience_level:
        return 0
    return EXPERIENCE_LEVEL_BONUS.get(experience_level.lower(), 0)


def completeness_bonus(candidate: CandidateProfile) -> int:
    """Bonus for filled-in profile attributes (at most 15)."""
    bonus = 0
    if candidate.bio and len(candidate.bio) > BIO_MIN_LENGTH:
        bonus += COMPLETENESS_BONUS["bio"]
    if candidate.location:
        bonus += COMPLETENESS_BONUS["location"]
    if len(candidate.skills or []) >= SKILLS_MIN_COUNT:
        bonus += COMPLETENESS_BONUS["skills"]
    if candidate.experience_level:
        bonus += COMPLETENESS_BONUS["experience_level"]
    return bonus


def _total_score(
    required_skills: Sequence[str],
    matching_skills: Sequence[str],
    candidate: CandidateProfile,
) -> int:
    score = (
        base_score(len(matching_skills), len(required_skills))
        + experience_bonus(candidate.experience_level)
        + completeness_bonus(candidate)
    )
    return min(MAX_MATCH_SCORE, score)


def score_candidate(
    required_skills: Sequence[str],
    candidate: CandidateProfile,
) -> MatchResult:
    """
    Score a single candidate against the required skills.

    The result is not filtered; see ``rank_matches``.
    """
    candidate_skills = list(candidate.skills or [])
    matching_skills = find_matching_skills(required_skills, candidate_skills)

    return MatchResult(
        id=candidate.id,
        full_name=candidate.full_name or ANONYMOUS_NAME,
        location=candidate.location or "",
        skills=candidate_skills,
        experience_level=candidate.experience_level or "",
        bio=candidate.bio or "",
        match_score=_total_score(required_skills, matching_skills, candidate),
        matching_skills=matching_skills,
    )


def rank_matches(
    results: Iterable[RankedT],
    *,
    min_score: int = MIN_MATCH_SCORE,
    max_results: int = MAX_MATCH_RESULTS,
) -> list[RankedT]:
    """
    Keep results scoring above ``min_score``, best first, at most ``max_results``.

    Ties keep their input order.
    """
    kept = [r for r in results if r.match_score > min_score]
    kept.sort(key=lambda r: r.match_score, reverse=True)
    return kept[:max_results]


def compute_matches(
    required_skills: Sequence[str],
    job_title: Optional[str],
    candidates: Sequence[CandidateProfile],
    *,
    min_score: int = MIN_MATCH_SCORE,
    max_results: int = MAX_MATCH_RESULTS,
) -> list[MatchResult]:
    """
    Rank candidates for a job.

    Args:
        required_skills: The job's required skill labels (non-empty)
        job_title: Job title, for display only; does not affect scoring
        candidates: Candidate profiles to score
        min_score: Results must score strictly above this
        max_results: Maximum number of results returned

    Returns:
        Matches sorted by score, highest first

    Raises:
        ValueError: If ``required_skills`` is empty and there are candidates
    """
    if not candidates:
        return []
    if not required_skills:
        raise ValueError(f"No required skills given for {job_title or 'job'}")

    results = [score_candidate(required_skills, c) for c in candidates]
    return rank_matches(results, min_score=min_score, max_results=max_results)


def compute_job_matches(
    candidate: CandidateProfile,
    postings: Sequence[JobPosting],
    *,
    min_score: int = MIN_MATCH_SCORE,
    max_results: int = MAX_MATCH_RESULTS,
) -> list[JobMatch]:
    """
    Rank job postings for a candidate using the same scoring as ``compute_matches``.

    Postings without required skills cannot be scored and are skipped.
    """
    scored = []
    for posting in postings:
        if not posting.required_skills:
            continue
        result = score_candidate(posting.required_skills, candidate)
        scored.append(
            JobMatch(
                job_id=posting.id,
                title=posting.title,
                company_name=posting.company_name or "",
                location=posting.location or "",
                required_skills=list(posting.required_skills),
                match_score=result.match_score,
                matching_skills=result.matching_skills,
            )
        )

    return rank_matches(scored, min_score=min_score, max_results=max_results)
