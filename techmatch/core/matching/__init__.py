"""Candidate-job matching engine module."""

from .matching_engine import (
    compute_job_matches,
    compute_matches,
    score_candidate,
)
from .service import (
    match_candidates,
    match_job_posting,
    recommend_jobs,
)

__all__ = [
    "compute_job_matches",
    "compute_matches",
    "score_candidate",
    "match_candidates",
    "match_job_posting",
    "recommend_jobs",
]
