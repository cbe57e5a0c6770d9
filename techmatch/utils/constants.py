"""
Application-wide constants for TechMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "TechMatch"
APP_DISPLAY_NAME: Final[str] = "TechMatch Candidate Matching"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Profile Constants
# =============================================================================

CANDIDATE_USER_TYPE: Final[str] = "candidate"
ANONYMOUS_NAME: Final[str] = "Anonymous"


# =============================================================================
# Scoring Constants
# =============================================================================

# Bonus points by experience level (keys are lowercase)
EXPERIENCE_LEVEL_BONUS: Final[dict[str, int]] = {
    "entry": 5,
    "mid": 10,
    "senior": 15,
    "lead": 10,
    "executive": 5,
}

# Profile completeness bonus points (at most 15 in total)
COMPLETENESS_BONUS: Final[dict[str, int]] = {
    "bio": 5,
    "location": 3,
    "skills": 5,
    "experience_level": 2,
}

# Bio must be strictly longer than this to earn the bio bonus
BIO_MIN_LENGTH: Final[int] = 50

# Minimum number of listed skills for the skills bonus
SKILLS_MIN_COUNT: Final[int] = 5

MAX_MATCH_SCORE: Final[int] = 100

# Matches must score strictly above this value
MIN_MATCH_SCORE: Final[int] = 20

MAX_MATCH_RESULTS: Final[int] = 10

# Score thresholds for display levels
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 80,
    "good": 60,
}


# =============================================================================
# HTTP Constants
# =============================================================================

# Headers the browser client sends with matching requests
CORS_ALLOW_HEADERS: Final[tuple[str, ...]] = (
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
)

MISSING_PARAMETERS_MESSAGE: Final[str] = "Missing required parameters"
EMPTY_SKILLS_MESSAGE: Final[str] = "requiredSkills must contain at least one skill"


# =============================================================================
# Enums
# =============================================================================


class ExperienceLevel(str, Enum):
    """Known candidate and job experience levels."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


class JobStatus(str, Enum):
    """Status of a job posting."""

    ACTIVE = "active"
    PAUSED = "paused"
    CLOSED = "closed"


class JobType(str, Enum):
    """Employment type of a job posting."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    PARTIAL = "partial"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a numeric score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        return cls.PARTIAL

    @property
    def label(self) -> str:
        """Human-readable label."""
        return f"{self.value.capitalize()} Match"


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATES_MATCHED = "candidates_matched"
    JOBS_RECOMMENDED = "jobs_recommended"
