"""
Match result models for TechMatch.

Results are transient response payloads; they are never stored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from techmatch.utils.constants import ANONYMOUS_NAME, MAX_MATCH_SCORE, MatchScoreLevel


class MatchResult(BaseModel):
    """
    A candidate's display fields together with their match score.

    Field names follow the stored profile attributes so the serialized
    form can be returned to the browser client unchanged.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    full_name: str = ANONYMOUS_NAME
    location: str = ""
    skills: list[str] = Field(default_factory=list)
    experience_level: str = ""
    bio: str = ""
    match_score: int = Field(..., ge=0, le=MAX_MATCH_SCORE)
    matching_skills: list[str] = Field(default_factory=list)

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.match_score)


class JobMatch(BaseModel):
    """A job posting scored against one candidate's profile."""

    model_config = ConfigDict(frozen=True)

    job_id: Optional[str] = None
    title: str = ""
    company_name: str = ""
    location: str = ""
    required_skills: list[str] = Field(default_factory=list)
    match_score: int = Field(..., ge=0, le=MAX_MATCH_SCORE)
    matching_skills: list[str] = Field(default_factory=list)

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.match_score)
