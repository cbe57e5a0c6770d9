"""
Job posting models for TechMatch.

Job postings are authored by employers elsewhere. Matching reads a
posting and derives the requirement it scores candidates against.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from techmatch.utils.constants import JobStatus, JobType

from .base import BaseDocument, StoredId


class JobRequirement(BaseModel):
    """
    Input of the matching engine, derived from a job posting.

    ``job_id`` and ``job_title`` are only used for traceability.
    """

    model_config = ConfigDict(frozen=True)

    job_id: StoredId
    required_skills: list[str] = Field(..., min_length=1)
    job_title: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.job_title or f"job {self.job_id}"


class JobPosting(BaseDocument):
    """An employer-authored job posting."""

    employer_id: Optional[StoredId] = None

    title: str = ""
    description: Optional[str] = None
    company_name: Optional[str] = None
    location: Optional[str] = None
    job_type: JobType = JobType.FULL_TIME
    remote_ok: bool = False

    salary_min: Optional[int] = Field(default=None, ge=0)
    salary_max: Optional[int] = Field(default=None, ge=0)

    required_skills: list[str] = Field(default_factory=list)
    experience_level: Optional[str] = None

    status: JobStatus = JobStatus.ACTIVE
    created_at: Optional[datetime] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def default_required_skills(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    @model_validator(mode="after")
    def validate_salary_range(self) -> "JobPosting":
        """Ensure the salary range is ordered when both ends are set."""
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            raise ValueError("salary_min must not exceed salary_max")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == JobStatus.ACTIVE.value

    def to_requirement(self) -> JobRequirement:
        """
        Build the matching requirement for this posting.

        Raises:
            pydantic.ValidationError: If the posting has no identifier or
                no required skills.
        """
        return JobRequirement(
            job_id=self.id,
            required_skills=list(self.required_skills),
            job_title=self.title or None,
        )
