"""
Request and response schemas for the matching handler.

Request fields use the browser client's camelCase names; response fields
use the stored profile attribute names.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from techmatch.core.exceptions import ValidationError
from techmatch.data.models import JobRequirement, MatchResult
from techmatch.utils.constants import EMPTY_SKILLS_MESSAGE, MISSING_PARAMETERS_MESSAGE


class MatchingRequest(BaseModel):
    """Body of a candidate matching request."""

    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(..., alias="jobId", min_length=1)
    required_skills: list[str] = Field(..., alias="requiredSkills")
    job_title: Optional[str] = Field(default=None, alias="jobTitle")

    @field_validator("job_id", mode="before")
    @classmethod
    def stringify_job_id(cls, v: Any) -> Any:
        """Ids are opaque; accept numbers but not false-y values."""
        if isinstance(v, (int, float)) and not isinstance(v, bool) and v:
            return str(v)
        return v

    @field_validator("job_title", mode="before")
    @classmethod
    def stringify_job_title(cls, v: Any) -> Any:
        """The title is only logged, so any JSON value is accepted."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def require_list(cls, v: Any) -> Any:
        """Only a JSON array is a skill list; a bare string is not."""
        if not isinstance(v, list):
            raise ValueError("requiredSkills must be an array")
        return v

    @classmethod
    def from_payload(cls, payload: Any) -> "MatchingRequest":
        """
        Validate a decoded JSON body.

        Raises:
            ValidationError: If parameters are missing or malformed, or no
                skills are required
        """
        if not isinstance(payload, dict):
            raise ValidationError(MISSING_PARAMETERS_MESSAGE)
        try:
            request = cls.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(MISSING_PARAMETERS_MESSAGE) from e
        if not request.required_skills:
            raise ValidationError(EMPTY_SKILLS_MESSAGE)
        return request

    def to_requirement(self) -> JobRequirement:
        return JobRequirement(
            job_id=self.job_id,
            required_skills=self.required_skills,
            job_title=self.job_title,
        )


class MatchingResponse(BaseModel):
    """Successful matching response."""

    matches: list[MatchResult]


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str
