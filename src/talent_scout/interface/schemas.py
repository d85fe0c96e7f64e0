"""Pydantic request / response DTOs for the API boundary.

The endpoint speaks the callable-function protocol: arguments arrive
wrapped in ``{"data": ...}``, results leave as ``{"result": ...}`` and
failures as ``{"error": {"status": ..., "message": ...}}``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from talent_scout.domain.entities import DEFAULT_INTENSITY, DEFAULT_PERSONA, Persona
from talent_scout.domain.exceptions import InvalidUsernameError
from talent_scout.domain.value_objects import GitHubLogin


class AssessmentRequest(BaseModel):
    """Arguments of the assessment call."""

    username: str
    personality: Persona = DEFAULT_PERSONA
    intensity: int = Field(default=DEFAULT_INTENSITY, ge=1, le=5)

    @field_validator("username")
    @classmethod
    def _must_be_github_login(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "username must not be empty."
            raise ValueError(msg)
        try:
            return GitHubLogin.from_string(stripped).value
        except InvalidUsernameError as exc:
            raise ValueError(str(exc)) from exc


class AssessCall(BaseModel):
    """Request body for ``POST /assess``."""

    data: AssessmentRequest


class AssessResult(BaseModel):
    """Successful response from ``POST /assess``."""

    result: str


class StreamMessage(BaseModel):
    """One interim chunk of a streamed call."""

    message: str


class ErrorDetail(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    error: ErrorDetail
