"""Domain exception hierarchy.

Each exception maps to a callable-protocol status at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
Nothing in the application retries or recovers from them.
"""

from __future__ import annotations


class TalentScoutError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidUsernameError(TalentScoutError):
    """The supplied username is not a well-formed GitHub login."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class UpstreamHTTPError(TalentScoutError):
    """A GitHub request failed: non-2xx status or transport error."""

    def __init__(self, message: str, status_code: int | None = None, status_text: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class SchemaValidationError(TalentScoutError):
    """A GitHub response did not have the expected JSON shape."""


# ── LLM errors ──────────────────────────────────────────────────────────────


class GenerationError(TalentScoutError):
    """Any error originating from the LLM provider or its tool-calling loop."""
