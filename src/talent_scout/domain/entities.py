"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Persona(str, Enum):
    """Professional viewpoint the assessment is written from."""

    PUBLIC_HEALTH_RECRUITER = "public-health-recruiter"
    EPIDEMIOLOGIST = "epidemiologist"
    GLOBAL_HEALTH_ADVOCATE = "global-health-advocate"
    HEALTH_SYSTEMS_ANALYST = "health-systems-analyst"
    TECHNICAL_ASSESSOR = "technical-assessor"


DEFAULT_PERSONA = Persona.PUBLIC_HEALTH_RECRUITER
DEFAULT_INTENSITY = 3


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """One of the user's own repositories, as listed by push date."""

    name: str
    language: str | None
    pushed_at: str
    stargazers_count: int
    forks: int


@dataclass(frozen=True, slots=True)
class LanguageShare:
    """A language together with how many repositories use it."""

    name: str
    count: int
    percentage: int


@dataclass(frozen=True, slots=True)
class LanguageStatistics:
    """Primary-language usage across a user's repositories.

    ``total_repos`` only counts repositories with a detected language, so
    it is the denominator of every ``percentage`` in ``top_languages``.
    """

    languages: dict[str, int]
    total_repos: int
    top_languages: list[LanguageShare] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StarredRepository:
    """A repository the user has starred."""

    name: str
    language: str | None
    description: str | None
    stargazers_count: int


@dataclass(frozen=True, slots=True)
class StarredRepositoriesSummary:
    """Interests signalled by recent stars.

    ``total_starred`` is the size of the fetched page, not the user's
    lifetime star count.
    """

    total_starred: int
    top_starred_languages: list[str]
    recent_stars: list[StarredRepository]


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Public GitHub profile of a user."""

    login: str
    id: int
    avatar_url: str
    html_url: str
    public_repos: int
    followers: int
    following: int
    created_at: str
    updated_at: str
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    bio: str | None = None


ToolHandler = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class Tool:
    """An operation the LLM may invoke on demand while generating.

    ``handler`` receives the decoded call arguments and returns a
    JSON-compatible value.
    """

    name: str
    description: str
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]
    handler: ToolHandler
