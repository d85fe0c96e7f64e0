"""GitHub REST API adapter — implements the GitHubDataSource port."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from talent_scout.domain.entities import (
    LanguageStatistics,
    RepositorySummary,
    StarredRepositoriesSummary,
    StarredRepository,
    UserProfile,
)
from talent_scout.domain.exceptions import SchemaValidationError, UpstreamHTTPError
from talent_scout.domain.value_objects import GitHubLogin
from talent_scout.services.github_stats import language_statistics, starred_summary

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "talent-scout-agent/1.0"

_T = TypeVar("_T")


# ── Response payload shapes ─────────────────────────────────────────────────


class _RepoPayload(BaseModel):
    name: str
    language: str | None
    pushed_at: str
    stargazers_count: int
    forks: int


class _LanguageOnlyPayload(BaseModel):
    language: str | None = None


class _StarredPayload(BaseModel):
    name: str
    language: str | None = None
    description: str | None = None
    stargazers_count: int


class _CommitAuthorPayload(BaseModel):
    email: str
    name: str


class _CommitPayload(BaseModel):
    sha: str
    author: _CommitAuthorPayload
    message: str
    distinct: bool
    url: str


class _EventRepoPayload(BaseModel):
    id: int
    name: str
    url: str


class _EventBodyPayload(BaseModel):
    commits: list[_CommitPayload] | None = None


class _EventPayload(BaseModel):
    id: str
    type: str
    repo: _EventRepoPayload
    payload: _EventBodyPayload


class _ProfilePayload(BaseModel):
    login: str
    id: int
    avatar_url: str
    html_url: str
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    bio: str | None = None
    public_repos: int
    followers: int
    following: int
    created_at: str
    updated_at: str


_REPOS = TypeAdapter(list[_RepoPayload])
_LANGUAGES = TypeAdapter(list[_LanguageOnlyPayload])
_STARRED = TypeAdapter(list[_StarredPayload])
_EVENTS = TypeAdapter(list[_EventPayload])
_PROFILE = TypeAdapter(_ProfilePayload)


# ── Adapter ─────────────────────────────────────────────────────────────────


class GitHubRestAdapter:
    """Concrete GitHubDataSource backed by the GitHub v3 REST API.

    The token is handed in by the caller; the adapter never reads the
    process environment.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        *,
        base_url: str = _GITHUB_API,
        user_agent: str = _USER_AGENT,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }

    async def probe_user(self, username: str) -> int:
        """GET /users/{username} → HTTP status code (no status check)."""
        resp = await self._send(_user_endpoint(username))
        return resp.status_code

    async def fetch_user_profile(self, username: str) -> UserProfile:
        """GET /users/{username} → UserProfile."""
        logger.info("Fetching profile for %s", username)
        data = await self._api_get(_user_endpoint(username), action="GitHub user profile")
        profile = _validate(_PROFILE, data, "user profile")
        return UserProfile(**profile.model_dump())

    async def fetch_repositories(self, username: str) -> list[RepositorySummary]:
        """GET /users/{username}/repos?sort=pushed → [RepositorySummary]."""
        logger.info("Fetching repos for %s", username)
        data = await self._api_get(
            _user_endpoint(username, "/repos"),
            params={"sort": "pushed", "per_page": "15"},
            action="repos",
        )
        repos = _validate(_REPOS, data, "repository list")
        return [RepositorySummary(**repo.model_dump()) for repo in repos]

    async def fetch_language_stats(self, username: str) -> LanguageStatistics:
        """GET /users/{username}/repos?type=all → LanguageStatistics."""
        logger.info("Analyzing language stats for %s", username)
        data = await self._api_get(
            _user_endpoint(username, "/repos"),
            params={"per_page": "100", "type": "all"},
            action="repos for language stats",
        )
        repos = _validate(_LANGUAGES, data, "repository list")
        return language_statistics(repo.language for repo in repos)

    async def fetch_starred_repositories(self, username: str) -> StarredRepositoriesSummary:
        """GET /users/{username}/starred → StarredRepositoriesSummary."""
        logger.info("Fetching starred repos for %s", username)
        data = await self._api_get(
            _user_endpoint(username, "/starred"),
            params={"per_page": "20", "sort": "created"},
            action="starred repos",
        )
        starred = _validate(_STARRED, data, "starred repository list")
        return starred_summary([StarredRepository(**repo.model_dump()) for repo in starred])

    async def fetch_commit_messages(self, username: str) -> list[str]:
        """GET /users/{username}/events → commit messages of push events."""
        logger.info("Fetching commit messages for %s", username)
        data = await self._api_get(
            _user_endpoint(username, "/events"),
            params={"per_page": "100"},
            action="commit messages",
        )
        events = _validate(_EVENTS, data, "event list")
        return [
            commit.message
            for event in events
            if event.type == "PushEvent" and event.payload.commits
            for commit in event.payload.commits
        ]

    # ── HTTP plumbing ───────────────────────────────────────────────────

    async def _send(self, endpoint: str, params: dict[str, str] | None = None) -> httpx.Response:
        url = f"{self._base_url}{endpoint}"
        try:
            return await self._client.get(url, headers=self._api_headers, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamHTTPError(f"Network error fetching {url}: {exc}") from exc

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        *,
        action: str,
    ) -> Any:
        """Perform a GitHub API GET and return the decoded JSON body."""
        resp = await self._send(endpoint, params)

        if not resp.is_success:
            raise UpstreamHTTPError(
                f"Failed to fetch {action} from GitHub: {resp.reason_phrase}",
                status_code=resp.status_code,
                status_text=resp.reason_phrase,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise SchemaValidationError(f"GitHub returned a non-JSON body for {endpoint}") from exc


def _validate(adapter: TypeAdapter[_T], data: Any, what: str) -> _T:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise SchemaValidationError(f"Unexpected GitHub {what} shape: {exc}") from exc


def _user_endpoint(username: str, suffix: str = "") -> str:
    """``/users/{login}{suffix}`` with the login validated and percent-encoded."""
    return f"/users/{GitHubLogin.from_string(username).path_segment}{suffix}"
