"""Port: GitHub data source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from talent_scout.domain.entities import (
    LanguageStatistics,
    RepositorySummary,
    StarredRepositoriesSummary,
    UserProfile,
)


class GitHubDataSource(Protocol):
    """Abstract contract for fetching a GitHub user's public activity."""

    async def probe_user(self, username: str) -> int:
        """Return the HTTP status of the user's profile endpoint."""
        ...

    async def fetch_user_profile(self, username: str) -> UserProfile:
        """Return the user's public profile."""
        ...

    async def fetch_repositories(self, username: str) -> list[RepositorySummary]:
        """Return the most recently pushed repositories."""
        ...

    async def fetch_language_stats(self, username: str) -> LanguageStatistics:
        """Return primary-language usage across the user's repositories."""
        ...

    async def fetch_starred_repositories(self, username: str) -> StarredRepositoriesSummary:
        """Return a summary of the user's recent stars."""
        ...

    async def fetch_commit_messages(self, username: str) -> list[str]:
        """Return commit messages from the user's recent push events."""
        ...
