from collections.abc import AsyncIterator, Sequence
from typing import Any

import pytest

from talent_scout.domain.entities import (
    LanguageShare,
    LanguageStatistics,
    RepositorySummary,
    StarredRepositoriesSummary,
    StarredRepository,
    Tool,
    UserProfile,
)


class FakeDataSource:
    """In-memory GitHubDataSource that records which fetchers ran."""

    def __init__(self) -> None:
        self.probe_status: int = 200
        self.lookup_error: Exception | None = None
        self.error: Exception | None = None
        self.calls: list[tuple[str, str]] = []

    def _record(self, name: str, username: str) -> None:
        self.calls.append((name, username))
        if self.error is not None:
            raise self.error

    async def probe_user(self, username: str) -> int:
        if self.lookup_error is not None:
            raise self.lookup_error
        return self.probe_status

    async def fetch_user_profile(self, username: str) -> UserProfile:
        self._record("profile", username)
        return UserProfile(
            login=username,
            id=583231,
            avatar_url="https://avatars.githubusercontent.com/u/583231",
            html_url=f"https://github.com/{username}",
            public_repos=8,
            followers=100,
            following=9,
            created_at="2011-01-25T18:44:36Z",
            updated_at="2025-01-01T00:00:00Z",
            location="San Francisco",
        )

    async def fetch_repositories(self, username: str) -> list[RepositorySummary]:
        self._record("repos", username)
        return [RepositorySummary(name="outbreak-map", language="Python", pushed_at="2025-03-01T00:00:00Z", stargazers_count=4, forks=1)]

    async def fetch_language_stats(self, username: str) -> LanguageStatistics:
        self._record("languages", username)
        return LanguageStatistics(
            languages={"Python": 1},
            total_repos=1,
            top_languages=[LanguageShare(name="Python", count=1, percentage=100)],
        )

    async def fetch_starred_repositories(self, username: str) -> StarredRepositoriesSummary:
        self._record("starred", username)
        return StarredRepositoriesSummary(
            total_starred=1,
            top_starred_languages=["R"],
            recent_stars=[StarredRepository(name="epiverse", language="R", description=None, stargazers_count=50)],
        )

    async def fetch_commit_messages(self, username: str) -> list[str]:
        self._record("commits", username)
        return ["Add SIR model", "Fix typo"]


class FakeLlmGateway:
    """LlmGateway that replays fixed chunks, optionally calling tools first."""

    def __init__(self, chunks: Sequence[str] = ("Strong data ", "skills, ", "ready for health tech.")) -> None:
        self.chunks = list(chunks)
        self.tool_requests: list[tuple[str, dict[str, Any]]] = []
        self.tool_results: list[Any] = []
        self.calls: list[dict[str, Any]] = []

    async def stream(self, prompt: str, *, tools: Sequence[Tool] = (), temperature: float = 0.7) -> AsyncIterator[str]:
        self.calls.append({"prompt": prompt, "tools": list(tools), "temperature": temperature})
        registry = {tool.name: tool for tool in tools}
        for name, arguments in self.tool_requests:
            self.tool_results.append(await registry[name].handler(arguments))
        for chunk in self.chunks:
            yield chunk


@pytest.fixture
def fake_source() -> FakeDataSource:
    return FakeDataSource()


@pytest.fixture
def fake_llm() -> FakeLlmGateway:
    return FakeLlmGateway()
