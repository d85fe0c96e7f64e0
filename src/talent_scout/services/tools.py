"""GitHub fetchers exposed to the LLM as callable tools."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from talent_scout.domain.entities import (
    LanguageStatistics,
    RepositorySummary,
    StarredRepositoriesSummary,
    Tool,
    UserProfile,
)
from talent_scout.domain.exceptions import GenerationError
from talent_scout.domain.ports.github_data_source import GitHubDataSource


class UsernameInput(BaseModel):
    """Arguments every GitHub tool accepts."""

    username: str


_INPUT_SCHEMA: dict[str, Any] = UsernameInput.model_json_schema()


def _make_tool(
    name: str,
    description: str,
    output: TypeAdapter[Any],
    fetch: Callable[[str], Awaitable[Any]],
) -> Tool:
    async def handler(arguments: dict[str, Any]) -> Any:
        try:
            params = UsernameInput.model_validate(arguments)
        except ValidationError as exc:
            raise GenerationError(f"Invalid arguments for tool '{name}': {exc}") from exc
        result = await fetch(params.username)
        return output.dump_python(result, mode="json")

    return Tool(
        name=name,
        description=description,
        input_schema=_INPUT_SCHEMA,
        output_schema=output.json_schema(),
        handler=handler,
    )


def build_github_tools(source: GitHubDataSource) -> list[Tool]:
    """Return the five GitHub fetchers as independent, unordered tools."""
    return [
        _make_tool(
            "fetchGithubUserProfile",
            "Fetches the public profile of a GitHub user including bio, followers, company, etc.",
            TypeAdapter(UserProfile),
            source.fetch_user_profile,
        ),
        _make_tool(
            "fetchGithubRepos",
            "Fetches a list of public repositories for a given GitHub username "
            "sorted by pushed date (recently updated).",
            TypeAdapter(list[RepositorySummary]),
            source.fetch_repositories,
        ),
        _make_tool(
            "fetchLanguageStats",
            "Analyzes programming languages used across all repositories to "
            "calculate usage statistics.",
            TypeAdapter(LanguageStatistics),
            source.fetch_language_stats,
        ),
        _make_tool(
            "fetchStarredRepos",
            "Fetches repositories that the user has starred to analyze their "
            "interests vs their own work.",
            TypeAdapter(StarredRepositoriesSummary),
            source.fetch_starred_repositories,
        ),
        _make_tool(
            "fetchCommitMessages",
            "Fetches commit messages from the last 100 events of a GitHub user.",
            TypeAdapter(list[str]),
            source.fetch_commit_messages,
        ),
    ]
