"""FastAPI dependency injection wiring.

The GitHub token is read from settings here, at the entry boundary, and
handed to the adapter; nothing below this layer touches the environment.
"""

from __future__ import annotations

from functools import lru_cache

import httpx

from talent_scout.infrastructure.config import Settings, get_settings
from talent_scout.infrastructure.github_rest_adapter import GitHubRestAdapter
from talent_scout.infrastructure.openai_adapter import OpenAIAdapter
from talent_scout.services.assess_profile import AssessProfileUseCase

_http_client: httpx.AsyncClient | None = None
_openai_adapter: OpenAIAdapter | None = None


def _build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _openai_adapter  # noqa: PLW0603

    settings = get_settings()
    _http_client = _build_http_client(settings)
    _openai_adapter = OpenAIAdapter(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.openai_model,
        max_tool_rounds=settings.max_tool_rounds,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _openai_adapter  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    if _openai_adapter:
        await _openai_adapter.close()
        _openai_adapter = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_use_case() -> AssessProfileUseCase:
    """Build the use case with injected adapters for one request."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"
    assert _openai_adapter is not None, "startup() was not called"

    github_adapter = GitHubRestAdapter(
        client=_http_client,
        token=settings.github_token.get_secret_value(),
        base_url=settings.github_api_url,
        user_agent=settings.github_user_agent,
    )

    return AssessProfileUseCase(
        data_source=github_adapter,
        llm_gateway=_openai_adapter,
        strict_user_probe=settings.strict_user_probe,
    )
