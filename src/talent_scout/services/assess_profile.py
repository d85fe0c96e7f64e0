"""Assess-profile use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the two ports (:class:`GitHubDataSource` and :class:`LlmGateway`) and the
pure prompt/tool modules.  The interface layer injects concrete adapters at
runtime.

Two terminal paths:

* the username does not exist (profile probe returns 404) → a short
  "not found" answer is generated with no tools attached;
* otherwise → the full assessment prompt is generated with the GitHub
  fetchers attached as tools, and the model decides which to call.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from talent_scout.domain.entities import DEFAULT_INTENSITY, DEFAULT_PERSONA, Persona
from talent_scout.domain.exceptions import UpstreamHTTPError
from talent_scout.domain.ports.github_data_source import GitHubDataSource
from talent_scout.domain.ports.llm_gateway import LlmGateway
from talent_scout.services.prompt_builder import (
    build_assessment_prompt,
    build_not_found_prompt,
    temperature_for,
)
from talent_scout.services.tools import build_github_tools

logger = logging.getLogger(__name__)

ChunkCallback = Callable[[str], Awaitable[None]]


class AssessProfileUseCase:
    """Orchestrates the username → streamed assessment pipeline.

    Parameters
    ----------
    data_source:
        Adapter that can fetch a user's data from GitHub.
    llm_gateway:
        Adapter that streams text from an LLM and drives its tool calls.
    strict_user_probe:
        When true, a profile probe that fails with anything other than 404
        aborts the request instead of proceeding to the full assessment.
    """

    def __init__(
        self,
        data_source: GitHubDataSource,
        llm_gateway: LlmGateway,
        *,
        strict_user_probe: bool = False,
    ) -> None:
        self._source = data_source
        self._llm = llm_gateway
        self._strict_probe = strict_user_probe

    # ── Public entry points ─────────────────────────────────────────────

    async def stream(
        self,
        username: str,
        persona: Persona | str = DEFAULT_PERSONA,
        intensity: int = DEFAULT_INTENSITY,
    ) -> AsyncIterator[str]:
        """Yield assessment text chunks in the order the model produces them."""
        persona = _resolve_persona(persona)
        temperature = temperature_for(intensity)
        status = await self._source.probe_user(username)

        if status == 404:
            logger.info("GitHub user %s not found; generating not-found reply", username)
            prompt = build_not_found_prompt(username, persona, intensity)
            async for chunk in self._llm.stream(prompt, temperature=temperature):
                yield chunk
            return

        if not 200 <= status < 300:
            if self._strict_probe:
                raise UpstreamHTTPError(
                    f"GitHub profile probe for {username} returned HTTP {status}",
                    status_code=status,
                )
            logger.warning(
                "Profile probe for %s returned HTTP %d; continuing with full assessment",
                username,
                status,
            )

        logger.info(
            "Assessing %s as %s at intensity %d (temperature %.1f)",
            username,
            persona.value,
            intensity,
            temperature,
        )
        prompt = build_assessment_prompt(username, persona, intensity)
        tools = build_github_tools(self._source)
        async for chunk in self._llm.stream(prompt, tools=tools, temperature=temperature):
            yield chunk

    async def execute(
        self,
        username: str,
        persona: Persona | str = DEFAULT_PERSONA,
        intensity: int = DEFAULT_INTENSITY,
        on_chunk: ChunkCallback | None = None,
    ) -> str:
        """Run the pipeline, relaying chunks to *on_chunk*, and return the full text."""
        chunks: list[str] = []
        async for chunk in self.stream(username, persona, intensity):
            chunks.append(chunk)
            if on_chunk is not None:
                await on_chunk(chunk)
        return "".join(chunks)


def _resolve_persona(persona: Persona | str) -> Persona:
    try:
        return Persona(persona)
    except ValueError:
        logger.warning("Unknown persona %r; using %s", persona, DEFAULT_PERSONA.value)
        return DEFAULT_PERSONA
