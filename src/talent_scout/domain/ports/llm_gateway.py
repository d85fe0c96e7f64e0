"""Port: LLM gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import Protocol

from talent_scout.domain.entities import Tool


class LlmGateway(Protocol):
    """Abstract contract for interacting with a large-language model."""

    def stream(
        self,
        prompt: str,
        *,
        tools: Sequence[Tool] = (),
        temperature: float = 0.7,
    ) -> AsyncIterator[str]:
        """Generate text for *prompt*, yielding chunks as they arrive.

        The model may call any of *tools* in whatever order it chooses.
        """
        ...
