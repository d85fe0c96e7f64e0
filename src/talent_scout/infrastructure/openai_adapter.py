"""OpenAI adapter — implements the LlmGateway port.

Generation is streamed.  When the model asks for tools, the adapter runs
them in the order the model listed them, feeds the results back and opens
the next streamed round.  Which tools run, and when, is the model's call.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass
from typing import Any

from openai import AsyncOpenAI, AuthenticationError, RateLimitError

from talent_scout.domain.entities import Tool
from talent_scout.domain.exceptions import GenerationError

logger = logging.getLogger(__name__)


@dataclass
class _PendingToolCall:
    """A tool call assembled from streamed deltas."""

    id: str = ""
    name: str = ""
    arguments: str = ""


class OpenAIAdapter:
    """Concrete ``LlmGateway`` backed by the OpenAI chat-completions API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        *,
        max_tool_rounds: int = 8,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._client = client or AsyncOpenAI(api_key=api_key, max_retries=0)
        self._model = model
        self._max_tool_rounds = max_tool_rounds

    async def stream(
        self,
        prompt: str,
        *,
        tools: Sequence[Tool] = (),
        temperature: float = 0.7,
    ) -> AsyncIterator[str]:
        """Yield text chunks for *prompt*, running tool calls in between."""
        registry = {tool.name: tool for tool in tools}
        tool_specs = [_tool_spec(tool) for tool in tools]
        messages: list[dict[str, Any]] = [{"role": "user", "content": prompt}]

        for _ in range(self._max_tool_rounds + 1):
            calls: dict[int, _PendingToolCall] = {}
            text_parts: list[str] = []

            async for text in self._stream_round(messages, tool_specs, temperature, calls):
                text_parts.append(text)
                yield text

            if not calls:
                return

            ordered = [calls[index] for index in sorted(calls)]
            messages.append(
                {
                    "role": "assistant",
                    "content": "".join(text_parts) or None,
                    "tool_calls": [
                        {
                            "id": call.id,
                            "type": "function",
                            "function": {"name": call.name, "arguments": call.arguments},
                        }
                        for call in ordered
                    ],
                }
            )
            for call in ordered:
                result = await self._invoke(registry, call)
                messages.append({"role": "tool", "tool_call_id": call.id, "content": result})

        raise GenerationError(
            f"Model kept requesting tools after {self._max_tool_rounds} rounds."
        )

    async def _stream_round(
        self,
        messages: list[dict[str, Any]],
        tool_specs: list[dict[str, Any]],
        temperature: float,
        calls: dict[int, _PendingToolCall],
    ) -> AsyncIterator[str]:
        """Stream one completion, yielding text and collecting tool calls."""
        try:
            kwargs: dict[str, object] = {
                "model": self._model,
                "messages": messages,
                "temperature": temperature,
                "stream": True,
            }
            if tool_specs:
                kwargs["tools"] = tool_specs

            response = await self._client.chat.completions.create(**kwargs)  # type: ignore[call-overload]

            async for chunk in response:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta

                if delta.content:
                    yield delta.content

                for fragment in delta.tool_calls or []:
                    pending = calls.setdefault(fragment.index, _PendingToolCall())
                    if fragment.id:
                        pending.id = fragment.id
                    if fragment.function is not None:
                        pending.name += fragment.function.name or ""
                        pending.arguments += fragment.function.arguments or ""

        except AuthenticationError as exc:
            raise GenerationError(
                "Invalid OpenAI API key. "
                "Set a valid key in the OPENAI_API_KEY environment variable."
            ) from exc

        except RateLimitError as exc:
            detail = str(exc)
            logger.error("OpenAI RateLimitError: %s", detail)
            raise GenerationError(f"OpenAI rate limit / quota error: {detail}") from exc

        except GenerationError:
            raise

        except Exception as exc:
            raise GenerationError(f"LLM call failed: {exc}") from exc

    @staticmethod
    async def _invoke(registry: dict[str, Tool], call: _PendingToolCall) -> str:
        """Run one requested tool and return its JSON-encoded result."""
        tool = registry.get(call.name)
        if tool is None:
            raise GenerationError(f"Model requested unknown tool '{call.name}'.")

        try:
            arguments = json.loads(call.arguments or "{}")
        except json.JSONDecodeError as exc:
            raise GenerationError(
                f"Model sent malformed arguments for tool '{call.name}': {exc}"
            ) from exc
        if not isinstance(arguments, dict):
            raise GenerationError(f"Arguments for tool '{call.name}' must be a JSON object.")

        logger.info("Model invoked tool %s", call.name)
        result = await tool.handler(arguments)
        return json.dumps(result)

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()


def _tool_spec(tool: Tool) -> dict[str, Any]:
    description = (
        f"{tool.description} Returns JSON matching this schema: "
        f"{json.dumps(tool.output_schema, separators=(',', ':'))}"
    )
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": description,
            "parameters": tool.input_schema,
        },
    }
