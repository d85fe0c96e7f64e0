"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from talent_scout.domain.exceptions import TalentScoutError
from talent_scout.interface.dependencies import get_use_case
from talent_scout.interface.error_handlers import describe_error
from talent_scout.interface.schemas import (
    AssessCall,
    AssessmentRequest,
    AssessResult,
    StreamMessage,
)
from talent_scout.services.assess_profile import AssessProfileUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/assess",
    response_model=AssessResult,
    responses={
        400: {"description": "Invalid username, personality or intensity"},
        502: {"description": "GitHub or LLM provider error"},
    },
)
async def assess(
    body: AssessCall,
    request: Request,
    use_case: AssessProfileUseCase = Depends(get_use_case),
) -> AssessResult | StreamingResponse:
    """Assess a GitHub user; streams server-sent events when asked to."""
    args = body.data
    if "text/event-stream" in request.headers.get("accept", ""):
        return StreamingResponse(
            _event_stream(use_case, args),
            media_type="text/event-stream",
        )

    text = await use_case.execute(args.username, args.personality, args.intensity)
    return AssessResult(result=text)


async def _event_stream(
    use_case: AssessProfileUseCase, args: AssessmentRequest
) -> AsyncIterator[str]:
    """Relay chunks as ``message`` events, then the full text as ``result``.

    Once the response has started the status code can no longer change, so
    a failure is reported as a final ``error`` event.
    """
    chunks: list[str] = []
    try:
        async for chunk in use_case.stream(args.username, args.personality, args.intensity):
            chunks.append(chunk)
            yield _sse(StreamMessage(message=chunk))
    except TalentScoutError as exc:
        logger.warning("%s during stream: %s", type(exc).__name__, exc)
        yield _sse(describe_error(exc)[1])
        return
    except Exception as exc:
        logger.exception("Unhandled exception during stream")
        yield _sse(describe_error(exc)[1])
        return

    yield _sse(AssessResult(result="".join(chunks)))


def _sse(payload: BaseModel) -> str:
    return f"data: {payload.model_dump_json()}\n\n"
