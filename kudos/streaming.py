"""
Name: Recognition Stream Handler

Responsibilities:
  - Server-Sent Events (SSE) streaming of live recognitions
  - Per-viewer filtering and sender redaction of every event
  - Heartbeats, disconnect detection and subscription cleanup
  - Open the subscription only once the response body starts streaming

Collaborators:
  - application.use_cases.SubscribeRecognitionsUseCase (open, view_event)
  - infrastructure.events.Topic
  - routes (FastAPI endpoints)

Notes:
  SSE Format:
      event: subscribed
      data: {"topic": "team_feed", "key": "team1"}

      event: recognition
      data: {...RecognitionRes...}

      : keep-alive
"""

from __future__ import annotations

import asyncio
import json
from typing import AsyncGenerator

from fastapi import Request
from fastapi.responses import StreamingResponse

from .application.use_cases import SubscribeRecognitionsUseCase
from .infrastructure.events import Topic
from .logger import logger
from .schemas import to_recognition_res
from .users import User

HEARTBEAT_SECONDS = 15.0


def stream_recognitions(
    topic: Topic,
    viewer: User,
    use_case: SubscribeRecognitionsUseCase,
    request: Request,
    *,
    heartbeat_seconds: float = HEARTBEAT_SECONDS,
) -> StreamingResponse:
    """Stream recognitions published on a topic as Server-Sent Events."""
    return StreamingResponse(
        _generate_sse(topic, viewer, use_case, request, heartbeat_seconds),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )


async def _generate_sse(
    topic: Topic,
    viewer: User,
    use_case: SubscribeRecognitionsUseCase,
    request: Request,
    heartbeat_seconds: float,
) -> AsyncGenerator[str, None]:
    """Generate SSE events from a live subscription on the topic."""
    subscription = use_case.open(topic)
    try:
        yield _sse_event("subscribed", {"topic": topic.kind.value, "key": topic.key})
        while True:
            if await request.is_disconnected():
                logger.info("SSE: Client disconnected")
                return
            try:
                recognition = await subscription.get(timeout=heartbeat_seconds)
            except asyncio.TimeoutError:
                yield ": keep-alive\n\n"
                continue
            except StopAsyncIteration:
                return

            view = use_case.view_event(recognition, viewer)
            if view is None:
                continue
            yield _sse_event(
                "recognition", to_recognition_res(view).model_dump(mode="json")
            )
    finally:
        subscription.close()


def _sse_event(event: str, data: dict) -> str:
    """Format SSE event."""
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"
