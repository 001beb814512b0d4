"""Hook route handlers for the event bridge.

Hooks are **fire-and-forget**: every request gets ``200 ok`` back, whatever
the path, method or body, and even when publishing fails. Claude Code treats
a failing hook command as an error in its own session, so the bridge never
reports one.

Route table:
- ``POST /hook/prompt-submit`` -> ``prompt_submit``
- ``POST /hook/stop`` -> ``stop``
- ``POST /hook/tool-failure`` -> ``interrupt`` when the body has ``is_interrupt: true``
- anything else -> no event
"""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from claude_commander.bridge.events import BridgeEvent, EventType, Publisher
from claude_commander.constants import (
    BRIDGE_RESPONSE_BODY,
    FIELD_IS_INTERRUPT,
    ROUTE_PROMPT_SUBMIT,
    ROUTE_STOP,
    ROUTE_TOOL_FAILURE,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hooks"])

# Methods the catch-all route answers; known paths only publish on POST.
# Anything else ends up in http_error_as_ok.
FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def ok_response() -> PlainTextResponse:
    return PlainTextResponse(BRIDGE_RESPONSE_BODY)


def handle_hook_errors(hook_name: str) -> Callable:
    """Decorator that turns any handler failure into a plain ``ok`` response.

    Args:
        hook_name: Label for log messages (e.g. ``"tool-failure"``).
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> PlainTextResponse:
            try:
                return await func(*args, **kwargs)
            except Exception as e:  # broad catch intentional: hooks are fire-and-forget
                logger.error(f"Hook {hook_name} failed: {e}")
                return ok_response()

        return wrapper

    return decorator


async def publish_event(request: Request, event_type: EventType) -> None:
    """Hand an event to the app's publisher on a worker thread.

    Publisher errors are logged and dropped; they never reach the response.
    """
    publisher: Publisher | None = getattr(request.app.state, "publisher", None)
    if publisher is None:
        logger.warning(f"No publisher attached, dropping {event_type.value}")
        return

    event = BridgeEvent(event_type=event_type)
    logger.info(f"Received hook event: {event.event_type}")
    try:
        await run_in_threadpool(publisher.publish, event)
    except Exception as e:  # broad catch intentional: publisher is host code
        logger.error(f"Failed to publish {event.event_type}: {e}")


def is_interrupt_payload(body: bytes) -> bool:
    """Return True only for a JSON object whose ``is_interrupt`` is literally true."""
    if not body:
        return False
    try:
        payload = json.loads(body)
    except ValueError:
        logger.debug("Failed to parse JSON body in tool-failure hook")
        return False
    return isinstance(payload, dict) and payload.get(FIELD_IS_INTERRUPT) is True


@router.post(ROUTE_PROMPT_SUBMIT)
@handle_hook_errors("prompt-submit")
async def hook_prompt_submit(request: Request) -> PlainTextResponse:
    """User submitted a prompt."""
    await publish_event(request, EventType.PROMPT_SUBMIT)
    return ok_response()


@router.post(ROUTE_STOP)
@handle_hook_errors("stop")
async def hook_stop(request: Request) -> PlainTextResponse:
    """Claude finished responding."""
    await publish_event(request, EventType.STOP)
    return ok_response()


@router.post(ROUTE_TOOL_FAILURE)
@handle_hook_errors("tool-failure")
async def hook_tool_failure(request: Request) -> PlainTextResponse:
    """A tool call failed; only user interrupts (Escape) become events.

    The hook pipes Claude Code's PostToolUseFailure JSON on stdin into the
    request body, which carries ``is_interrupt``.
    """
    body = await request.body()
    if is_interrupt_payload(body):
        await publish_event(request, EventType.INTERRUPT)
    return ok_response()


async def http_error_as_ok(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Exception handler turning routing errors (e.g. 405 for an odd method) into ``ok``."""
    logger.debug(f"Answering ok for {request.method} {request.url.path} ({exc.status_code})")
    return ok_response()


@router.api_route("/{path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
async def hook_fallback(request: Request, path: str) -> PlainTextResponse:
    """Unknown path or method: answer ok, publish nothing."""
    logger.debug(f"Ignoring {request.method} /{path}")
    return ok_response()
