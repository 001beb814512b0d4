"""Event bridge: local HTTP listener that republishes Claude Code hooks.

This module uses lazy imports so the event types can be imported without
loading FastAPI and uvicorn until a server is actually created.
"""

from typing import Any

from claude_commander.bridge.events import (
    BridgeEvent,
    CallbackPublisher,
    EventType,
    LoggingPublisher,
    Publisher,
)


def __getattr__(name: str) -> Any:
    """Lazy import module members to avoid loading heavy dependencies."""
    if name == "BridgeServer":
        from claude_commander.bridge.server import BridgeServer

        return BridgeServer
    elif name == "create_app":
        from claude_commander.bridge.server import create_app

        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "BridgeEvent",
    "BridgeServer",
    "CallbackPublisher",
    "EventType",
    "LoggingPublisher",
    "Publisher",
    "create_app",
]
