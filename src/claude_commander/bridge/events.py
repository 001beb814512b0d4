"""Bridge events and the publishers that deliver them.

A ``Publisher`` is the only thing the bridge knows about the host
application: the server hands it one ``BridgeEvent`` per qualifying
request and does not care whether anyone is listening. Publishers are
called from worker threads, possibly several at once.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from claude_commander.config.messages import BRIDGE_MESSAGES
from claude_commander.constants import (
    CLAUDE_EVENT_NAME,
    EVENT_TYPE_INTERRUPT,
    EVENT_TYPE_PROMPT_SUBMIT,
    EVENT_TYPE_STOP,
    EVENTS_LOGGER_NAME,
)

# Dedicated logger recording every published event
events_logger = logging.getLogger(EVENTS_LOGGER_NAME)


class EventType(str, Enum):
    """Event types published to the host application."""

    PROMPT_SUBMIT = EVENT_TYPE_PROMPT_SUBMIT
    STOP = EVENT_TYPE_STOP
    INTERRUPT = EVENT_TYPE_INTERRUPT

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all event type values."""
        return [t.value for t in cls]


class BridgeEvent(BaseModel):
    """Payload published for a qualifying hook request."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    event_type: EventType

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON-ready payload the host receives."""
        return self.model_dump(mode="json")


@runtime_checkable
class Publisher(Protocol):
    """Delivers bridge events to the host application.

    Implementations must be safe to call from several threads at once.
    Exceptions raised here are logged by the bridge and otherwise ignored.
    """

    def publish(self, event: BridgeEvent) -> None: ...


EmitFn = Callable[[str, dict[str, Any]], Any]


class CallbackPublisher:
    """Publish events through a host ``emit(event_name, payload)`` function.

    This is the adapter for GUI shells whose event mechanism is a named
    event plus a JSON payload; every event goes out as ``claude-event``.
    """

    def __init__(self, emit: EmitFn, event_name: str = CLAUDE_EVENT_NAME):
        self._emit = emit
        self.event_name = event_name

    def publish(self, event: BridgeEvent) -> None:
        self._emit(self.event_name, event.to_payload())
        events_logger.info(f"Published {self.event_name}: {event.event_type}")


class LoggingPublisher:
    """Publisher that only records events; used when no host app is attached."""

    def __init__(self, console: Console | None = None):
        self._console = console
        self._lock = threading.Lock()
        self.count = 0

    def publish(self, event: BridgeEvent) -> None:
        message = BRIDGE_MESSAGES["event_received"].format(event_type=event.event_type)
        with self._lock:
            self.count += 1
            if self._console is not None:
                self._console.print(f"[cyan]{message}[/cyan]")
        events_logger.info(message)
