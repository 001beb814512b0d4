"""Tests for bridge events and publishers."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError
from rich.console import Console

from claude_commander.bridge.events import (
    BridgeEvent,
    CallbackPublisher,
    EventType,
    LoggingPublisher,
    Publisher,
)


class TestBridgeEvent:
    @pytest.mark.parametrize("event_type", EventType.values())
    def test_payload(self, event_type):
        assert BridgeEvent(event_type=event_type).to_payload() == {"event_type": event_type}

    def test_from_enum(self):
        assert BridgeEvent(event_type=EventType.INTERRUPT).event_type == "interrupt"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            BridgeEvent(event_type="permission_request")

    def test_frozen(self):
        event = BridgeEvent(event_type=EventType.STOP)
        with pytest.raises(ValidationError):
            event.event_type = EventType.INTERRUPT


class TestCallbackPublisher:
    def test_emits_claude_event(self):
        emit = MagicMock()
        publisher = CallbackPublisher(emit)

        publisher.publish(BridgeEvent(event_type=EventType.PROMPT_SUBMIT))

        emit.assert_called_once_with("claude-event", {"event_type": "prompt_submit"})

    def test_custom_event_name(self):
        emit = MagicMock()
        CallbackPublisher(emit, event_name="hook").publish(BridgeEvent(event_type="stop"))
        emit.assert_called_once_with("hook", {"event_type": "stop"})

    def test_emit_errors_propagate(self):
        emit = MagicMock(side_effect=RuntimeError("no window"))
        with pytest.raises(RuntimeError):
            CallbackPublisher(emit).publish(BridgeEvent(event_type="stop"))

    def test_satisfies_protocol(self):
        assert isinstance(CallbackPublisher(MagicMock()), Publisher)


class TestLoggingPublisher:
    def test_counts_events(self):
        publisher = LoggingPublisher()
        publisher.publish(BridgeEvent(event_type="stop"))
        publisher.publish(BridgeEvent(event_type="interrupt"))
        assert publisher.count == 2

    def test_prints_to_console(self):
        console = Console(record=True, width=120)
        LoggingPublisher(console=console).publish(BridgeEvent(event_type="stop"))
        assert "Received hook event: stop" in console.export_text()

    def test_satisfies_protocol(self):
        assert isinstance(LoggingPublisher(), Publisher)
