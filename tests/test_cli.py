"""Tests for the claude-commander CLI commands."""

import json
import socket
from pathlib import Path

import pytest
from typer.testing import CliRunner

from claude_commander.bridge import BridgeServer
from claude_commander.cli import app
from claude_commander.constants import HOOK_EVENTS, VERSION


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def free_port() -> int:
    """A loopback port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


class TestHookCommands:
    def test_status_not_configured(self, runner: CliRunner, settings_path: Path):
        result = runner.invoke(app, ["status", "--settings", str(settings_path)])
        assert result.exit_code == 0
        assert "are not configured" in result.output

    def test_setup_then_status(self, runner: CliRunner, settings_path: Path):
        result = runner.invoke(app, ["setup", "--settings", str(settings_path)])
        assert result.exit_code == 0
        assert "Hooks configured at" in result.output
        assert set(json.loads(settings_path.read_text())["hooks"]) == set(HOOK_EVENTS)

        result = runner.invoke(app, ["status", "-s", str(settings_path)])
        assert result.exit_code == 0
        assert "are configured" in result.output

    def test_setup_twice_adds_nothing(self, runner: CliRunner, settings_path: Path):
        runner.invoke(app, ["setup", "-s", str(settings_path)])
        result = runner.invoke(app, ["setup", "-s", str(settings_path)])
        assert result.exit_code == 0
        assert "added" not in result.output

    def test_remove(self, runner: CliRunner, settings_path: Path, write_settings):
        write_settings({"model": "opus"})
        runner.invoke(app, ["setup", "-s", str(settings_path)])

        result = runner.invoke(app, ["remove", "-s", str(settings_path)])

        assert result.exit_code == 0
        assert "Hooks removed successfully" in result.output
        assert json.loads(settings_path.read_text()) == {"model": "opus", "hooks": {}}

    def test_remove_without_settings_file(self, runner: CliRunner, settings_path: Path):
        result = runner.invoke(app, ["remove", "-s", str(settings_path)])
        assert result.exit_code == 0
        assert "No settings file found" in result.output
        assert not settings_path.exists()

    @pytest.mark.parametrize("command", ["status", "setup", "remove"])
    def test_malformed_settings_exit_nonzero(
        self, runner: CliRunner, settings_path: Path, write_settings, command: str
    ):
        write_settings("{oops")
        result = runner.invoke(app, [command, "-s", str(settings_path)])
        assert result.exit_code == 1
        assert settings_path.read_text() == "{oops"


class TestBridgeCommands:
    def test_send_unknown_event(self, runner: CliRunner):
        result = runner.invoke(app, ["send", "permission-request"])
        assert result.exit_code == 1

    def test_send_without_bridge(self, runner: CliRunner, free_port: int):
        result = runner.invoke(app, ["send", "stop", "--port", str(free_port)])
        assert result.exit_code == 1

    def test_send_reaches_bridge(self, runner: CliRunner, publisher):
        server = BridgeServer(publisher, port=0)
        server.start()
        try:
            assert runner.invoke(app, ["send", "stop", "-p", str(server.port)]).exit_code == 0
            result = runner.invoke(app, ["send", "tool-failure", "-p", str(server.port)])
            assert result.exit_code == 0
            result = runner.invoke(
                app, ["send", "tool-failure", "--no-interrupt", "-p", str(server.port)]
            )
            assert result.exit_code == 0
        finally:
            server.stop()

        assert publisher.event_types == ["stop", "interrupt"]

    def test_serve_port_in_use(self, runner: CliRunner, monkeypatch):
        monkeypatch.setattr(
            "claude_commander.commands.bridge_cmd.configure_logging", lambda *a, **k: None
        )
        blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        try:
            result = runner.invoke(app, ["serve", "--port", str(blocker.getsockname()[1])])
        finally:
            blocker.close()
        assert result.exit_code == 1


def test_version(runner: CliRunner):
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert VERSION in result.output
