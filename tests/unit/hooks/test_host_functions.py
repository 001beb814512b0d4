"""Tests for the check/setup/remove functions a host application registers."""

from pathlib import Path

import pytest

from claude_commander.exceptions import HooksError, SettingsIOError, SettingsParseError
from claude_commander.hooks import check_hooks_configured, remove_hooks, setup_hooks


def test_setup_check_remove_cycle(settings_path: Path):
    assert check_hooks_configured(settings_path) is False

    assert setup_hooks(settings_path) == f"Hooks configured at {settings_path}"
    assert check_hooks_configured(settings_path) is True

    assert remove_hooks(settings_path) == "Hooks removed successfully"
    assert check_hooks_configured(settings_path) is False


def test_remove_without_file(settings_path: Path):
    assert remove_hooks(settings_path) == "No settings file found"


def test_default_path_uses_home(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    message = setup_hooks()

    expected = tmp_path / ".claude" / "settings.json"
    assert message == f"Hooks configured at {expected}"
    assert expected.exists()
    assert check_hooks_configured() is True


def test_errors_carry_a_displayable_message(settings_path: Path, write_settings):
    write_settings("]")

    for operation in (check_hooks_configured, setup_hooks, remove_hooks):
        with pytest.raises(SettingsParseError) as exc_info:
            operation(settings_path)
        message = str(exc_info.value)
        assert message.startswith("Failed to parse settings")
        assert str(settings_path) in message


def test_unwritable_directory_is_an_io_error(tmp_path: Path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    with pytest.raises(SettingsIOError) as exc_info:
        setup_hooks(blocker / ".claude" / "settings.json")

    assert isinstance(exc_info.value, HooksError)
    assert exc_info.value.cause is not None
