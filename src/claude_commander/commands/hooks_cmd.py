"""Hook commands: status, setup, remove."""

from pathlib import Path

import typer

from claude_commander.config.messages import HOOK_MESSAGES
from claude_commander.exceptions import HooksError
from claude_commander.hooks import HooksInstaller
from claude_commander.utils import print_error, print_info, print_success


def status_command(settings_path: Path | None = None) -> None:
    """Report whether our hooks are present in Claude Code's settings."""
    installer = HooksInstaller(settings_path=settings_path)
    try:
        configured = installer.is_configured()
    except HooksError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if configured:
        print_success(HOOK_MESSAGES["status_configured"].format(path=installer.settings_path))
    else:
        print_info(HOOK_MESSAGES["status_not_configured"].format(path=installer.settings_path))


def setup_command(settings_path: Path | None = None) -> None:
    """Install our hooks into Claude Code's settings."""
    try:
        result = HooksInstaller(settings_path=settings_path).install()
    except HooksError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(result.message)
    for event_name in result.events:
        print_info(f"  added {event_name}")


def remove_command(settings_path: Path | None = None) -> None:
    """Remove our hooks from Claude Code's settings."""
    try:
        result = HooksInstaller(settings_path=settings_path).remove()
    except HooksError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(result.message)
    for event_name in result.events:
        print_info(f"  cleaned {event_name}")
