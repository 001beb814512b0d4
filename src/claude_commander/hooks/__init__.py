"""Hook management for Claude Code.

The three functions below are the command surface a host GUI registers:
each returns a plain value and raises a ``HooksError`` whose ``str()`` is
a message fit to show the user.

Example usage:
    from claude_commander.hooks import check_hooks_configured, setup_hooks

    if not check_hooks_configured():
        print(setup_hooks())
"""

from __future__ import annotations

from pathlib import Path

from claude_commander.hooks.installer import HooksInstaller, HooksInstallResult

__all__ = [
    "HooksInstaller",
    "HooksInstallResult",
    "check_hooks_configured",
    "setup_hooks",
    "remove_hooks",
]


def check_hooks_configured(settings_path: Path | None = None) -> bool:
    """Return True if our hooks are installed in Claude Code's settings.

    Args:
        settings_path: Optional settings.json override.
    """
    return HooksInstaller(settings_path=settings_path).is_configured()


def setup_hooks(settings_path: Path | None = None) -> str:
    """Install our hooks and return a success message.

    Args:
        settings_path: Optional settings.json override.
    """
    return HooksInstaller(settings_path=settings_path).install().message


def remove_hooks(settings_path: Path | None = None) -> str:
    """Remove our hooks and return a success message.

    Args:
        settings_path: Optional settings.json override.
    """
    return HooksInstaller(settings_path=settings_path).remove().message
