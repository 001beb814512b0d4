"""Path constants for claude-commander.

Claude Code keeps its user-level configuration in ``~/.claude/settings.json``.
That file is shared with Claude Code itself and with any other integration
the user has installed, so we only ever touch our own hook entries in it.
"""

from pathlib import Path

from claude_commander.exceptions import SettingsIOError

CLAUDE_DIR = ".claude"
CLAUDE_SETTINGS_FILENAME = "settings.json"

# Advisory lock taken while install/remove rewrite the settings file
SETTINGS_LOCK_SUFFIX = ".lock"
# Temp file written next to settings.json and renamed over it
SETTINGS_TEMP_PREFIX = ".settings-"


def get_claude_settings_path() -> Path:
    """Return the path to Claude Code's global settings.json.

    Raises:
        SettingsIOError: If the home directory cannot be resolved.
    """
    try:
        home = Path.home()
    except RuntimeError as e:
        raise SettingsIOError("Could not find home directory", cause=e) from e
    return home / CLAUDE_DIR / CLAUDE_SETTINGS_FILENAME
