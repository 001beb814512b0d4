"""Hooks installer for Claude Code's global settings.json.

Merges claude-commander's hook commands into ``~/.claude/settings.json``
alongside whatever else is configured there, and removes them again.

Every operation loads the document fresh, mutates it in memory and writes
it back in one piece. Our entries are identified only by the marker token
in their ``command``; array position and surrounding keys are never used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from claude_commander.config.messages import HOOK_MESSAGES, SETTINGS_ERRORS
from claude_commander.config.paths import get_claude_settings_path
from claude_commander.config.settings import bridge_settings, hook_settings
from claude_commander.constants import HOOK_EVENTS, HOOKS_KEY, REMOVABLE_HOOK_EVENTS
from claude_commander.exceptions import SettingsSchemaError
from claude_commander.hooks.entries import build_our_hooks, group_has_marker, has_our_hooks
from claude_commander.hooks.store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class HooksInstallResult:
    """Result of a hooks install/remove operation."""

    message: str
    settings_path: Path
    events: list[str] = field(default_factory=list)  # events actually changed


class HooksInstaller:
    """Install, remove and detect claude-commander hooks.

    Example usage:
        installer = HooksInstaller()
        if not installer.is_configured():
            result = installer.install()
            print(result.message)
    """

    def __init__(
        self,
        settings_path: Path | None = None,
        port: int | None = None,
        timeout: int | None = None,
    ):
        """Initialize hooks installer.

        Args:
            settings_path: settings.json to manage (default: ~/.claude/settings.json).
            port: Bridge port baked into the hook commands.
            timeout: Hook command timeout in seconds.
        """
        self._settings_path = settings_path
        self.port = port if port is not None else bridge_settings.port
        self.timeout = timeout if timeout is not None else hook_settings.hook_timeout_seconds

    @property
    def settings_path(self) -> Path:
        """Resolve the settings path lazily so a missing home dir surfaces per call."""
        if self._settings_path is None:
            self._settings_path = hook_settings.settings_path or get_claude_settings_path()
        return self._settings_path

    @property
    def store(self) -> SettingsStore:
        return SettingsStore(self.settings_path)

    def is_configured(self) -> bool:
        """Check whether our hooks are present for any of the current events.

        Returns:
            False when the file is missing, is not a JSON object, or has only
            foreign hooks.

        Raises:
            SettingsIOError: If the file exists but cannot be read.
            SettingsParseError: If the file is not valid JSON.
        """
        store = self.store
        if not store.exists():
            return False

        settings = store.load()
        if not isinstance(settings, dict):
            return False
        hooks = settings.get(HOOKS_KEY)
        if not isinstance(hooks, dict):
            return False

        return any(has_our_hooks(hooks.get(event_name)) for event_name in HOOK_EVENTS)

    def install(self) -> HooksInstallResult:
        """Install our hooks, keeping every other key and hook intact.

        Idempotent: an event that already carries one of our entries is
        left as it is. An event whose value is not a list is skipped with a
        warning.

        Raises:
            SettingsIOError: If the directory or file cannot be created/read/written.
            SettingsParseError: If the existing file is not valid JSON.
            SettingsSchemaError: If the document or its ``hooks`` is not an object.
        """
        store = self.store

        # locked() creates ~/.claude if needed before taking the lock
        with store.locked():
            settings = store.load_or_empty()
            if not isinstance(settings, dict):
                raise SettingsSchemaError(
                    SETTINGS_ERRORS["not_an_object"], settings_path=store.path
                )
            added = self._merge_hooks(settings)
            store.save(settings)

        if added:
            logger.info(f"Installed hooks for {', '.join(added)} in {store.path}")
        else:
            logger.info(f"Hooks already present in {store.path}")

        return HooksInstallResult(
            message=HOOK_MESSAGES["configured"].format(path=store.path),
            settings_path=store.path,
            events=added,
        )

    def remove(self) -> HooksInstallResult:
        """Remove every group carrying our marker, including legacy events.

        A group is dropped whole if any of its entries is ours. Event lists
        left empty are deleted. A missing settings file is not an error, and
        a document that is not an object is written back unchanged.

        Raises:
            SettingsIOError: If the file cannot be read or written.
            SettingsParseError: If the file is not valid JSON.
        """
        store = self.store
        if not store.exists():
            return HooksInstallResult(
                message=HOOK_MESSAGES["no_settings_file"],
                settings_path=store.path,
            )

        with store.locked():
            settings = store.load()
            removed = self._strip_hooks(settings)
            store.save(settings)

        if removed:
            logger.info(f"Removed hooks for {', '.join(removed)} from {store.path}")

        return HooksInstallResult(
            message=HOOK_MESSAGES["removed"],
            settings_path=store.path,
            events=removed,
        )

    def _merge_hooks(self, settings: dict[str, Any]) -> list[str]:
        """Add our hook groups to ``settings`` in place.

        Returns:
            Event names that received a new group.
        """
        if HOOKS_KEY not in settings:
            settings[HOOKS_KEY] = {}

        hooks_obj = settings[HOOKS_KEY]
        if not isinstance(hooks_obj, dict):
            raise SettingsSchemaError(
                SETTINGS_ERRORS["hooks_not_an_object"],
                settings_path=self.settings_path,
                key=HOOKS_KEY,
            )

        added: list[str] = []
        for event_name, hook_entry in build_our_hooks(self.port, self.timeout):
            if event_name not in hooks_obj:
                hooks_obj[event_name] = [hook_entry]
                added.append(event_name)
                continue

            existing = hooks_obj[event_name]
            if not isinstance(existing, list):
                logger.warning(
                    f"Skipping {event_name}: hooks.{event_name} in {self.settings_path} "
                    "is not a list"
                )
                continue
            if not has_our_hooks(existing):
                existing.append(hook_entry)
                added.append(event_name)

        return added

    def _strip_hooks(self, settings: Any) -> list[str]:
        """Remove our hook groups from ``settings`` in place.

        Returns:
            Event names that lost at least one group.
        """
        if not isinstance(settings, dict):
            return []
        hooks_obj = settings.get(HOOKS_KEY)
        if not isinstance(hooks_obj, dict):
            return []

        removed: list[str] = []
        for event_name in REMOVABLE_HOOK_EVENTS:
            event_hooks = hooks_obj.get(event_name)
            if not isinstance(event_hooks, list):
                continue
            kept = [group for group in event_hooks if not group_has_marker(group)]
            if len(kept) != len(event_hooks):
                hooks_obj[event_name] = kept
                removed.append(event_name)

        # Clean up empty event arrays
        empty_events = [
            key for key, value in hooks_obj.items() if isinstance(value, list) and not value
        ]
        for key in empty_events:
            del hooks_obj[key]

        return removed
