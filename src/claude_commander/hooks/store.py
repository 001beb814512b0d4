"""Load and save Claude Code's settings.json.

The document is treated as an untyped JSON tree: we never validate keys
we do not own, so anything Claude Code or other integrations keep in the
file survives a load/save round trip.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Any

from claude_commander.config.messages import SETTINGS_ERRORS
from claude_commander.config.paths import SETTINGS_LOCK_SUFFIX, SETTINGS_TEMP_PREFIX
from claude_commander.exceptions import SettingsIOError, SettingsParseError
from claude_commander.utils.platform import exclusive_lock

logger = logging.getLogger(__name__)

JSON_INDENT = 2


class SettingsStore:
    """Read/write access to a single settings.json file."""

    def __init__(self, path: Path):
        self.path = path

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(self.path.name + SETTINGS_LOCK_SUFFIX)

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_parent(self) -> None:
        """Create the settings directory (recursively) if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SettingsIOError(
                SETTINGS_ERRORS["mkdir_failed"], settings_path=self.path, cause=e
            ) from e

    def load(self) -> Any:
        """Load and parse the settings document.

        Any JSON value is returned as is; callers decide what shape they need.

        Raises:
            SettingsIOError: If the file cannot be read.
            SettingsParseError: If the contents are not valid JSON.
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SettingsIOError(
                SETTINGS_ERRORS["read_failed"], settings_path=self.path, cause=e
            ) from e

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SettingsParseError(
                SETTINGS_ERRORS["parse_failed"], settings_path=self.path, cause=e
            ) from e

    def load_or_empty(self) -> Any:
        """Load the document, or start from an empty object if the file is absent."""
        if not self.exists():
            return {}
        return self.load()

    def save(self, document: Any) -> None:
        """Serialize ``document`` and replace the file's contents.

        The whole document is serialized before anything touches disk, then
        written to a temporary file beside the target and renamed over it,
        so readers only ever see the old or the new complete document.

        Raises:
            SettingsIOError: If the directory or file cannot be written.
        """
        content = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"

        self.ensure_parent()
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=SETTINGS_TEMP_PREFIX, suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise SettingsIOError(
                SETTINGS_ERRORS["write_failed"], settings_path=self.path, cause=e
            ) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as cleanup_error:
                    logger.debug(f"Failed to remove temp file {tmp_name}: {cleanup_error}")

        logger.debug(f"Wrote settings to {self.path}")

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold an exclusive lock on the settings file while mutating it."""
        self.ensure_parent()
        with ExitStack() as stack:
            try:
                stack.enter_context(exclusive_lock(self.lock_path))
            except OSError as e:
                raise SettingsIOError(
                    SETTINGS_ERRORS["lock_failed"], settings_path=self.path, cause=e
                ) from e
            yield
