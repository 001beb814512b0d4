"""Custom exceptions for claude-commander.

All exceptions inherit from CommanderError, allowing callers to catch
every claude-commander error with a single except clause if desired.

Exception hierarchy:
    CommanderError (base)
    ├── HooksError
    │   ├── SettingsIOError
    │   ├── SettingsParseError
    │   └── SettingsSchemaError
    └── BridgeError
        └── BridgeStartupError
"""

from pathlib import Path
from typing import Any


class CommanderError(Exception):
    """Base exception for all claude-commander errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Hook Settings Errors
# =============================================================================


class HooksError(CommanderError):
    """Raised when reading or updating Claude Code's settings file fails.

    Base class for the errors surfaced by check/setup/remove hooks.
    """

    def __init__(
        self,
        message: str,
        settings_path: Path | None = None,
        cause: Exception | None = None,
    ):
        """Initialize hooks error.

        Args:
            message: Error description.
            settings_path: The settings file involved.
            cause: Underlying exception that caused the failure.
        """
        details: dict[str, Any] = {}
        if settings_path:
            details["settings_path"] = str(settings_path)
        if cause:
            details["cause"] = str(cause)
        super().__init__(message, details)
        self.settings_path = settings_path
        self.cause = cause


class SettingsIOError(HooksError):
    """Raised when the settings file or its directory cannot be accessed.

    Examples:
        - Home directory cannot be resolved
        - Permission denied reading or writing settings.json
        - ~/.claude cannot be created
    """


class SettingsParseError(HooksError):
    """Raised when settings.json does not contain valid JSON."""


class SettingsSchemaError(HooksError):
    """Raised when settings.json has an unexpected shape.

    Examples:
        - Top-level value is not an object (install only)
        - ``hooks`` exists but is not an object
    """

    def __init__(
        self,
        message: str,
        settings_path: Path | None = None,
        key: str | None = None,
    ):
        """Initialize schema error.

        Args:
            message: Error description.
            settings_path: The settings file involved.
            key: The key whose value had the wrong shape.
        """
        super().__init__(message, settings_path=settings_path)
        if key:
            self.details["key"] = key
        self.key = key


# =============================================================================
# Bridge Errors
# =============================================================================


class BridgeError(CommanderError):
    """Raised when the event bridge server fails."""

    def __init__(self, message: str, port: int | None = None):
        """Initialize bridge error.

        Args:
            message: Error description.
            port: The listener port involved.
        """
        details: dict[str, Any] = {}
        if port is not None:
            details["port"] = port
        super().__init__(message, details)
        self.port = port


class BridgeStartupError(BridgeError):
    """Raised when the bridge listener cannot start.

    Examples:
        - Port already in use
        - Server thread did not come up within the startup timeout
    """

    def __init__(
        self,
        message: str,
        port: int | None = None,
        cause: Exception | None = None,
    ):
        """Initialize bridge startup error.

        Args:
            message: Error description.
            port: The port the bridge tried to bind.
            cause: Underlying exception that caused the failure.
        """
        super().__init__(message, port=port)
        if cause:
            self.details["cause"] = str(cause)
        self.cause = cause
