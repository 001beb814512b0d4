"""Runtime configuration settings for claude-commander.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables. Values are read once when the
process starts and are frozen afterwards; nothing reconfigures the
bridge or the installer at runtime.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from claude_commander.constants import DEFAULT_HOOK_TIMEOUT_SECONDS, HOOK_SERVER_PORT


class BridgeSettings(BaseSettings):
    """Event bridge listener settings.

    Can be overridden via environment variables with CLAUDE_COMMANDER_BRIDGE_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="CLAUDE_COMMANDER_BRIDGE_", frozen=True)

    port: int = Field(
        default=HOOK_SERVER_PORT,
        ge=0,
        le=65535,
        description="Loopback port the bridge listens on (hook commands post here)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the bridge (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file; stream logging is used when unset",
    )
    startup_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="How long start() waits for the listener to come up",
    )


class HookSettings(BaseSettings):
    """Hook installation settings.

    Can be overridden via environment variables with CLAUDE_COMMANDER_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="CLAUDE_COMMANDER_", frozen=True)

    settings_path: Path | None = Field(
        default=None,
        description="Override for Claude Code's settings.json (defaults to ~/.claude/settings.json)",
    )
    hook_timeout_seconds: int = Field(
        default=DEFAULT_HOOK_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout Claude Code applies to each installed hook command",
    )


# Singleton instances for easy import
bridge_settings = BridgeSettings()
hook_settings = HookSettings()
