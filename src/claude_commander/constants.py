"""Constants for claude-commander.

This module contains:
- VERSION: Package version
- Bridge listener address and route table
- Hook marker and the Claude Code event names we install into
- Published event names and payload values

For paths, messages, and runtime settings, import from:
- claude_commander.config.paths
- claude_commander.config.messages
- claude_commander.config.settings
"""

from typing import Final

from claude_commander import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Bridge Listener
# =============================================================================

# Loopback only; the bridge is never exposed beyond this machine
BRIDGE_HOST: Final[str] = "127.0.0.1"
HOOK_SERVER_PORT: Final[int] = 3456

# Hook commands reach the bridge through this host name
HOOK_TARGET_HOST: Final[str] = "localhost"

BRIDGE_RESPONSE_BODY: Final[str] = "ok"
BRIDGE_STARTUP_POLL_INTERVAL: Final[float] = 0.05
BRIDGE_SHUTDOWN_TIMEOUT_SECONDS: Final[float] = 5.0

# =============================================================================
# Routes
# =============================================================================

ROUTE_PROMPT_SUBMIT: Final[str] = "/hook/prompt-submit"
ROUTE_STOP: Final[str] = "/hook/stop"
ROUTE_TOOL_FAILURE: Final[str] = "/hook/tool-failure"

# Body field checked on the tool-failure route
FIELD_IS_INTERRUPT: Final[str] = "is_interrupt"

# =============================================================================
# Hook Installation
# =============================================================================

# Embedded as a trailing shell comment in every command we install.
# Presence of this token is the only test for "this entry is ours".
HOOK_MARKER: Final[str] = "claude-commander"

HOOKS_KEY: Final[str] = "hooks"
HOOK_COMMAND_KEY: Final[str] = "command"
HOOK_TYPE_COMMAND: Final[str] = "command"
DEFAULT_HOOK_TIMEOUT_SECONDS: Final[int] = 5

EVENT_USER_PROMPT_SUBMIT: Final[str] = "UserPromptSubmit"
EVENT_STOP: Final[str] = "Stop"
EVENT_POST_TOOL_USE_FAILURE: Final[str] = "PostToolUseFailure"
EVENT_NOTIFICATION: Final[str] = "Notification"
EVENT_PRE_TOOL_USE: Final[str] = "PreToolUse"

# Events install() writes to and is_configured() inspects
HOOK_EVENTS: Final[tuple[str, ...]] = (
    EVENT_USER_PROMPT_SUBMIT,
    EVENT_STOP,
    EVENT_POST_TOOL_USE_FAILURE,
)

# Earlier releases installed into these; remove() still cleans them up
LEGACY_HOOK_EVENTS: Final[tuple[str, ...]] = (EVENT_NOTIFICATION, EVENT_PRE_TOOL_USE)

REMOVABLE_HOOK_EVENTS: Final[tuple[str, ...]] = HOOK_EVENTS + LEGACY_HOOK_EVENTS

# =============================================================================
# Published Events
# =============================================================================

CLAUDE_EVENT_NAME: Final[str] = "claude-event"

EVENT_TYPE_PROMPT_SUBMIT: Final[str] = "prompt_submit"
EVENT_TYPE_STOP: Final[str] = "stop"
EVENT_TYPE_INTERRUPT: Final[str] = "interrupt"

# =============================================================================
# Logging
# =============================================================================

PACKAGE_LOGGER_NAME: Final[str] = "claude_commander"
# Dedicated logger for every published bridge event
EVENTS_LOGGER_NAME: Final[str] = "claude_commander.events"
LOG_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 3

# =============================================================================
# CLI
# =============================================================================

HTTP_TIMEOUT_QUICK: Final[float] = 2.0
