"""UI messages and strings for claude-commander.

This module consolidates the user-facing messages returned by the hook
commands and printed by the CLI.
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Bridge Claude Code hook events into your desktop app"

# =============================================================================
# Hook Installation
# =============================================================================

HOOK_MESSAGES = {
    "configured": "Hooks configured at {path}",
    "removed": "Hooks removed successfully",
    "no_settings_file": "No settings file found",
    "status_configured": "Claude Code hooks are configured in {path}",
    "status_not_configured": "Claude Code hooks are not configured in {path}",
}

# =============================================================================
# Settings File Errors
# =============================================================================

SETTINGS_ERRORS = {
    "read_failed": "Failed to read settings",
    "parse_failed": "Failed to parse settings",
    "write_failed": "Failed to write settings",
    "mkdir_failed": "Failed to create .claude directory",
    "lock_failed": "Failed to lock settings",
    "not_an_object": "settings is not an object",
    "hooks_not_an_object": "hooks is not an object",
}

# =============================================================================
# Bridge
# =============================================================================

BRIDGE_MESSAGES = {
    "listening": "Hook server listening on port {port}",
    "bind_failed": "Failed to start hook server",
    "startup_timeout": "Hook server did not start within {timeout}s",
    "stopped": "Hook server stopped",
    "serving": "Listening for Claude Code hooks on http://{host}:{port} (Ctrl+C to stop)",
    "event_received": "Received hook event: {event_type}",
    "send_ok": "Sent {route} to {url}",
    "send_failed": "Could not reach the hook server at {url}: {error}",
    "unknown_event": "Unknown event '{event}'. Choose one of: {choices}",
}

# =============================================================================
# Generic
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
}
