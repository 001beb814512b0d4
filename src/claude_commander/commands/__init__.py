"""CLI commands for claude-commander."""

from claude_commander.commands.bridge_cmd import send_command, serve_command
from claude_commander.commands.hooks_cmd import remove_command, setup_command, status_command

__all__ = [
    "remove_command",
    "send_command",
    "serve_command",
    "setup_command",
    "status_command",
]
