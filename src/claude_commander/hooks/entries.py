"""Hook entry shapes and marker detection.

Claude Code nests hooks two levels deep::

    "hooks": {
        "Stop": [                       # event -> list of groups
            {"hooks": [                 # group -> list of entries
                {"type": "command", "command": "...", "timeout": 5}
            ]}
        ]
    }

We always install one group holding exactly one entry, and we recognize
our entries only by the marker comment at the end of ``command``.
"""

from typing import Any

from claude_commander.constants import (
    EVENT_POST_TOOL_USE_FAILURE,
    EVENT_STOP,
    EVENT_USER_PROMPT_SUBMIT,
    HOOK_COMMAND_KEY,
    HOOK_MARKER,
    HOOK_TARGET_HOST,
    HOOK_TYPE_COMMAND,
    HOOKS_KEY,
    ROUTE_PROMPT_SUBMIT,
    ROUTE_STOP,
    ROUTE_TOOL_FAILURE,
)


def build_hook_command(route: str, port: int, pipe_stdin: bool = False) -> str:
    """Build the curl command a hook runs to reach the bridge.

    Args:
        route: Bridge route path (e.g. ``/hook/stop``).
        port: Bridge port.
        pipe_stdin: Forward the hook's JSON stdin as the request body.

    Returns:
        Shell command ending in the marker comment.
    """
    url = f"http://{HOOK_TARGET_HOST}:{port}{route}"
    if pipe_stdin:
        return f'curl -s -X POST -H "Content-Type: application/json" -d @- {url} # {HOOK_MARKER}'
    return f"curl -s -X POST {url} # {HOOK_MARKER}"


def make_hook_entry(command: str, timeout: int) -> dict[str, Any]:
    """Build an async hook group (fire-and-forget, doesn't block Claude Code)."""
    return {
        HOOKS_KEY: [
            {
                "type": HOOK_TYPE_COMMAND,
                HOOK_COMMAND_KEY: command,
                "timeout": timeout,
                "async": True,
            }
        ]
    }


def make_hook_entry_sync(command: str, timeout: int) -> dict[str, Any]:
    """Build a blocking hook group (Claude Code waits while stdin is piped)."""
    return {
        HOOKS_KEY: [
            {
                "type": HOOK_TYPE_COMMAND,
                HOOK_COMMAND_KEY: command,
                "timeout": timeout,
            }
        ]
    }


def build_our_hooks(port: int, timeout: int) -> list[tuple[str, dict[str, Any]]]:
    """Return ``(event_name, hook_group)`` pairs for every event we install."""
    return [
        (
            EVENT_USER_PROMPT_SUBMIT,
            make_hook_entry(build_hook_command(ROUTE_PROMPT_SUBMIT, port), timeout),
        ),
        (
            EVENT_STOP,
            make_hook_entry(build_hook_command(ROUTE_STOP, port), timeout),
        ),
        (
            # Needs stdin for the is_interrupt check, so it cannot be async
            EVENT_POST_TOOL_USE_FAILURE,
            make_hook_entry_sync(
                build_hook_command(ROUTE_TOOL_FAILURE, port, pipe_stdin=True), timeout
            ),
        ),
    ]


def is_marked_command(command: Any) -> bool:
    """Check whether a hook command string carries our marker."""
    return isinstance(command, str) and HOOK_MARKER in command


def group_has_marker(group: Any) -> bool:
    """Check whether any entry inside a hook group is ours.

    Malformed groups (not a dict, ``hooks`` not a list, entries without a
    string command) are treated as not ours and left alone.
    """
    if not isinstance(group, dict):
        return False
    inner_hooks = group.get(HOOKS_KEY)
    if not isinstance(inner_hooks, list):
        return False
    return any(
        isinstance(hook, dict) and is_marked_command(hook.get(HOOK_COMMAND_KEY))
        for hook in inner_hooks
    )


def has_our_hooks(event_hooks: Any) -> bool:
    """Check whether an event's group list already contains one of our entries."""
    if not isinstance(event_hooks, list):
        return False
    return any(group_has_marker(group) for group in event_hooks)
