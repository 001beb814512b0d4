"""Bridge commands: serve (foreground listener) and send (manual test request)."""

from pathlib import Path

import httpx
import typer

from claude_commander.bridge import BridgeServer, LoggingPublisher
from claude_commander.bridge.server import configure_logging
from claude_commander.config.messages import BRIDGE_MESSAGES
from claude_commander.config.settings import bridge_settings
from claude_commander.constants import (
    FIELD_IS_INTERRUPT,
    HOOK_TARGET_HOST,
    HTTP_TIMEOUT_QUICK,
    ROUTE_PROMPT_SUBMIT,
    ROUTE_STOP,
    ROUTE_TOOL_FAILURE,
)
from claude_commander.exceptions import BridgeStartupError
from claude_commander.utils import console, print_error, print_info, print_success

# `send` event names -> bridge routes
SEND_ROUTES = {
    "prompt-submit": ROUTE_PROMPT_SUBMIT,
    "stop": ROUTE_STOP,
    "tool-failure": ROUTE_TOOL_FAILURE,
}


def serve_command(
    port: int | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
) -> None:
    """Run the bridge in the foreground, printing every published event."""
    configure_logging(
        log_level or bridge_settings.log_level,
        log_file=log_file or bridge_settings.log_file,
    )

    server = BridgeServer(LoggingPublisher(console=console), port=port)
    try:
        server.start()
    except BridgeStartupError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info(BRIDGE_MESSAGES["serving"].format(host=server.host, port=server.port))
    try:
        server.wait()
    except KeyboardInterrupt:
        console.print()
    finally:
        server.stop()


def send_command(event: str, interrupt: bool = True, port: int | None = None) -> None:
    """POST a request to a running bridge exactly as an installed hook would."""
    route = SEND_ROUTES.get(event)
    if route is None:
        print_error(
            BRIDGE_MESSAGES["unknown_event"].format(event=event, choices=", ".join(SEND_ROUTES))
        )
        raise typer.Exit(code=1)

    target_port = port if port is not None else bridge_settings.port
    url = f"http://{HOOK_TARGET_HOST}:{target_port}{route}"
    body = {FIELD_IS_INTERRUPT: interrupt} if route == ROUTE_TOOL_FAILURE else None

    try:
        # Loopback target: never route through a proxy from the environment
        with httpx.Client(timeout=HTTP_TIMEOUT_QUICK, trust_env=False) as client:
            response = client.post(url, json=body)
            response.raise_for_status()
    except httpx.HTTPError as e:
        print_error(BRIDGE_MESSAGES["send_failed"].format(url=url, error=e))
        raise typer.Exit(code=1) from e

    print_success(BRIDGE_MESSAGES["send_ok"].format(route=route, url=url))
