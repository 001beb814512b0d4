"""Main CLI entry point for claude-commander."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from claude_commander.commands import (
    remove_command,
    send_command,
    serve_command,
    setup_command,
    status_command,
)
from claude_commander.config.messages import ERROR_MESSAGES, PROJECT_TAGLINE
from claude_commander.constants import VERSION
from claude_commander.exceptions import CommanderError
from claude_commander.utils import console, print_error

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ".env", verbose=False)

app = typer.Typer(
    name="claude-commander",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

SETTINGS_OPTION_HELP = "Claude Code settings.json to use (default: ~/.claude/settings.json)"


@app.command("status")
def status(
    settings: Path | None = typer.Option(None, "--settings", "-s", help=SETTINGS_OPTION_HELP),
) -> None:
    """Show whether claude-commander hooks are configured."""
    status_command(settings_path=settings)


@app.command("setup")
def setup(
    settings: Path | None = typer.Option(None, "--settings", "-s", help=SETTINGS_OPTION_HELP),
) -> None:
    """Install hooks into Claude Code's settings.

    Safe to run repeatedly; existing hooks from other tools are kept.
    """
    setup_command(settings_path=settings)


@app.command("remove")
def remove(
    settings: Path | None = typer.Option(None, "--settings", "-s", help=SETTINGS_OPTION_HELP),
) -> None:
    """Remove claude-commander hooks from Claude Code's settings."""
    remove_command(settings_path=settings)


@app.command("serve")
def serve(
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to this file"),
) -> None:
    """Run the event bridge in the foreground and print received events."""
    serve_command(port=port, log_level=log_level, log_file=log_file)


@app.command("send")
def send(
    event: str = typer.Argument(..., help="prompt-submit, stop, or tool-failure"),
    interrupt: bool = typer.Option(
        True,
        "--interrupt/--no-interrupt",
        help="is_interrupt value for tool-failure",
    ),
    port: int | None = typer.Option(None, "--port", "-p", help="Bridge port"),
) -> None:
    """Send a test hook request to a running bridge."""
    send_command(event, interrupt=interrupt, port=port)


@app.command("version")
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]claude-commander[/bold cyan] version [green]{VERSION}[/green]")


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'claude-commander'.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except CommanderError as e:
        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
