"""Console output helpers shared by the CLI commands."""

from rich.console import Console

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[cyan]i[/cyan] {message}")


__all__ = [
    "console",
    "error_console",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
]
