"""Console helpers shared by the CLI commands."""
import typer
from rich.console import Console

from depignore_common import DepIgnoreError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✔[/bold green] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✘[/bold red] {message}")


def handle_error(exc: Exception) -> None:
    """Print an error and exit with status 1."""
    if isinstance(exc, DepIgnoreError):
        error(f"{exc.code}: {exc.message}")
    elif isinstance(exc, FileNotFoundError):
        error(str(exc))
    else:
        error(f"Unexpected error: {exc}")
    raise typer.Exit(1)
