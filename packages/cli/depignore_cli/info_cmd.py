"""Info commands - Version information."""
import sys

import typer
from rich.table import Table

from .utils import console, error


def version():
    """
    Show depignore version information.

    Examples:
        depignore version
    """
    try:
        import depignore
        import depignore_common
        from . import __version__ as cli_version

        python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

        table = Table(title="depignore Version Information", show_header=True, header_style="bold cyan")
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")

        table.add_row("CLI", cli_version)
        table.add_row("Core", depignore.__version__)
        table.add_row("Common", depignore_common.__version__)
        table.add_row("Python", python_version)

        console.print(table)

    except ImportError as e:
        error(f"Failed to get version info: {str(e)}")
        raise typer.Exit(1)
