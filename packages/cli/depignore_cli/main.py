"""depignore CLI - Main entry point."""
import os
from typing import Optional

import typer

from depignore_common import EnvVars, configure_logging

from . import check_cmd, info_cmd, rules_cmd

app = typer.Typer(
    name="depignore",
    help="depignore CLI - Inspect dependency ignore rules",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (debug, info, warning, error)"
    ),
):
    """Configure logging before any command runs."""
    if log_level is None and not os.environ.get(EnvVars.LOG_LEVEL):
        return
    try:
        configure_logging(level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


# Register all commands
app.command()(rules_cmd.rules)
app.command()(check_cmd.check)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
