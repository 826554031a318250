"""Rules command - List the ignore rules a manifest declares."""
import os
from typing import Optional

import typer
from rich.table import Table

from depignore import OverrideKind, load_manifest_file
from depignore_common import ConfigurationError, Defaults, EnvVars

from .utils import console, handle_error, info


def rules(
    path: Optional[str] = typer.Argument(
        None,
        help="Path to manifest (default: $DEPIGNORE_MANIFEST or depignore.yaml)",
    ),
):
    """
    Show the ignore rules declared in a manifest.

    Examples:
        depignore rules
        depignore rules path/to/depignore.yaml
    """
    path = path or os.environ.get(EnvVars.MANIFEST) or Defaults.MANIFEST_FILE

    try:
        definition = load_manifest_file(path)
    except (ConfigurationError, FileNotFoundError) as e:
        handle_error(e)

    snapshot = definition.ignored_dependencies
    if not snapshot:
        info(f"No ignore rules in {path}")
        return

    table = Table(title=f"Ignore rules ({path})", show_header=True, header_style="bold cyan")
    table.add_column("Subject", style="cyan", no_wrap=True)
    table.add_column("Kind", style="green")
    table.add_column("Effect")

    for rule in snapshot.rules():
        effect = "all constraints removed" if rule.kind is OverrideKind.COMPLETE else "upper bounds removed"
        table.add_row(str(rule.subject), rule.kind.value, effect)

    console.print(table)
