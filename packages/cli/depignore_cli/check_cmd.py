"""Check command - Show how the ignore rules affect one requirement."""
import os
from pathlib import Path
from typing import List, Optional

import typer

from depignore import (
    Definition,
    PlatformSubject,
    load_manifest_file,
    matches_platform,
    parse_requirement,
    parse_subject_argument,
    parse_version,
)
from depignore_common import ConfigurationError, Defaults, EnvVars

from .utils import console, error, handle_error, success


def _load_definition(manifest: Optional[str]) -> Definition:
    if manifest:
        return load_manifest_file(manifest)
    default_path = os.environ.get(EnvVars.MANIFEST) or Defaults.MANIFEST_FILE
    if Path(default_path).exists():
        return load_manifest_file(default_path)
    return Definition()


def check(
    subject: str = typer.Argument(
        ..., help="Package name, or platform:runtime / platform:index-client"
    ),
    requirement: List[str] = typer.Argument(
        None, help="Requirement clauses, e.g. '>= 1.0' '< 2.0'"
    ),
    manifest: Optional[str] = typer.Option(
        None, "--manifest", "-m", help="Path to manifest with ignore rules"
    ),
    version: Optional[str] = typer.Option(
        None, "--version", "-V", help="Check whether this version satisfies the result"
    ),
):
    """
    Print the declared and effective requirement for a subject.

    Examples:
        depignore check left-pad '>= 1.0' '< 2.0'
        depignore check platform:runtime '>= 3.8, < 3.11' --version 3.12
    """
    try:
        definition = _load_definition(manifest)
        parsed_subject = parse_subject_argument(subject)
        declared = parse_requirement(requirement or None)
        current = parse_version(version) if version else None
    except (ConfigurationError, FileNotFoundError) as e:
        handle_error(e)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)

    evaluator = definition.evaluator
    kind = evaluator.kind_for(parsed_subject)
    effective = evaluator.apply(parsed_subject, declared)

    console.print(f"[bold]Subject:[/bold]   {parsed_subject}")
    console.print(f"[bold]Rule:[/bold]      {kind.value if kind else 'none'}")
    console.print(f"[bold]Declared:[/bold]  {declared}")
    console.print(f"[bold]Effective:[/bold] {effective}")

    if current is None:
        return

    if isinstance(parsed_subject, PlatformSubject):
        satisfied = matches_platform(evaluator, parsed_subject.kind, current, declared)
    else:
        satisfied = evaluator.is_completely_ignored(parsed_subject) or effective.is_satisfied_by(current)

    if satisfied:
        success(f"{current} satisfies the effective requirement")
    else:
        error(f"{current} does not satisfy the effective requirement")
        raise typer.Exit(1)
