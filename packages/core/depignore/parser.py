"""
Dependency String Parsing
=========================

Parses dependency declarations written as text:
- Simple: left-pad >= 1.0
- Several clauses: left-pad >= 1.0, < 2.0
- Compatible release: left-pad ~> 1.4
- Comments and blank lines (in multi-line content)
"""

import re
from pathlib import Path
from typing import List, Optional

from .host import Dependency
from .subjects import PackageSubject
from .version import parse_requirement

_DEPENDENCY_PATTERN = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9._]*)\s*((?:~>|~=|==|>=|<=|>|<|=).*)?$")


def parse_dependency(dep_str: str) -> Optional[Dependency]:
    """
    Parse a single dependency string.

    Args:
        dep_str: Dependency string like "core>=2.0" or "left-pad >= 1.0, < 2.0"

    Returns:
        Dependency object, or None if the line is empty/comment

    Raises:
        ValueError: If the string is not a dependency declaration

    Examples:
        >>> parse_dependency("left-pad >= 1.0, < 2.0").name
        'left-pad'
    """
    dep_str = dep_str.strip()

    # Skip empty lines and comments
    if not dep_str or dep_str.startswith("#"):
        return None

    match = _DEPENDENCY_PATTERN.match(dep_str)
    if not match:
        raise ValueError(f"Invalid dependency string: '{dep_str}'")

    name = match.group(1)
    requirement = parse_requirement(match.group(2) or None)
    return Dependency(PackageSubject(name), requirement)


def parse_dependencies_string(content: str) -> List[Dependency]:
    """
    Parse dependencies from multi-line content, one per line.

    Args:
        content: Multi-line string with dependency declarations

    Returns:
        List of Dependency objects
    """
    dependencies: List[Dependency] = []

    for line in content.splitlines():
        line = line.split("#")[0].strip()  # Remove inline comments
        if not line:
            continue

        dep = parse_dependency(line)
        if dep:
            dependencies.append(dep)

    return dependencies


def parse_dependencies_file(file_path: Path) -> List[Dependency]:
    """
    Parse dependencies from a file.

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Dependencies file not found: {file_path}")

    return parse_dependencies_string(file_path.read_text(encoding="utf-8"))
