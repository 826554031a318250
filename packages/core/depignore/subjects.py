"""
Constraint Subjects
===================

A constraint subject is what a version requirement constrains: either one of
the two reserved platform subjects (the runtime version and the
package-index-client version) or a named package.

The two are distinct types, so a package can never be mistaken for a
platform subject whatever it is called.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from depignore_common import ConfigurationError, PlatformKeywords


class PlatformKind(str, Enum):
    """The reserved platform subjects."""

    RUNTIME = PlatformKeywords.RUNTIME
    INDEX_CLIENT = PlatformKeywords.INDEX_CLIENT


@dataclass(frozen=True)
class PlatformSubject:
    """The runtime or index-client version."""

    kind: PlatformKind

    @property
    def is_platform(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{PlatformKeywords.CLI_PREFIX}{self.kind.value}"


@dataclass(frozen=True)
class PackageSubject:
    """A named package. ``name`` is always normalized."""

    name: str

    def __post_init__(self) -> None:
        normalized = normalize_package_name(self.name) if isinstance(self.name, str) else ""
        if not normalized:
            raise ConfigurationError(f"dependency name must not be empty, got {self.name!r}")
        object.__setattr__(self, "name", normalized)

    @property
    def is_platform(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name


ConstraintSubject = Union[PlatformSubject, PackageSubject]

RUNTIME = PlatformSubject(PlatformKind.RUNTIME)
INDEX_CLIENT = PlatformSubject(PlatformKind.INDEX_CLIENT)


def normalize_package_name(name: str) -> str:
    """
    Normalize package name for comparison.

    PEP 503: Replace any run of ``-``, ``_`` or ``.`` with a single hyphen,
    and convert to lowercase.
    """
    return re.sub(r"[-_.]+", "-", name.strip().lower()).strip("-")


def as_subject(value: object) -> ConstraintSubject:
    """
    Convert a rule declaration's subject into a ConstraintSubject.

    Accepts a subject instance, a PlatformKind, or a package-name string.
    Strings always name packages; platform subjects are requested with
    PlatformKind members.

    Raises:
        ConfigurationError: For any other value, or a package name that
            normalizes to nothing
    """
    if isinstance(value, (PlatformSubject, PackageSubject)):
        return value
    if isinstance(value, PlatformKind):
        return PlatformSubject(value)
    if isinstance(value, str):
        return PackageSubject(value)
    raise ConfigurationError(
        "dependency name must be PlatformKind.RUNTIME, PlatformKind.INDEX_CLIENT "
        f"or a package name string, got {value!r}"
    )


def platform_subject_from_keyword(keyword: str) -> PlatformSubject:
    """
    Resolve a textual platform keyword ("runtime", "python", "index-client", "pip").

    Raises:
        ConfigurationError: If the keyword names no platform subject
    """
    normalized = keyword.strip().lower() if isinstance(keyword, str) else keyword
    if normalized in PlatformKeywords.RUNTIME_ALIASES:
        return RUNTIME
    if normalized in PlatformKeywords.INDEX_CLIENT_ALIASES:
        return INDEX_CLIENT
    accepted = PlatformKeywords.RUNTIME_ALIASES + PlatformKeywords.INDEX_CLIENT_ALIASES
    raise ConfigurationError(
        f"Unknown platform {keyword!r}. Supported: {', '.join(accepted)}"
    )


def parse_subject_argument(value: str) -> ConstraintSubject:
    """
    Parse a subject written on the command line.

    ``platform:runtime`` / ``platform:index-client`` select platform
    subjects; anything else is a package name.
    """
    if value.startswith(PlatformKeywords.CLI_PREFIX):
        return platform_subject_from_keyword(value[len(PlatformKeywords.CLI_PREFIX) :])
    return as_subject(value)
