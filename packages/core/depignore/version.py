"""
Version Parsing and Requirement Algebra
=======================================

Parses and compares package versions and the version requirements the host
resolver works with, and strips upper bounds from a requirement.

Supported operators:
- ``=``  exact match (``==`` accepted as an alias)
- ``>``, ``>=``, ``<``, ``<=``
- ``~>`` compatible release (``~=`` accepted as an alias)

A requirement is an ordered set of (operator, version) clauses. A requirement
with no clauses accepts any version; this is the *default* requirement.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union


class VersionOperator(str, Enum):
    """Version comparison operators."""

    EQ = "="  # Exact match
    GT = ">"  # Greater than
    GE = ">="  # Greater or equal
    LT = "<"  # Less than
    LE = "<="  # Less or equal
    COMPAT = "~>"  # Compatible release


LOWER_BOUND_OPERATORS = frozenset({VersionOperator.EQ, VersionOperator.GT, VersionOperator.GE})
UPPER_BOUND_OPERATORS = frozenset({VersionOperator.LT, VersionOperator.LE})

# Spellings accepted when parsing, longest first to avoid partial matches
_OPERATOR_SPELLINGS = (
    ("~>", VersionOperator.COMPAT),
    ("~=", VersionOperator.COMPAT),
    (">=", VersionOperator.GE),
    ("<=", VersionOperator.LE),
    ("==", VersionOperator.EQ),
    (">", VersionOperator.GT),
    ("<", VersionOperator.LT),
    ("=", VersionOperator.EQ),
)

_VERSION_PATTERN = re.compile(
    r"^(\d+(?:\.\d+)*)(?:[.\-]?(a|b|c|rc|alpha|beta|pre)\.?(\d+)?)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Version:
    """
    Represents a parsed version number.

    Supports dotted release numbers of any length and an optional
    pre-release tag:
    - 2.7
    - 1.0.0
    - 3.4.1.2
    - 1.0.0a1 (alpha)
    - 1.0.0b2 (beta)
    - 1.0.0rc1 (release candidate)

    Trailing zero segments are insignificant: ``1.0 == 1.0.0``.
    """

    release: Tuple[int, ...]
    pre_release: Optional[str] = None
    pre_release_num: Optional[int] = None

    def __str__(self) -> str:
        """Convert version to string."""
        base = ".".join(str(part) for part in self.release)
        if self.pre_release:
            base += f"{self.pre_release}{self.pre_release_num if self.pre_release_num is not None else ''}"
        return base

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) > 1 else 0

    @property
    def patch(self) -> int:
        return self.release[2] if len(self.release) > 2 else 0

    @property
    def is_prerelease(self) -> bool:
        return self.pre_release is not None

    def as_tuple(self) -> Tuple[Tuple[int, ...], int, int]:
        """
        Convert to tuple for comparison.

        Pre-releases are sorted before releases:
        - a/alpha = -3
        - b/beta = -2
        - rc/c/pre = -1
        - release = 0
        """
        release = list(self.release)
        while len(release) > 1 and release[-1] == 0:
            release.pop()

        pre_order = 0
        pre_num = 0
        if self.pre_release:
            pre_lower = self.pre_release.lower()
            if pre_lower in ("a", "alpha"):
                pre_order = -3
            elif pre_lower in ("b", "beta"):
                pre_order = -2
            else:
                pre_order = -1
            pre_num = self.pre_release_num or 0

        return (tuple(release), pre_order, pre_num)

    def bump(self) -> "Version":
        """
        Next incompatible release for the compatible-release operator.

        Drops the last release segment (unless it is the only one) and
        increments the new last segment: 2.7 -> 3, 2.7.1 -> 2.8, 4 -> 5.
        """
        segments = list(self.release)
        if len(segments) > 1:
            segments.pop()
        segments[-1] += 1
        return Version(release=tuple(segments))

    def __lt__(self, other: "Version") -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "Version") -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "Version") -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "Version") -> bool:
        return self.as_tuple() >= other.as_tuple()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return False
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())


def parse_version(version_str: Union[str, Version]) -> Version:
    """
    Parse a version string into a Version object.

    Args:
        version_str: Version string like "2.7", "1.0.0", "1.0.0a1"

    Returns:
        Version object

    Raises:
        ValueError: If version string is invalid
    """
    if isinstance(version_str, Version):
        return version_str
    if not isinstance(version_str, str):
        raise ValueError(f"Invalid version: {version_str!r}")

    match = _VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise ValueError(f"Invalid version string: '{version_str}'")

    release = tuple(int(part) for part in match.group(1).split("."))
    pre_release = match.group(2) if match.group(2) else None
    pre_release_num = int(match.group(3)) if match.group(3) else None

    return Version(release=release, pre_release=pre_release, pre_release_num=pre_release_num)


@dataclass(frozen=True)
class VersionConstraint:
    """Represents a single clause like >=1.0.0 or ~>2.7."""

    operator: VersionOperator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    @property
    def is_upper_bound(self) -> bool:
        return self.operator in UPPER_BOUND_OPERATORS

    def is_satisfied_by(self, version: Union[str, Version]) -> bool:
        """Check if a version satisfies this constraint."""
        version = parse_version(version)
        if self.operator == VersionOperator.EQ:
            return version == self.version
        elif self.operator == VersionOperator.GE:
            return version >= self.version
        elif self.operator == VersionOperator.GT:
            return version > self.version
        elif self.operator == VersionOperator.LE:
            return version <= self.version
        elif self.operator == VersionOperator.LT:
            return version < self.version
        elif self.operator == VersionOperator.COMPAT:
            # ~>X.Y means >=X.Y and <(X+1)
            # ~>X.Y.Z means >=X.Y.Z and <X.(Y+1)
            return self.version <= version < self.version.bump()
        return False


def parse_version_constraint(constraint_str: str) -> VersionConstraint:
    """
    Parse a single clause.

    Args:
        constraint_str: Clause like ">=1.0.0", "= 2.5.3", "~> 1.2"

    Returns:
        VersionConstraint object

    Raises:
        ValueError: If the clause is invalid or uses an unsupported operator
    """
    constraint_str = constraint_str.strip()

    if constraint_str.startswith("!="):
        raise ValueError(f"Unsupported operator in '{constraint_str}'")

    for spelling, op in _OPERATOR_SPELLINGS:
        if constraint_str.startswith(spelling):
            version = parse_version(constraint_str[len(spelling) :].strip())
            return VersionConstraint(operator=op, version=version)

    # No operator found - assume exact match
    return VersionConstraint(operator=VersionOperator.EQ, version=parse_version(constraint_str))


@dataclass(frozen=True)
class VersionRequirement:
    """
    An ordered set of version clauses.

    Duplicate clauses are dropped on construction, keeping the first
    occurrence. A requirement without clauses accepts every version.
    """

    constraints: Tuple[VersionConstraint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        unique = tuple(dict.fromkeys(self.constraints))
        object.__setattr__(self, "constraints", unique)

    @classmethod
    def default(cls) -> "VersionRequirement":
        """The unconstrained requirement."""
        return DEFAULT_REQUIREMENT

    @property
    def is_default(self) -> bool:
        return not self.constraints

    @property
    def has_upper_bound(self) -> bool:
        return any(
            c.operator in UPPER_BOUND_OPERATORS or c.operator == VersionOperator.COMPAT
            for c in self.constraints
        )

    def is_satisfied_by(self, version: Union[str, Version]) -> bool:
        """All clauses must hold. The default requirement is always satisfied."""
        version = parse_version(version)
        return all(c.is_satisfied_by(version) for c in self.constraints)

    def as_strings(self) -> Tuple[str, ...]:
        return tuple(str(c) for c in self.constraints)

    def __iter__(self):
        return iter(self.constraints)

    def __str__(self) -> str:
        if self.is_default:
            return ">=0"
        return ", ".join(self.as_strings())


DEFAULT_REQUIREMENT = VersionRequirement()

RequirementLike = Union[None, str, VersionConstraint, VersionRequirement, Iterable[Union[str, VersionConstraint]]]


def parse_requirement(value: RequirementLike) -> VersionRequirement:
    """
    Build a VersionRequirement from any of the accepted spellings.

    Args:
        value: None, a comma-separated string (">= 1.0, < 2.0"), a single
            VersionConstraint, an existing VersionRequirement, or an iterable
            of clause strings / constraints

    Returns:
        VersionRequirement (the same object when one is passed in)

    Raises:
        ValueError: If any clause is invalid
    """
    if value is None:
        return DEFAULT_REQUIREMENT
    if isinstance(value, VersionRequirement):
        return value
    if isinstance(value, VersionConstraint):
        return VersionRequirement((value,))
    if isinstance(value, str):
        parts = [value]
    else:
        try:
            parts = list(value)
        except TypeError:
            raise ValueError(f"Invalid requirement: {value!r}") from None

    constraints = []
    for part in parts:
        if isinstance(part, VersionConstraint):
            constraints.append(part)
            continue
        if not isinstance(part, str):
            raise ValueError(f"Invalid requirement clause: {part!r}")
        for clause in part.split(","):
            clause = clause.strip()
            if clause:
                constraints.append(parse_version_constraint(clause))

    if not constraints:
        return DEFAULT_REQUIREMENT
    return VersionRequirement(tuple(constraints))


def strip_upper_bound(requirement: Optional[VersionRequirement]) -> VersionRequirement:
    """
    Remove the upper bounds from a requirement, keeping its lower bounds.

    - ``=``, ``>`` and ``>=`` clauses are kept
    - ``<`` and ``<=`` clauses are dropped
    - ``~> X`` becomes ``>= X`` (only the lower half of a compatible release
      survives)

    An absent or empty requirement, or one left without clauses, yields the
    default requirement. The transformation is pure and idempotent.
    """
    if requirement is None or requirement.is_default:
        return DEFAULT_REQUIREMENT

    lower_bounds = []
    for constraint in requirement.constraints:
        if constraint.operator in LOWER_BOUND_OPERATORS:
            lower_bounds.append(constraint)
        elif constraint.operator == VersionOperator.COMPAT:
            lower_bounds.append(VersionConstraint(VersionOperator.GE, constraint.version))

    if not lower_bounds:
        return DEFAULT_REQUIREMENT
    return VersionRequirement(tuple(lower_bounds))
