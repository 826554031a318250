"""
Host Pipeline Model
===================

In-process representations of the objects a host dependency manager passes
through its resolution pipeline, as far as the interceptors need them:

- Dependency: a (subject, requirement) pair
- ResolvedSpec: a resolved package and its own declared dependencies
- SpecMetadata: a package's declared runtime / index-client requirements
- ensure_same_dependencies: the host's cross-source consistency check

The resolver, lockfile handling and metadata fetching stay with the host.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from depignore_common import APIResponseMismatchError

from .subjects import (
    ConstraintSubject,
    PackageSubject,
    PlatformKind,
    PlatformSubject,
)
from .version import DEFAULT_REQUIREMENT, RequirementLike, VersionRequirement, parse_requirement


@dataclass(frozen=True)
class Dependency:
    """A declared constraint: which subject, and which versions are acceptable."""

    subject: ConstraintSubject
    requirement: VersionRequirement = DEFAULT_REQUIREMENT

    @classmethod
    def package(cls, name: str, requirement: RequirementLike = None) -> "Dependency":
        return cls(PackageSubject(name), parse_requirement(requirement))

    @classmethod
    def platform(cls, kind: PlatformKind, requirement: RequirementLike = None) -> "Dependency":
        return cls(PlatformSubject(kind), parse_requirement(requirement))

    @property
    def name(self) -> str:
        return str(self.subject)

    @property
    def is_platform(self) -> bool:
        return self.subject.is_platform

    def with_requirement(self, requirement: VersionRequirement) -> "Dependency":
        return Dependency(self.subject, requirement)

    def comparison_key(self) -> Tuple[ConstraintSubject, frozenset]:
        """Identity used by the consistency check; clause order is irrelevant."""
        return (self.subject, frozenset(self.requirement.constraints))

    def __str__(self) -> str:
        return f"{self.name} ({self.requirement})"


@dataclass(frozen=True)
class ResolvedSpec:
    """A package chosen by the resolver, with the dependencies it declares."""

    name: str
    version: str
    dependencies: Tuple[Dependency, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.name}-{self.version}"

    def with_dependencies(self, dependencies: Sequence[Dependency]) -> "ResolvedSpec":
        return ResolvedSpec(self.name, self.version, tuple(dependencies))


@dataclass(frozen=True)
class SpecMetadata:
    """Platform requirements a package declares."""

    name: str
    version: str
    required_runtime_version: VersionRequirement = DEFAULT_REQUIREMENT
    required_index_client_version: VersionRequirement = DEFAULT_REQUIREMENT

    @property
    def full_name(self) -> str:
        return f"{self.name}-{self.version}"

    def requirement_for(self, kind: PlatformKind) -> VersionRequirement:
        if kind is PlatformKind.RUNTIME:
            return self.required_runtime_version
        return self.required_index_client_version


def ensure_same_dependencies(
    spec_name: str,
    old_deps: Sequence[Dependency],
    new_deps: Sequence[Dependency],
) -> None:
    """
    Compare previously recorded dependencies with freshly fetched ones.

    Raises:
        APIResponseMismatchError: Listing every dependency present in
            ``new_deps`` but not in ``old_deps``
    """
    known = {dep.comparison_key() for dep in old_deps}
    extra: List[str] = [str(dep) for dep in new_deps if dep.comparison_key() not in known]
    if extra:
        raise APIResponseMismatchError(spec_name, extra)


def find_dependency(deps: Sequence[Dependency], name: str) -> Optional[Dependency]:
    """First package dependency named ``name`` (normalized), if any."""
    subject = PackageSubject(name)
    for dep in deps:
        if dep.subject == subject:
            return dep
    return None
