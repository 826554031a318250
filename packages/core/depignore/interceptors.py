"""
Pipeline Interceptors
=====================

Thin adapters between the phases of a host resolution pipeline and the
RuleEvaluator. Each takes the host's native value, returns the overridden
equivalent, and keeps no reference to it afterwards.

| Adapter                          | Host phase                                |
|----------------------------------|-------------------------------------------|
| capture_rule                     | manifest evaluation                       |
| translate_resolution_input       | dependencies handed to the resolver       |
| filter_resolved_dependencies     | a resolved package's dependency list      |
| filter_materialized_dependencies | dependencies about to be fetched          |
| matches_platform                 | runtime / index-client compatibility      |
| check_metadata_consistency       | recorded vs. freshly fetched dependencies |

With no matching rule every adapter is a no-op; list adapters hand back the
very list they were given when the evaluator holds no rules.
"""

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from depignore_common import get_logger

from .evaluator import RuleEvaluator
from .host import Dependency, ensure_same_dependencies
from .rules import IgnoreRule, OverrideKind, RuleStore
from .subjects import PackageSubject, PlatformKind, PlatformSubject
from .version import Version, VersionRequirement, parse_version

logger = get_logger(__name__)

T = TypeVar("T")

ConsistencyCheck = Callable[[str, Sequence[Dependency], Sequence[Dependency]], None]


def capture_rule(store: RuleStore, subject: object, kind: object = OverrideKind.COMPLETE) -> IgnoreRule:
    """
    Record a rule declared by the manifest.

    Raises:
        ConfigurationError: If the subject or kind is malformed
    """
    return store.record(subject, kind)


def translate_resolution_input(evaluator: RuleEvaluator, dependencies: Sequence[Dependency]):
    """
    Rewrite the dependencies handed to the resolver.

    Completely ignored dependencies are left out, upper-only ignored ones get
    their relaxed requirement, everything else passes through as is.
    """
    if not evaluator.has_rules:
        return dependencies

    translated: List[Dependency] = []
    for dep in dependencies:
        if evaluator.is_completely_ignored(dep.subject):
            logger.debug("Dependency removed from resolution", dependency=dep.name)
            continue
        requirement = evaluator.apply(dep.subject, dep.requirement)
        translated.append(dep if requirement is dep.requirement else dep.with_requirement(requirement))
    return translated


def _drop_completely_ignored(
    evaluator: RuleEvaluator,
    items: Sequence[T],
    subject_of: Callable[[T], object],
):
    ignored = evaluator.completely_ignored_package_names
    if not ignored:
        return items

    kept = []
    for item in items:
        subject = subject_of(item)
        if isinstance(subject, PackageSubject) and subject.name in ignored:
            logger.debug("Ignored dependency dropped", dependency=subject.name)
            continue
        kept.append(item)
    return kept


def filter_resolved_dependencies(evaluator: RuleEvaluator, dependencies: Sequence[Dependency]):
    """
    Drop completely ignored packages from a resolved package's dependency list.

    Upper-only rules are not applied here: this phase only removes.
    """
    return _drop_completely_ignored(evaluator, dependencies, lambda dep: dep.subject)


def filter_materialized_dependencies(
    evaluator: RuleEvaluator,
    entries: Sequence[Union[Dependency, Tuple[Dependency, object]]],
):
    """
    Drop completely ignored packages from the list about to be fetched.

    Entries are dependencies, or ``(dependency, payload)`` pairs as hosts
    often carry the selected candidate alongside.
    """

    def subject_of(entry):
        dep = entry[0] if isinstance(entry, tuple) else entry
        return dep.subject

    return _drop_completely_ignored(evaluator, entries, subject_of)


def matches_platform(
    evaluator: RuleEvaluator,
    kind: PlatformKind,
    current_version: Union[str, Version],
    required: Optional[VersionRequirement],
) -> bool:
    """
    Check the current runtime / index-client version against a declared requirement.

    A completely ignored platform is always satisfied; an upper-only ignored
    one is checked against its lower bounds only.
    """
    subject = PlatformSubject(kind)
    if evaluator.is_completely_ignored(subject):
        return True

    requirement = evaluator.apply(subject, required)
    if requirement is None:
        return True
    return requirement.is_satisfied_by(parse_version(current_version))


def check_metadata_consistency(
    evaluator: RuleEvaluator,
    spec_name: str,
    old_deps: Sequence[Dependency],
    new_deps: Sequence[Dependency],
    check: ConsistencyCheck = ensure_same_dependencies,
) -> None:
    """
    Run the host consistency check with completely ignored packages removed
    from the freshly fetched list.

    Upper-only rules do not relax this check.

    Raises:
        APIResponseMismatchError: From ``check``, for non-ignored differences
    """
    check(spec_name, old_deps, filter_resolved_dependencies(evaluator, new_deps))
