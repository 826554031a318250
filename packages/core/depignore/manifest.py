"""
Manifest Evaluation and Resolution Configuration
================================================

``Manifest`` is the context a manifest body is evaluated against. It
collects declared dependencies and ignore rules:

    manifest = Manifest()
    manifest.dependency("core", ">= 2.0")
    manifest.ignore_dependency("left-pad")
    manifest.ignore_dependency(PlatformKind.RUNTIME, type="upper")
    definition = manifest.to_definition()

``to_definition()`` freezes the rules into a RuleSnapshot attached to the
returned ``Definition``, the configuration object every later phase reads.
Every Manifest starts with its own empty RuleStore, so nothing carries over
from a previous evaluation.
"""

import warnings
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from depignore_common import OverrideKinds, get_logger

from .evaluator import RuleEvaluator
from .hooks import ALL_PHASES, PipelineHooks
from .host import Dependency
from .interceptors import capture_rule
from .rules import IgnoreRule, OverrideKind, RuleSnapshot, RuleStore
from .subjects import PlatformKind, as_subject
from .version import parse_requirement

logger = get_logger(__name__)


@dataclass(frozen=True)
class Definition:
    """
    Configuration for one resolution run.

    Attributes:
        dependencies: Dependencies declared by the manifest
        ignored_dependencies: Frozen ignore rules for the run
    """

    dependencies: Tuple[Dependency, ...] = field(default_factory=tuple)
    ignored_dependencies: RuleSnapshot = field(default_factory=RuleSnapshot.empty)

    @property
    def evaluator(self) -> RuleEvaluator:
        return RuleEvaluator(self.ignored_dependencies)

    def hooks(self, phases=ALL_PHASES) -> PipelineHooks:
        return PipelineHooks.for_definition(self, phases=phases)

    def resolution_input(self):
        """Declared dependencies as the resolver should see them."""
        return self.hooks().resolution_input(list(self.dependencies))


class Manifest:
    """Evaluation context for one manifest."""

    def __init__(self) -> None:
        self._store = RuleStore()
        self._dependencies: List[Dependency] = []

    @property
    def ignored_dependencies(self) -> List[IgnoreRule]:
        return self._store.rules()

    @property
    def dependencies(self) -> List[Dependency]:
        return list(self._dependencies)

    def dependency(self, name: str, *requirements: str) -> Dependency:
        """
        Declare a dependency on a package.

        Args:
            name: Package name
            *requirements: Clauses such as ">= 1.0", "< 2.0"

        Raises:
            ValueError: If a clause is invalid
        """
        dep = Dependency(as_subject(name), parse_requirement(list(requirements)))
        self._dependencies.append(dep)
        return dep

    def ignore_dependency(self, name: object, type: object = OverrideKinds.DEFAULT) -> IgnoreRule:
        """
        Declare an ignore rule.

        Args:
            name: Package name string, or PlatformKind.RUNTIME /
                PlatformKind.INDEX_CLIENT
            type: "complete" (default) or "upper"

        Raises:
            ConfigurationError: If ``name`` or ``type`` is invalid
        """
        return capture_rule(self._store, name, type)

    def ignore_runtime_upper_bound(self) -> IgnoreRule:
        """Deprecated: use ``ignore_dependency(PlatformKind.RUNTIME, type="upper")``."""
        warnings.warn(
            "ignore_runtime_upper_bound() is deprecated; "
            "use ignore_dependency(PlatformKind.RUNTIME, type='upper')",
            DeprecationWarning,
            stacklevel=2,
        )
        return capture_rule(self._store, PlatformKind.RUNTIME, OverrideKind.UPPER_ONLY)

    def to_definition(self) -> Definition:
        """Freeze the rules and build the resolution configuration."""
        snapshot = self._store.snapshot()
        logger.info(
            "Manifest evaluated",
            dependencies=len(self._dependencies),
            ignore_rules=len(snapshot),
            generation=snapshot.generation,
        )
        return Definition(dependencies=tuple(self._dependencies), ignored_dependencies=snapshot)


def evaluate_manifest(body: Callable[[Manifest], Optional[object]]) -> Definition:
    """
    Evaluate a manifest body against a fresh Manifest.

    Any ConfigurationError raised by the body propagates before a
    Definition exists.
    """
    manifest = Manifest()
    body(manifest)
    return manifest.to_definition()
