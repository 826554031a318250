"""
Pipeline Hooks
==============

Binds the interceptors to one resolution run. A host calls the hook for each
phase it exposes; phases can be switched off individually, in which case the
hook hands its input back unchanged.

Usage:
    hooks = definition.hooks()
    deps = hooks.resolution_input(declared)
    if not hooks.matches_platform(PlatformKind.RUNTIME, "3.12.1", metadata.required_runtime_version):
        ...
"""

from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence, TYPE_CHECKING, Union

from . import interceptors
from .evaluator import RuleEvaluator
from .host import Dependency, ResolvedSpec, SpecMetadata, ensure_same_dependencies
from .interceptors import ConsistencyCheck
from .subjects import PlatformKind
from .version import Version, VersionRequirement

if TYPE_CHECKING:
    from .manifest import Definition


class HookPhase(str, Enum):
    """Host pipeline phases an interceptor can be attached to."""

    RESOLUTION_INPUT = "resolution_input"
    RESOLVED_DEPENDENCIES = "resolved_dependencies"
    MATERIALIZATION = "materialization"
    PLATFORM_MATCH = "platform_match"
    METADATA_CONSISTENCY = "metadata_consistency"


ALL_PHASES: FrozenSet[HookPhase] = frozenset(HookPhase)


class PipelineHooks:
    """
    Interceptors bound to one frozen rule snapshot.

    Attributes:
        evaluator: RuleEvaluator for the run
        phases: Phases with an active interceptor
    """

    def __init__(
        self,
        evaluator: RuleEvaluator,
        phases: Iterable[HookPhase] = ALL_PHASES,
        consistency_check: ConsistencyCheck = ensure_same_dependencies,
    ):
        self.evaluator = evaluator
        self.phases: FrozenSet[HookPhase] = frozenset(HookPhase(p) for p in phases)
        self._consistency_check = consistency_check

    @classmethod
    def for_definition(
        cls,
        definition: "Definition",
        phases: Iterable[HookPhase] = ALL_PHASES,
    ) -> "PipelineHooks":
        return cls(definition.evaluator, phases=phases)

    def enabled(self, phase: HookPhase) -> bool:
        return phase in self.phases

    def without(self, *phases: HookPhase) -> "PipelineHooks":
        """Copy with the given phases switched off."""
        return PipelineHooks(
            self.evaluator,
            phases=self.phases - set(phases),
            consistency_check=self._consistency_check,
        )

    def resolution_input(self, dependencies: Sequence[Dependency]):
        if not self.enabled(HookPhase.RESOLUTION_INPUT):
            return dependencies
        return interceptors.translate_resolution_input(self.evaluator, dependencies)

    def resolved_dependencies(self, dependencies: Sequence[Dependency]):
        if not self.enabled(HookPhase.RESOLVED_DEPENDENCIES):
            return dependencies
        return interceptors.filter_resolved_dependencies(self.evaluator, dependencies)

    def resolved_spec(self, spec: ResolvedSpec) -> ResolvedSpec:
        """The resolved spec with its dependency list passed through ``resolved_dependencies``."""
        filtered = self.resolved_dependencies(spec.dependencies)
        if filtered is spec.dependencies:
            return spec
        return spec.with_dependencies(filtered)

    def materialization(self, entries: Sequence):
        if not self.enabled(HookPhase.MATERIALIZATION):
            return entries
        return interceptors.filter_materialized_dependencies(self.evaluator, entries)

    def matches_platform(
        self,
        kind: PlatformKind,
        current_version: Union[str, Version],
        required: Optional[VersionRequirement],
    ) -> bool:
        if not self.enabled(HookPhase.PLATFORM_MATCH):
            return required is None or required.is_satisfied_by(current_version)
        return interceptors.matches_platform(self.evaluator, kind, current_version, required)

    def matches_current_runtime(self, metadata: SpecMetadata, runtime_version: Union[str, Version]) -> bool:
        return self.matches_platform(
            PlatformKind.RUNTIME, runtime_version, metadata.required_runtime_version
        )

    def matches_current_index_client(
        self, metadata: SpecMetadata, index_client_version: Union[str, Version]
    ) -> bool:
        return self.matches_platform(
            PlatformKind.INDEX_CLIENT,
            index_client_version,
            metadata.required_index_client_version,
        )

    def metadata_consistency(
        self,
        spec_name: str,
        old_deps: Sequence[Dependency],
        new_deps: Sequence[Dependency],
    ) -> None:
        if not self.enabled(HookPhase.METADATA_CONSISTENCY):
            self._consistency_check(spec_name, old_deps, new_deps)
            return
        interceptors.check_metadata_consistency(
            self.evaluator, spec_name, old_deps, new_deps, check=self._consistency_check
        )

    def __repr__(self) -> str:
        active = ", ".join(sorted(p.value for p in self.phases))
        return f"PipelineHooks(phases=[{active}])"
