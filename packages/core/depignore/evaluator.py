"""
Rule Evaluation
===============

The RuleEvaluator is the only place that knows what each override kind does
to a requirement. Every pipeline interceptor routes through it.
"""

from typing import FrozenSet, Optional

from depignore_common import get_logger

from .rules import OverrideKind, RuleSnapshot
from .subjects import ConstraintSubject, as_subject
from .version import DEFAULT_REQUIREMENT, VersionRequirement, strip_upper_bound

logger = get_logger(__name__)


class RuleEvaluator:
    """
    Applies a frozen rule snapshot to requirements.

    Holds no state besides the snapshot, so one evaluator can be shared by
    concurrent resolution workers.

    Examples:
        >>> from depignore import RuleStore, parse_requirement
        >>> store = RuleStore()
        >>> _ = store.record("left-pad", "upper")
        >>> evaluator = RuleEvaluator(store.snapshot())
        >>> str(evaluator.apply("left-pad", parse_requirement(">=1.0, <2.0")))
        '>=1.0'
    """

    def __init__(self, snapshot: Optional[RuleSnapshot] = None):
        self._snapshot = snapshot if snapshot is not None else RuleSnapshot.empty()

    @property
    def snapshot(self) -> RuleSnapshot:
        return self._snapshot

    @property
    def has_rules(self) -> bool:
        return bool(self._snapshot)

    @property
    def completely_ignored_package_names(self) -> FrozenSet[str]:
        return self._snapshot.completely_ignored_package_names

    def kind_for(self, subject: object) -> Optional[OverrideKind]:
        if not self._snapshot:
            return None
        return self._snapshot.lookup(as_subject(subject))

    def is_completely_ignored(self, subject: object) -> bool:
        return self.kind_for(subject) is OverrideKind.COMPLETE

    def is_upper_only_ignored(self, subject: object) -> bool:
        return self.kind_for(subject) is OverrideKind.UPPER_ONLY

    def apply(
        self,
        subject: object,
        requirement: Optional[VersionRequirement],
    ) -> Optional[VersionRequirement]:
        """
        Relax ``requirement`` according to the rule for ``subject``.

        - complete: the default requirement, whatever was declared
        - upper: the requirement without its upper bounds
        - no rule: ``requirement`` itself, untouched
        """
        kind = self.kind_for(subject)
        if kind is None:
            return requirement

        if kind is OverrideKind.COMPLETE:
            relaxed = DEFAULT_REQUIREMENT
        else:
            relaxed = strip_upper_bound(requirement)

        logger.debug(
            "Requirement relaxed",
            subject=str(as_subject(subject)),
            kind=kind.value,
            declared=str(requirement) if requirement is not None else None,
            effective=str(relaxed),
        )
        return relaxed

    def __repr__(self) -> str:
        return f"RuleEvaluator({self._snapshot!r})"
