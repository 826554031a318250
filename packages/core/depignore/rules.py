"""
Ignore Rules
============

An ignore rule pairs a constraint subject with an override kind:

- ``complete``: every constraint on the subject is removed
- ``upper``: only upper bounds are removed, lower bounds still apply

Rules are accumulated in a mutable RuleStore while the manifest is
evaluated. ``RuleStore.snapshot()`` then produces a RuleSnapshot: an
immutable copy handed to the resolution. Later ``record`` calls on the store
never reach a snapshot that was already taken.
"""

import itertools
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple

from depignore_common import ConfigurationError, OverrideKinds, get_logger

from .subjects import ConstraintSubject, PackageSubject, as_subject

logger = get_logger(__name__)

_snapshot_generations = itertools.count(1)


class OverrideKind(str, Enum):
    """How a rule relaxes the constraints on its subject."""

    COMPLETE = OverrideKinds.COMPLETE
    UPPER_ONLY = OverrideKinds.UPPER


def parse_override_kind(value: object) -> OverrideKind:
    """
    Validate a rule's type.

    Args:
        value: An OverrideKind, or "complete" / "upper" (also "upper_only",
            "upper-only")

    Raises:
        ConfigurationError: Naming the rejected value
    """
    if isinstance(value, OverrideKind):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        text = OverrideKinds.ALIASES.get(text, text)
        if text in OverrideKinds.ALL:
            return OverrideKind(text)
    raise ConfigurationError(
        f"type must be {' or '.join(repr(k) for k in OverrideKinds.ALL)}, got {value!r}"
    )


@dataclass(frozen=True)
class IgnoreRule:
    """A declared (subject, kind) pair."""

    subject: ConstraintSubject
    kind: OverrideKind = OverrideKind.COMPLETE

    def __str__(self) -> str:
        return f"{self.subject} ({self.kind.value})"


class RuleStore:
    """
    Mutable rule table filled during manifest evaluation.

    Each manifest evaluation owns a fresh store. Later declarations for the
    same subject overwrite earlier ones.
    """

    def __init__(self) -> None:
        self._rules: Dict[ConstraintSubject, OverrideKind] = {}

    def record(self, subject: object, kind: object = OverrideKind.COMPLETE) -> IgnoreRule:
        """
        Insert or overwrite the rule for ``subject``.

        Raises:
            ConfigurationError: If the subject or kind is invalid
        """
        rule = IgnoreRule(subject=as_subject(subject), kind=parse_override_kind(kind))
        previous = self._rules.get(rule.subject)
        self._rules[rule.subject] = rule.kind

        if previous is not None and previous != rule.kind:
            logger.info(
                "Ignore rule overridden",
                subject=str(rule.subject),
                previous=previous.value,
                kind=rule.kind.value,
            )
        else:
            logger.debug("Ignore rule recorded", subject=str(rule.subject), kind=rule.kind.value)
        return rule

    def lookup(self, subject: object) -> Optional[OverrideKind]:
        return self._rules.get(as_subject(subject))

    def rules(self) -> List[IgnoreRule]:
        return [IgnoreRule(subject, kind) for subject, kind in self._rules.items()]

    def __len__(self) -> int:
        return len(self._rules)

    def snapshot(self) -> "RuleSnapshot":
        """Freeze the current rules into an immutable RuleSnapshot."""
        return RuleSnapshot(self._rules)


class RuleSnapshot:
    """
    Immutable rule table attached to one resolution run.

    The set of completely ignored package names is derived once, here, so it
    always matches the rules it came from. Each snapshot carries a distinct
    ``generation`` number.
    """

    __slots__ = ("_rules", "_completely_ignored", "generation")

    def __init__(self, rules: Optional[Mapping[ConstraintSubject, OverrideKind]] = None):
        frozen = dict(rules or {})
        object.__setattr__(self, "_rules", MappingProxyType(frozen))
        object.__setattr__(
            self,
            "_completely_ignored",
            frozenset(
                subject.name
                for subject, kind in frozen.items()
                if kind is OverrideKind.COMPLETE and isinstance(subject, PackageSubject)
            ),
        )
        object.__setattr__(self, "generation", next(_snapshot_generations))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("RuleSnapshot is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("RuleSnapshot is immutable")

    @classmethod
    def empty(cls) -> "RuleSnapshot":
        return cls()

    def lookup(self, subject: ConstraintSubject) -> Optional[OverrideKind]:
        return self._rules.get(subject)

    def rules(self) -> Tuple[IgnoreRule, ...]:
        return tuple(IgnoreRule(subject, kind) for subject, kind in self._rules.items())

    def as_mapping(self) -> Mapping[ConstraintSubject, OverrideKind]:
        return self._rules

    @property
    def completely_ignored_package_names(self) -> FrozenSet[str]:
        return self._completely_ignored

    def __contains__(self, subject: object) -> bool:
        return subject in self._rules

    def __iter__(self) -> Iterator[IgnoreRule]:
        return iter(self.rules())

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSnapshot):
            return NotImplemented
        return dict(self._rules) == dict(other._rules)

    def __hash__(self) -> int:
        return hash(frozenset(self._rules.items()))

    def __repr__(self) -> str:
        body = ", ".join(str(rule) for rule in self.rules())
        return f"RuleSnapshot(generation={self.generation}, rules=[{body}])"
