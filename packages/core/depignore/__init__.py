"""depignore - user-declared ignore rules for dependency resolution.

Relaxes or removes version constraints on packages and on the runtime /
index-client platform, consistently across every phase of a host
resolution pipeline.

Example:
    >>> from depignore import Manifest, PlatformKind
    >>> manifest = Manifest()
    >>> _ = manifest.ignore_dependency("left-pad")
    >>> _ = manifest.ignore_dependency(PlatformKind.RUNTIME, type="upper")
    >>> definition = manifest.to_definition()
    >>> hooks = definition.hooks()

Package Structure:
    depignore/
    ├── version.py       - Versions, requirements, upper-bound stripping
    ├── subjects.py      - Package and platform constraint subjects
    ├── rules.py         - Override kinds, RuleStore, RuleSnapshot
    ├── evaluator.py     - RuleEvaluator
    ├── host.py          - Host pipeline objects
    ├── interceptors.py  - Per-phase adapters
    ├── hooks.py         - Adapters bound to one resolution run
    ├── manifest.py      - Manifest evaluation context, Definition
    ├── parser.py        - Dependency strings
    └── config.py        - YAML manifest files
"""

# Requirement algebra
from .version import (
    DEFAULT_REQUIREMENT,
    LOWER_BOUND_OPERATORS,
    Version,
    VersionConstraint,
    VersionOperator,
    VersionRequirement,
    parse_requirement,
    parse_version,
    parse_version_constraint,
    strip_upper_bound,
)

# Subjects
from .subjects import (
    INDEX_CLIENT,
    RUNTIME,
    ConstraintSubject,
    PackageSubject,
    PlatformKind,
    PlatformSubject,
    as_subject,
    normalize_package_name,
    parse_subject_argument,
    platform_subject_from_keyword,
)

# Rules
from .rules import (
    IgnoreRule,
    OverrideKind,
    RuleSnapshot,
    RuleStore,
    parse_override_kind,
)

# Evaluation
from .evaluator import RuleEvaluator

# Host pipeline
from .host import Dependency, ResolvedSpec, SpecMetadata, ensure_same_dependencies
from .interceptors import (
    capture_rule,
    check_metadata_consistency,
    filter_materialized_dependencies,
    filter_resolved_dependencies,
    matches_platform,
    translate_resolution_input,
)
from .hooks import ALL_PHASES, HookPhase, PipelineHooks

# Manifest
from .manifest import Definition, Manifest, evaluate_manifest
from .parser import parse_dependencies_file, parse_dependencies_string, parse_dependency
from .config import ManifestFile, load_manifest_file, load_manifest_string

__version__ = "0.1.0"

__all__ = [
    # Requirement algebra
    "DEFAULT_REQUIREMENT",
    "LOWER_BOUND_OPERATORS",
    "Version",
    "VersionConstraint",
    "VersionOperator",
    "VersionRequirement",
    "parse_requirement",
    "parse_version",
    "parse_version_constraint",
    "strip_upper_bound",
    # Subjects
    "INDEX_CLIENT",
    "RUNTIME",
    "ConstraintSubject",
    "PackageSubject",
    "PlatformKind",
    "PlatformSubject",
    "as_subject",
    "normalize_package_name",
    "parse_subject_argument",
    "platform_subject_from_keyword",
    # Rules
    "IgnoreRule",
    "OverrideKind",
    "RuleSnapshot",
    "RuleStore",
    "parse_override_kind",
    # Evaluation
    "RuleEvaluator",
    # Host pipeline
    "Dependency",
    "ResolvedSpec",
    "SpecMetadata",
    "ensure_same_dependencies",
    "capture_rule",
    "check_metadata_consistency",
    "filter_materialized_dependencies",
    "filter_resolved_dependencies",
    "matches_platform",
    "translate_resolution_input",
    "ALL_PHASES",
    "HookPhase",
    "PipelineHooks",
    # Manifest
    "Definition",
    "Manifest",
    "evaluate_manifest",
    "parse_dependencies_file",
    "parse_dependencies_string",
    "parse_dependency",
    "ManifestFile",
    "load_manifest_file",
    "load_manifest_string",
]
