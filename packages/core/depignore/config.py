"""
Manifest Files
==============

Loads dependency declarations and ignore rules from YAML:

    dependencies:
      - core >= 2.0
      - name: left-pad
        requirement: [">= 1.0", "< 2.0"]
    ignore_dependencies:
      - package: left-pad
        type: complete
      - platform: runtime
        type: upper

Design Principles:
- Pydantic models validate structure; the Manifest context applies the result
- Every problem surfaces as a ConfigurationError before resolution starts
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from typing_extensions import Self

from depignore_common import ConfigurationError, OverrideKinds, VersionInfo, get_logger

from .manifest import Definition, Manifest
from .parser import parse_dependency
from .rules import OverrideKind, parse_override_kind
from .subjects import (
    ConstraintSubject,
    PackageSubject,
    normalize_package_name,
    platform_subject_from_keyword,
)
from .version import parse_requirement

logger = get_logger(__name__)


class DependencyEntry(BaseModel):
    """A declared dependency in mapping form."""

    name: str
    requirement: Optional[Union[str, List[str]]] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not normalize_package_name(v):
            raise ValueError(f"dependency name must not be empty, got {v!r}")
        return v

    @field_validator("requirement")
    @classmethod
    def validate_requirement(cls, v):
        if v is not None:
            parse_requirement(v)
        return v


class IgnoreEntry(BaseModel):
    """
    One ignore rule. Exactly one of ``package`` / ``platform`` is set.

    ``platform`` accepts runtime, python, index-client or pip.
    """

    package: Optional[str] = None
    platform: Optional[str] = None
    type: str = OverrideKinds.DEFAULT

    model_config = ConfigDict(extra="forbid")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        try:
            parse_override_kind(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from None
        return v

    @field_validator("platform")
    @classmethod
    def validate_platform(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                platform_subject_from_keyword(v)
            except ConfigurationError as e:
                raise ValueError(e.message) from None
        return v

    @model_validator(mode="after")
    def validate_single_subject(self) -> Self:
        if (self.package is None) == (self.platform is None):
            raise ValueError("exactly one of 'package' or 'platform' must be set")
        if self.package is not None and not normalize_package_name(self.package):
            raise ValueError(f"package name must not be empty, got {self.package!r}")
        return self

    @property
    def subject(self) -> ConstraintSubject:
        if self.platform is not None:
            return platform_subject_from_keyword(self.platform)
        return PackageSubject(self.package)

    @property
    def kind(self) -> OverrideKind:
        return parse_override_kind(self.type)


class ManifestFile(BaseModel):
    """Root of a depignore manifest file."""

    version: str = VersionInfo.MANIFEST_SCHEMA_VERSION
    dependencies: List[Union[str, DependencyEntry]] = []
    ignore_dependencies: List[IgnoreEntry] = []

    model_config = ConfigDict(extra="forbid")

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v) -> str:
        v = str(v)
        if v != VersionInfo.MANIFEST_SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported manifest version '{v}'. "
                f"Supported: {VersionInfo.MANIFEST_SCHEMA_VERSION}"
            )
        return v

    @field_validator("dependencies")
    @classmethod
    def validate_dependency_strings(cls, v):
        for entry in v:
            if isinstance(entry, str):
                parse_dependency(entry)
        return v

    def evaluate(self) -> Definition:
        """Apply the declarations to a fresh Manifest and freeze them."""
        manifest = Manifest()
        for entry in self.dependencies:
            if isinstance(entry, str):
                dep = parse_dependency(entry)
                if dep is None:
                    continue
                manifest.dependency(dep.name, *dep.requirement.as_strings())
            else:
                clauses = [entry.requirement] if isinstance(entry.requirement, str) else entry.requirement
                manifest.dependency(entry.name, *(clauses or []))
        for rule in self.ignore_dependencies:
            manifest.ignore_dependency(rule.subject, rule.kind)
        return manifest.to_definition()


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        message = err.get("msg", "")
        lines.append(f"{location}: {message}" if location else message)
    return "; ".join(lines)


def parse_manifest_data(data: object, source: str = "<string>") -> ManifestFile:
    """
    Validate already-parsed manifest data.

    Raises:
        ConfigurationError: If the data is not a valid manifest
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{source}: manifest must be a mapping, got {type(data).__name__}")
    try:
        return ManifestFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"{source}: {_format_validation_error(e)}") from e


def load_manifest_string(content: str, source: str = "<string>") -> Definition:
    """
    Load a manifest from YAML text.

    Raises:
        ConfigurationError: On invalid YAML or invalid manifest content
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{source}: invalid YAML: {e}") from e
    return parse_manifest_data(data, source=source).evaluate()


def load_manifest_file(path: Union[str, Path]) -> Definition:
    """
    Load a manifest from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: On invalid content
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest file not found: {path}")

    logger.debug("Loading manifest", path=str(path))
    return load_manifest_string(path.read_text(encoding="utf-8"), source=str(path))
