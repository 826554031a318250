"""
depignore Shared Constants

Single source of truth for supported values, reserved keywords and defaults.

Usage:
    from depignore_common.constants import OverrideKinds, EnvVars

    if value not in OverrideKinds.ALL:
        raise ConfigurationError(f"Unsupported override kind: {value}")
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DEPIGNORE_VERSION = "0.1.0"
"""Current depignore release"""


class VersionInfo:
    """Version information for the depignore packages."""

    VERSION = DEPIGNORE_VERSION
    MANIFEST_SCHEMA_VERSION = "1"


# =============================================================================
# OVERRIDE KINDS
# =============================================================================


class OverrideKinds:
    """Textual values accepted for an ignore rule's type."""

    COMPLETE = "complete"
    UPPER = "upper"
    ALL = [COMPLETE, UPPER]
    ALIASES = {
        "upper_only": UPPER,
        "upper-only": UPPER,
    }
    DEFAULT = COMPLETE


# =============================================================================
# PLATFORM KEYWORDS
# =============================================================================


class PlatformKeywords:
    """Keywords naming the two reserved platform subjects in text form."""

    RUNTIME = "runtime"
    INDEX_CLIENT = "index-client"

    # Interpreter and installer names map onto the platform subjects
    RUNTIME_ALIASES = ["runtime", "python"]
    INDEX_CLIENT_ALIASES = ["index-client", "index_client", "pip"]

    # CLI prefix marking a subject argument as a platform subject
    CLI_PREFIX = "platform:"


# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================


class EnvVars:
    """Environment variables read by depignore."""

    LOG_LEVEL = "DEPIGNORE_LOG_LEVEL"
    LOG_JSON = "DEPIGNORE_LOG_JSON"
    MANIFEST = "DEPIGNORE_MANIFEST"


# =============================================================================
# DEFAULTS
# =============================================================================


class Defaults:
    """Default values."""

    MANIFEST_FILE = "depignore.yaml"
    LOG_LEVEL = "warning"


LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels"""

SUPPORTED_OVERRIDE_KINDS = OverrideKinds.ALL
"""Alias of OverrideKinds.ALL"""
