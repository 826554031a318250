"""
depignore Common Package

Shared primitives used across the depignore packages:
- Exception classes for consistent error handling
- Constants for supported values and defaults (namespaced)
- Structured logging

Usage:
    from depignore_common import ConfigurationError, get_logger
    from depignore_common import OverrideKinds, PlatformKeywords
"""

# Error classes
from .errors import (
    DepIgnoreError,
    ConfigurationError,
    APIResponseMismatchError,
)

# Constants
from .constants import (
    VersionInfo,
    OverrideKinds,
    PlatformKeywords,
    EnvVars,
    Defaults,
    DEPIGNORE_VERSION,
    LOG_LEVELS,
    SUPPORTED_OVERRIDE_KINDS,
)

# Logger
from .logger import (
    get_logger,
    configure_logging,
    is_configured,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DepIgnoreError",
    "ConfigurationError",
    "APIResponseMismatchError",
    # Namespaced constants
    "VersionInfo",
    "OverrideKinds",
    "PlatformKeywords",
    "EnvVars",
    "Defaults",
    # Convenience aliases
    "DEPIGNORE_VERSION",
    "LOG_LEVELS",
    "SUPPORTED_OVERRIDE_KINDS",
    # Logger
    "get_logger",
    "configure_logging",
    "is_configured",
]
