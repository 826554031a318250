"""
depignore Error Classes

All errors raised by depignore packages derive from DepIgnoreError so callers
can catch them in one place and serialize them consistently.

Usage:
    from depignore_common import ConfigurationError

    raise ConfigurationError("type must be 'complete' or 'upper', got 'lower'")
"""

from typing import Any, Dict, List, Optional


class DepIgnoreError(Exception):
    """
    Base class for depignore errors.

    Attributes:
        message: Human-readable error message
        code: Stable machine-readable error code
    """

    code = "DEPIGNORE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }


class ConfigurationError(DepIgnoreError):
    """
    Raised when an ignore rule declaration is malformed.

    Fatal at manifest-evaluation time: resolution never starts with a rule
    that could not be understood.
    """

    code = "CONFIGURATION_ERROR"


class APIResponseMismatchError(DepIgnoreError):
    """
    Raised when freshly fetched metadata reveals dependencies that were not
    previously recorded for the same package.
    """

    code = "API_RESPONSE_MISMATCH"

    def __init__(self, spec_name: str, extra_dependencies: List[str]):
        self.spec_name = spec_name
        self.extra_dependencies = list(extra_dependencies)

        listing = "\n".join(f"* {dep}" for dep in self.extra_dependencies)
        message = (
            f"Downloading {spec_name} revealed dependencies not in the API or the lockfile:\n"
            f"{listing}\n"
            "Running a fresh resolution should fix the problem."
        )
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["spec_name"] = self.spec_name
        data["extra_dependencies"] = self.extra_dependencies
        return data
