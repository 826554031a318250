"""
depignore Structured Logging

structlog loggers routed through the standard library ``logging`` tree, so
keyword context travels with every event:

    from depignore_common import get_logger

    logger = get_logger(__name__)
    logger.info("Rule recorded", subject="left-pad", kind="complete")

Output is human-readable text by default, JSON when ``DEPIGNORE_LOG_JSON``
is set (or ``configure_logging(json_output=True)``). Until
``configure_logging`` is called nothing is emitted.
"""

import logging
import os
import sys
from typing import Any, Optional

import structlog

from .constants import Defaults, EnvVars, LOG_LEVELS

_ROOT_LOGGER_NAME = "depignore"
_configured = False

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _build_formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_output:
        processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(default=str),
        ]
    else:
        processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    return structlog.stdlib.ProcessorFormatter(processors=processors)


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    stream: Any = None,
) -> None:
    """
    Configure the ``depignore`` logger hierarchy.

    Args:
        level: One of LOG_LEVELS. Defaults to $DEPIGNORE_LOG_LEVEL, then "warning".
        json_output: Emit JSON lines. Defaults to $DEPIGNORE_LOG_JSON being set.
        stream: Output stream (stderr by default)

    Raises:
        ValueError: If level is not a supported log level
    """
    global _configured

    level = (level or os.environ.get(EnvVars.LOG_LEVEL) or Defaults.LOG_LEVEL).lower()
    if level == "warn":
        level = "warning"
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level '{level}'. Supported: {', '.join(LOG_LEVELS)}")

    if json_output is None:
        json_output = os.environ.get(EnvVars.LOG_JSON, "").lower() in ("1", "true", "yes")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_build_formatter(json_output))

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
    root.propagate = False
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger under the ``depignore`` hierarchy."""
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _configured
