"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
current context without requiring it to be passed through every call.

Features:
- Context-aware logging tied to a per-context verbosity level
- Falls back to the configured default (INCODE_VERBOSITY)
- Thread-safe using contextvars
- Leaves the host application's loguru handlers untouched; sink_add()
  attaches an incode-formatted handler on request

Usage:
    from incode.lib.log import LOG, verbosity_set

    verbosity_set(2)

    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Per-directive trace appears if verbosity >= 2", level=2)
    LOG("Data snapshots appear if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold the current verbosity
_verbosity: ContextVar[Optional[int]] = ContextVar('verbosity', default=None)

# Format used by sink_add()
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

# Records from this module carry extra["component"]; handlers are left to the host
_logger = logger.bind(component="incode")


def sink_add(sink: Any = sys.stderr, level: str = "DEBUG") -> int:
    """
    Add a loguru handler that shows only incode messages, in incode format.

    Args:
        sink: Any loguru sink (stream, path, callable)
        level: Minimum loguru level for the handler

    Returns:
        Handler id, for logger.remove()

    Example:
        handler_id = sink_add()
        verbosity_set(2)
        regions_extract(text)
        logger.remove(handler_id)
    """
    return logger.add(
        sink,
        format=logger_format,
        level=level,
        filter=lambda record: record["extra"].get("component") == "incode",
    )


def verbosity_set(level: Optional[int]) -> None:
    """
    Set the verbosity for the current context.

    Args:
        level: Verbosity level (0=silent, 1=summary, 2=trace, 3=data),
               or None to fall back to appsettings.verbosity

    Example:
        verbosity_set(2)
        regions = regions_extract(text)
    """
    _verbosity.set(level)


def verbosity_get() -> int:
    """Current effective verbosity"""
    level = _verbosity.get()
    return appsettings.verbosity if level is None else level


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=summary, 2=trace, 3=data)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Extracted 3 regions", level=1)
        LOG("Directive emit at [4:1]", level=2)
    """
    if verbosity_get() >= level:
        _logger.opt(depth=1).debug(message, **kwargs)
