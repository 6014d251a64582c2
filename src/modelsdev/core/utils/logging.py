"""Logging utilities for modelsdev.

Modules log through ``logging.getLogger(__name__)``; this module only offers
the knobs applications use to turn that output on. Library code never
installs handlers on import.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

ROOT_LOGGER_NAME = "modelsdev"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_SECRET_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"\bsk-[A-Za-z0-9_-]{10,}\b"), "[REDACTED_API_KEY]"),
    (re.compile(r"(api[_-]?key\s*[=:]\s*)['\"]?\S+['\"]?", re.IGNORECASE), r"\1[REDACTED]"),
]


class SecretRedactingFilter(logging.Filter):
    """Logging filter that masks API keys and bearer tokens in messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = message
        for pattern, replacement in _SECRET_PATTERNS:
            redacted = pattern.sub(replacement, redacted)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(verbose: bool = False, level: Optional[Union[str, int]] = None) -> None:
    """Attach a stream handler to the ``modelsdev`` logger.

    Args:
        verbose: Force DEBUG output when True.
        level: Explicit level; defaults to ``logging.level`` from configuration.
    """
    if verbose:
        resolved = logging.DEBUG
    elif level is not None:
        resolved = _coerce_level(level)
    else:
        from modelsdev.core.config import get_config

        resolved = _coerce_level(get_config().logging.level)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(resolved)
    if not any(getattr(handler, "_modelsdev_handler", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        handler.addFilter(SecretRedactingFilter())
        handler._modelsdev_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants. Short
    names such as ``"models.catalog"`` are resolved under ``modelsdev``.
    """
    name = component if component.startswith(ROOT_LOGGER_NAME) else f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(name).setLevel(_coerce_level(level))


__all__ = [
    "SecretRedactingFilter",
    "configure_logging",
    "get_logger",
    "set_component_level",
]
