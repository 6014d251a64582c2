"""Exception hierarchy for modelsdev.

Every error carries a human-readable message that names the offending
identifier and, where one exists, the remedy. Structured diagnostics travel in
``context`` so callers can log or inspect them without parsing messages.
Secrets (API keys) are never placed in either.

Examples:
    >>> from modelsdev._internal.exceptions import InvalidSpecError
    >>> try:
    ...     raise InvalidSpecError("bad spec", context={"spec": "::x"})
    ... except InvalidSpecError as exc:
    ...     exc.context["spec"]
    '::x'
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional


class ModelsDevError(Exception):
    """Base class for all custom exceptions raised by modelsdev."""

    def __init__(self, message: str = "", *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})
        super().__init__(message)

    def add_context(self, **kwargs: Any) -> None:
        """Attach additional diagnostic fields to the exception."""
        self.context.update(kwargs)

    def get_context_data(self) -> Dict[str, Any]:
        """Return a copy of the diagnostic context."""
        return self.context.copy()

    def log_with_context(self, logger: logging.Logger, level: int = logging.ERROR) -> None:
        """Emit the error and its context as a single structured record."""
        logger.log(level, "%s: %s", type(self).__name__, self.message, extra={"context": self.context})


class ConfigError(ModelsDevError):
    """Raised when the configuration file or environment is invalid."""


# ---------------------------------------------------------------------------
# Lookup failures
# ---------------------------------------------------------------------------
class NotFoundError(ModelsDevError, LookupError):
    """Base class for missing providers, models, or data files."""


class ProviderNotFoundError(NotFoundError):
    """Raised when a provider id is absent from the catalog data."""


class ModelNotFoundError(NotFoundError):
    """Raised when a model id cannot be found or inferred."""


class DataFileNotFoundError(NotFoundError):
    """Raised when the catalog data file does not exist."""


# ---------------------------------------------------------------------------
# Catalog data failures
# ---------------------------------------------------------------------------
class CatalogDataError(ModelsDevError):
    """Base class for unreadable or malformed catalog data."""


class DataReadError(CatalogDataError):
    """Raised when the catalog data file exists but cannot be read."""


class DataParseError(CatalogDataError):
    """Raised when the catalog data file is not valid JSON."""


class DataSchemaError(CatalogDataError):
    """Raised when the parsed catalog data is not a provider mapping."""


# ---------------------------------------------------------------------------
# Resolution and routing failures
# ---------------------------------------------------------------------------
class InvalidSpecError(ModelsDevError, ValueError):
    """Raised when a model specification string is malformed."""


class BridgeError(ModelsDevError):
    """Base class for specialized bridge routing failures."""


class BridgeUnavailableError(BridgeError):
    """Raised when a required specialized bridge is not installed."""


class BridgeIncompatibleError(BridgeError):
    """Raised when an installed bridge cannot be constructed generically."""


class NoBaseUrlError(ModelsDevError):
    """Raised when no API base URL can be determined for a provider."""


__all__ = [
    "ModelsDevError",
    "ConfigError",
    "NotFoundError",
    "ProviderNotFoundError",
    "ModelNotFoundError",
    "DataFileNotFoundError",
    "CatalogDataError",
    "DataReadError",
    "DataParseError",
    "DataSchemaError",
    "InvalidSpecError",
    "BridgeError",
    "BridgeUnavailableError",
    "BridgeIncompatibleError",
    "NoBaseUrlError",
]
