"""Public re-exports of modelsdev exception types for user code.

Examples:
    >>> from modelsdev import exceptions
    >>> try:  # doctest: +SKIP
    ...     resolve("::gpt-4o")
    ... except exceptions.InvalidSpecError:
    ...     handle_bad_spec()
"""

from modelsdev._internal.exceptions import (
    BridgeError,
    BridgeIncompatibleError,
    BridgeUnavailableError,
    CatalogDataError,
    ConfigError,
    DataFileNotFoundError,
    DataParseError,
    DataReadError,
    DataSchemaError,
    InvalidSpecError,
    ModelNotFoundError,
    ModelsDevError,
    NoBaseUrlError,
    NotFoundError,
    ProviderNotFoundError,
)

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
