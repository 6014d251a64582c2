"""Read-through cache for the static models.dev data file.

The data file is large and immutable for the life of a process, so it is
parsed once and shared. A :class:`CatalogStore` keeps exactly one cached
``(path, data)`` pair: asking for the same path returns the very same object,
asking for another path drops the old data and reads the new file.

Components accept an explicit ``store=`` so tests and embedders can own their
cache; everything else shares :func:`default_store`.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from modelsdev._internal.exceptions import (
    DataFileNotFoundError,
    DataParseError,
    DataReadError,
    DataSchemaError,
)

logger = logging.getLogger(__name__)

CatalogData = Dict[str, Dict[str, Any]]
PathLike = Union[str, "os.PathLike[str]"]

BUNDLED_DATA_PATH = Path(__file__).resolve().parent / "data" / "models-dev.json"


def default_data_path() -> str:
    """Return the configured data path, falling back to the bundled snapshot."""

    from modelsdev.core.config import get_config

    configured = get_config().data_path
    return configured if configured else str(BUNDLED_DATA_PATH)


class CatalogStore:
    """Single-slot, path-keyed cache of parsed catalog data."""

    def __init__(self) -> None:
        self._data: Optional[CatalogData] = None
        self._path: Optional[str] = None
        self._lock = threading.RLock()

    @property
    def cached_path(self) -> Optional[str]:
        """Path of the currently cached data, or None when empty."""
        return self._path

    def load(self, path: Optional[PathLike] = None) -> CatalogData:
        """Return the provider mapping stored at ``path``.

        Args:
            path: Data file location; ``None`` selects :func:`default_data_path`.

        Returns:
            Mapping of provider id to raw provider metadata.

        Raises:
            DataFileNotFoundError: If the file does not exist.
            DataReadError: If the file cannot be read.
            DataParseError: If the content is not valid JSON.
            DataSchemaError: If the top-level value is not an object.
        """
        resolved = os.fspath(path) if path is not None else default_data_path()

        with self._lock:
            if self._data is not None and self._path == resolved:
                return self._data

            data = self._read(resolved)
            self._data = data
            self._path = resolved
            logger.debug("Loaded %d providers from %s", len(data), resolved)
            return data

    def clear_cache(self) -> None:
        """Drop the cached data so the next load re-reads the file."""
        with self._lock:
            self._data = None
            self._path = None

    @staticmethod
    def _read(path: str) -> CatalogData:
        if not os.path.exists(path):
            raise DataFileNotFoundError(
                f'The models.dev data file "{path}" does not exist.', context={"path": path}
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as exc:
            raise DataReadError(
                f'Failed to read the models.dev data file "{path}".', context={"path": path}
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DataParseError(
                f'The models.dev data file "{path}" is not valid JSON: {exc.msg}.',
                context={"path": path, "line": exc.lineno, "column": exc.colno},
            ) from exc

        if not isinstance(data, dict):
            raise DataSchemaError(
                "Invalid models.dev API data.",
                context={"path": path, "type": type(data).__name__},
            )
        return data


def provider_entry(data: CatalogData, provider_id: str) -> Optional[Dict[str, Any]]:
    """Return the raw entry for ``provider_id``, or None when absent.

    Raises:
        DataSchemaError: If the entry is not an object.
    """
    if provider_id not in data:
        return None
    entry = data[provider_id]
    if not isinstance(entry, dict):
        raise DataSchemaError(
            f'Invalid models.dev API data for provider "{provider_id}".',
            context={"provider": provider_id, "type": type(entry).__name__},
        )
    return entry


_default_store = CatalogStore()


def default_store() -> CatalogStore:
    """Return the process-wide store shared by components without their own."""
    return _default_store


def load_data(path: Optional[PathLike] = None) -> CatalogData:
    """Load catalog data through the default store."""
    return _default_store.load(path)


def clear_cache() -> None:
    """Clear the default store (useful for test isolation)."""
    _default_store.clear_cache()


__all__ = [
    "BUNDLED_DATA_PATH",
    "CatalogData",
    "CatalogStore",
    "clear_cache",
    "default_data_path",
    "default_store",
    "load_data",
    "provider_entry",
]
