"""models.dev catalog access.

The catalog layer turns the static models.dev data file into provider
records and per-provider model catalogs:

* :class:`CatalogStore` reads and caches the data file.
* :class:`ProviderDirectory` answers provider lookups.
* :class:`ModelCatalog` lists a provider's active models.

Examples:
    >>> from modelsdev.models.catalog import ProviderDirectory
    >>> directory = ProviderDirectory()
    >>> directory.api_base_url("deepseek")
    'https://api.deepseek.com'

"""

from __future__ import annotations

from modelsdev.models.catalog.directory import ProviderDirectory
from modelsdev.models.catalog.model_catalog import ModelCatalog
from modelsdev.models.catalog.store import (
    BUNDLED_DATA_PATH,
    CatalogStore,
    clear_cache,
    default_store,
    load_data,
)

__all__ = [
    "BUNDLED_DATA_PATH",
    "CatalogStore",
    "ModelCatalog",
    "ProviderDirectory",
    "clear_cache",
    "default_store",
    "load_data",
]
