"""Provider metadata lookups over the models.dev data."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from modelsdev._internal.exceptions import ProviderNotFoundError
from modelsdev.models.catalog.model_catalog import ModelCatalog
from modelsdev.models.catalog.store import CatalogStore, PathLike, default_store, provider_entry
from modelsdev.models.schemas import ProviderRecord

logger = logging.getLogger(__name__)


class ProviderDirectory:
    """Index of providers listed in the catalog data.

    Provider records are read once at construction; model catalogs are built
    on first request and reused.

    Args:
        data_path: Catalog data file; None uses the default data file.
        store: Catalog store to read through; defaults to the shared one.
    """

    def __init__(self, data_path: Optional[PathLike] = None, *, store: Optional[CatalogStore] = None) -> None:
        self._data_path = data_path
        self._store = store or default_store()

        providers: Dict[str, ProviderRecord] = {}
        data = self._store.load(data_path)
        for provider_id in data:
            provider_data = provider_entry(data, provider_id)
            providers[provider_id] = ProviderRecord(
                id=provider_id,
                name=provider_data.get("name") or provider_id,
                api=provider_data.get("api") or None,
                npm=provider_data.get("npm") or None,
            )
        self._providers = providers
        self._catalogs: Dict[str, ModelCatalog] = {}

    @property
    def data_path(self) -> Optional[PathLike]:
        return self._data_path

    @property
    def store(self) -> CatalogStore:
        return self._store

    def has(self, provider_id: str) -> bool:
        return provider_id in self._providers

    def provider(self, provider_id: str) -> ProviderRecord:
        """Return the provider record.

        Raises:
            ProviderNotFoundError: If the provider is unknown.
        """
        try:
            return self._providers[provider_id]
        except KeyError:
            raise ProviderNotFoundError(
                f'Provider "{provider_id}" not found in registry.',
                context={"provider": provider_id},
            ) from None

    def provider_name(self, provider_id: str) -> str:
        return self.provider(provider_id).name

    def api_base_url(self, provider_id: str) -> Optional[str]:
        """Return the API base URL without trailing slashes, or None."""
        api = self.provider(provider_id).api
        return api.rstrip("/") if api is not None else None

    def catalog(self, provider_id: str) -> Optional[ModelCatalog]:
        """Return the provider's model catalog, or None for unknown providers."""
        if provider_id not in self._providers:
            return None
        catalog = self._catalogs.get(provider_id)
        if catalog is None:
            catalog = ModelCatalog(provider_id, self._data_path, store=self._store)
            self._catalogs[provider_id] = catalog
        return catalog

    def provider_ids(self) -> List[str]:
        """Return provider ids in data file order."""
        return list(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


__all__ = ["ProviderDirectory"]
