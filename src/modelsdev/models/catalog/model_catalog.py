"""Per-provider model catalog built from models.dev data."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Optional

from modelsdev._internal.exceptions import (
    BridgeUnavailableError,
    DataSchemaError,
    ModelNotFoundError,
    ProviderNotFoundError,
)
from modelsdev.models import capabilities
from modelsdev.models.catalog.store import CatalogStore, PathLike, default_store, provider_entry
from modelsdev.models.providers.base import ModelReference, describe_reference, resolve_reference
from modelsdev.models.schemas import CompletionsModel, EmbeddingsModel, Model, ModelRecord

logger = logging.getLogger(__name__)

DEPRECATED_STATUS = "deprecated"


def _resolve_model_class(reference: Optional[ModelReference], default: type[Model]) -> type[Model]:
    if reference is None:
        return default
    try:
        kind = resolve_reference(reference)
    except (ImportError, AttributeError) as exc:
        raise BridgeUnavailableError(
            f'Cannot load model class "{describe_reference(reference)}".',
            context={"reference": describe_reference(reference)},
        ) from exc
    if not isinstance(kind, type) or not issubclass(kind, Model):
        raise TypeError(f"Model class must inherit from Model, got {kind!r}")
    return kind


class ModelCatalog:
    """Active models of one provider, keyed by model id.

    Deprecated entries are dropped while loading; every other entry is
    classified into the completions or embeddings kind. Entries passed as
    ``additional_models`` are merged last and win on id collisions.

    Args:
        provider_id: models.dev provider id (e.g. "openai", "groq").
        data_path: Catalog data file; None uses the default data file.
        additional_models: Extra records to merge into the catalog.
        completions_model: Override for the completions model class.
        embeddings_model: Override for the embeddings model class.
        store: Catalog store to read through; defaults to the shared one.

    Raises:
        ProviderNotFoundError: If ``provider_id`` is not in the data.
    """

    def __init__(
        self,
        provider_id: str,
        data_path: Optional[PathLike] = None,
        additional_models: Optional[Mapping[str, ModelRecord]] = None,
        completions_model: Optional[ModelReference] = None,
        embeddings_model: Optional[ModelReference] = None,
        *,
        store: Optional[CatalogStore] = None,
    ) -> None:
        data = (store or default_store()).load(data_path)
        provider_data = provider_entry(data, provider_id)
        if provider_data is None:
            raise ProviderNotFoundError(
                f'Provider "{provider_id}" not found in models.dev data.',
                context={"provider": provider_id},
            )

        completions_kind = _resolve_model_class(completions_model, CompletionsModel)
        embeddings_kind = _resolve_model_class(embeddings_model, EmbeddingsModel)

        models: Dict[str, ModelRecord] = {}
        raw_models = provider_data.get("models") or {}
        if not isinstance(raw_models, dict):
            raise DataSchemaError(
                f'Invalid models.dev API data: models of provider "{provider_id}" must be an object.',
                context={"provider": provider_id, "type": type(raw_models).__name__},
            )

        for key, model_data in raw_models.items():
            if not isinstance(model_data, dict):
                raise DataSchemaError(
                    f'Invalid models.dev API data: model "{key}" of provider "{provider_id}" must be an object.',
                    context={"provider": provider_id, "model": key, "type": type(model_data).__name__},
                )
            status = model_data.get("status") or "active"
            if status == DEPRECATED_STATUS:
                continue

            model_id = model_data.get("id") or key
            is_embedding = capabilities.is_embedding_model({**model_data, "id": model_id})
            models[model_id] = ModelRecord(
                id=model_id,
                kind=embeddings_kind if is_embedding else completions_kind,
                capabilities=tuple(capabilities.classify({**model_data, "id": model_id})),
                status=status,
            )

        if additional_models:
            models.update(additional_models)

        self.provider_id = provider_id
        self._models = models
        logger.debug("Built catalog for %s with %d models", provider_id, len(models))

    def models(self) -> Dict[str, ModelRecord]:
        """Return the ordered ``id -> record`` mapping."""
        return dict(self._models)

    def model(self, model_id: str) -> ModelRecord:
        """Return the record for ``model_id``.

        Raises:
            ModelNotFoundError: If the catalog has no such model.
        """
        try:
            return self._models[model_id]
        except KeyError:
            raise ModelNotFoundError(
                f'Model "{model_id}" not found for provider "{self.provider_id}".',
                context={"provider": self.provider_id, "model": model_id},
            ) from None

    def create_model(self, model_id: str) -> Model:
        """Instantiate the implementation class for ``model_id``."""
        return self.model(model_id).build()

    def first_model_id(self) -> Optional[str]:
        """Return the first model id in catalog order, or None when empty."""
        return next(iter(self._models), None)

    def __contains__(self, model_id: Any) -> bool:
        return model_id in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"ModelCatalog(provider_id={self.provider_id!r}, models={len(self._models)})"


__all__ = ["ModelCatalog", "DEPRECATED_STATUS"]
