"""Resolve model specification strings to a (provider, model id) pair.

Accepted input formats, tried in this order:

* ``"provider::model"``: explicit form such as ``"anthropic::claude-opus-4-5"``.
  Only the first ``"::"`` separates; the rest belongs to the model id.
* ``"provider"``: provider only; resolves to the first active model listed in
  that provider's catalog.
* ``"model"``: bare model id; the owning provider is found by scanning the
  canonical providers first, then every other provider in catalog order, so
  first-party providers win over aggregators that re-list the same id.

Examples:
    >>> from modelsdev.models.runtime.resolver import ModelSpecResolver
    >>> ModelSpecResolver().resolve("groq::llama-3.3-70b:free")
    ResolvedSpec(provider='groq', model_id='llama-3.3-70b:free')
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

from modelsdev._internal.exceptions import (
    InvalidSpecError,
    ModelNotFoundError,
    ProviderNotFoundError,
)
from modelsdev.models.catalog.directory import ProviderDirectory
from modelsdev.models.catalog.store import CatalogStore, PathLike
from modelsdev.models.schemas import ResolvedSpec

logger = logging.getLogger(__name__)

SEPARATOR = "::"

DEFAULT_CANONICAL_PROVIDERS: Tuple[str, ...] = (
    "anthropic",
    "openai",
    "google",
    "mistral",
    "xai",
    "deepseek",
    "groq",
    "cerebras",
    "cohere",
)


def configured_canonical_providers() -> Tuple[str, ...]:
    """Return the canonical provider order from configuration or the default."""

    from modelsdev.core.config import get_config

    configured = get_config().canonical_providers
    if configured is None:
        return DEFAULT_CANONICAL_PROVIDERS
    return tuple(configured)


class ModelSpecResolver:
    """Turn ``"provider"``, ``"model"`` or ``"provider::model"`` into a ResolvedSpec.

    Args:
        directory: Provider directory to search; built from ``data_path`` if None.
        data_path: Catalog data file used when no directory is given.
        canonical_providers: Providers checked first for bare model ids; falls
            back to configuration, then to :data:`DEFAULT_CANONICAL_PROVIDERS`.
        store: Catalog store used when no directory is given.
    """

    def __init__(
        self,
        directory: Optional[ProviderDirectory] = None,
        data_path: Optional[PathLike] = None,
        *,
        canonical_providers: Optional[Iterable[str]] = None,
        store: Optional[CatalogStore] = None,
    ) -> None:
        self._directory = directory or ProviderDirectory(data_path, store=store)
        self._canonical: Tuple[str, ...] = (
            tuple(canonical_providers)
            if canonical_providers is not None
            else configured_canonical_providers()
        )

    @property
    def directory(self) -> ProviderDirectory:
        return self._directory

    @property
    def canonical_providers(self) -> Tuple[str, ...]:
        return self._canonical

    def resolve(self, model_spec: str) -> ResolvedSpec:
        """Resolve ``model_spec`` to a provider and model id.

        Raises:
            InvalidSpecError: If the explicit form has an empty half.
            NotFoundError: If the provider or model cannot be determined.
        """
        if SEPARATOR in model_spec:
            provider, _, model_id = model_spec.partition(SEPARATOR)
            if not provider:
                raise InvalidSpecError(
                    f'Invalid model specification "{model_spec}": provider part is empty.',
                    context={"spec": model_spec},
                )
            if not model_id:
                raise InvalidSpecError(
                    f'Invalid model specification "{model_spec}": model ID part is empty.',
                    context={"spec": model_spec},
                )
            logger.debug("Resolved explicit spec %r", model_spec)
            return ResolvedSpec(provider=provider, model_id=model_id)

        if self._directory.has(model_spec):
            model_id = self._first_model(model_spec)
            logger.debug("Resolved provider-only spec %r to model %r", model_spec, model_id)
            return ResolvedSpec(provider=model_spec, model_id=model_id)

        provider = self._find_provider_for_model(model_spec)
        logger.debug("Resolved bare model id %r to provider %r", model_spec, provider)
        return ResolvedSpec(provider=provider, model_id=model_spec)

    def _first_model(self, provider: str) -> str:
        catalog = self._directory.catalog(provider)
        if catalog is None:
            raise ProviderNotFoundError(
                f'No model catalog found for provider "{provider}"; use "provider::model" format.',
                context={"provider": provider},
            )

        model_id = catalog.first_model_id()
        if model_id is None:
            raise ModelNotFoundError(
                f'No models found for provider "{provider}"; use "provider::model" format.',
                context={"provider": provider},
            )
        return model_id

    def _scan_order(self) -> Sequence[str]:
        canonical = list(self._canonical)
        seen = set(canonical)
        return canonical + [pid for pid in self._directory.provider_ids() if pid not in seen]

    def _find_provider_for_model(self, model_id: str) -> str:
        for provider_id in self._scan_order():
            catalog = self._directory.catalog(provider_id)
            if catalog is not None and model_id in catalog:
                return provider_id

        raise ModelNotFoundError(
            f'Cannot determine provider for model "{model_id}"; '
            'Use "provider::model" format to specify it explicitly.',
            context={"model": model_id},
        )


def resolve(model_spec: str, data_path: Optional[PathLike] = None) -> ResolvedSpec:
    """Resolve ``model_spec`` with a resolver over ``data_path``."""
    return ModelSpecResolver(data_path=data_path).resolve(model_spec)


__all__ = [
    "DEFAULT_CANONICAL_PROVIDERS",
    "ModelSpecResolver",
    "SEPARATOR",
    "configured_canonical_providers",
    "resolve",
]
