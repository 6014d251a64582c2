"""Create a platform for any models.dev provider.

Routing happens per provider. If the provider's npm package maps to a
specialized bridge, that bridge's factory builds the platform; otherwise the
generic OpenAI-compatible platform is used with a base URL taken from, in
order, the caller, the catalog data, then :data:`NPM_PACKAGE_BASE_URLS`.

Examples:
    >>> from modelsdev.models.runtime.factory import create_platform
    >>> platform = create_platform("deepseek", api_key="sk-test")  # doctest: +SKIP
    >>> platform.completions_url  # doctest: +SKIP
    'https://api.deepseek.com/v1/chat/completions'
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from modelsdev._internal.exceptions import (
    BridgeIncompatibleError,
    BridgeUnavailableError,
    NoBaseUrlError,
    ProviderNotFoundError,
)
from modelsdev.models.catalog.directory import ProviderDirectory
from modelsdev.models.catalog.model_catalog import ModelCatalog
from modelsdev.models.catalog.store import CatalogStore, PathLike, default_store, provider_entry
from modelsdev.models.providers import BridgeRouter, default_router, generic
from modelsdev.models.providers.base import describe_reference
from modelsdev.models.schemas import CompletionsModel, EmbeddingsModel

logger = logging.getLogger(__name__)

# API roots for providers whose models.dev entry omits "api" because the
# Vercel AI SDK hardcodes the URL inside the dedicated npm package.
# Roots exclude "/v1"; the generic platform appends the versioned paths.
NPM_PACKAGE_BASE_URLS: Mapping[str, str] = MappingProxyType(
    {
        "@ai-sdk/cerebras": "https://api.cerebras.ai",
        "@ai-sdk/cohere": "https://api.cohere.com/compatibility",
        "@ai-sdk/deepinfra": "https://api.deepinfra.com/v1/openai",
        "@ai-sdk/groq": "https://api.groq.com/openai",
        "@ai-sdk/mistral": "https://api.mistral.ai",
        "@ai-sdk/openai": "https://api.openai.com",
        "@ai-sdk/perplexity": "https://api.perplexity.ai",
        "@ai-sdk/togetherai": "https://api.together.xyz",
        "@ai-sdk/xai": "https://api.x.ai",
    }
)


def _configured_fallbacks() -> Dict[str, str]:
    from modelsdev.core.config import get_config

    return dict(get_config().base_url_fallbacks)


def detect_support(model_catalog: ModelCatalog) -> Tuple[bool, bool]:
    """Return ``(supports_completions, supports_embeddings)`` for a catalog."""

    supports_completions = False
    supports_embeddings = False
    for record in model_catalog.models().values():
        if issubclass(record.kind, CompletionsModel):
            supports_completions = True
        if issubclass(record.kind, EmbeddingsModel):
            supports_embeddings = True
        if supports_completions and supports_embeddings:
            break
    return supports_completions, supports_embeddings


class PlatformFactory:
    """Decide how to build a platform for a provider and build it.

    Args:
        router: Bridge router; defaults to the shared one.
        store: Catalog store; defaults to the shared one.
        base_url_fallbacks: Extra npm package -> API root entries, merged over
            :data:`NPM_PACKAGE_BASE_URLS`. Defaults to configuration.
    """

    def __init__(
        self,
        router: Optional[BridgeRouter] = None,
        store: Optional[CatalogStore] = None,
        base_url_fallbacks: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._router = router or default_router()
        self._store = store or default_store()
        extra = _configured_fallbacks() if base_url_fallbacks is None else dict(base_url_fallbacks)
        self._fallbacks: Dict[str, str] = {**NPM_PACKAGE_BASE_URLS, **extra}

    def create(
        self,
        provider: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        data_path: Optional[PathLike] = None,
        contract: Any = None,
        http_client: Any = None,
        event_dispatcher: Any = None,
    ) -> Any:
        """Build a platform for ``provider``.

        Args:
            provider: models.dev provider id.
            api_key: Provider credential; passed through, never logged.
            base_url: API root overriding every other source (no ``/v1``).
            data_path: Catalog data file; None uses the default data file.
            contract: Payload contract passed to the factory.
            http_client: HTTP client passed to the factory.
            event_dispatcher: Event dispatcher passed to the factory.

        Returns:
            The platform built by the specialized bridge or the generic factory.

        Raises:
            ProviderNotFoundError: If the provider is not in the data.
            BridgeUnavailableError: If a required bridge is not installed.
            BridgeIncompatibleError: If the bridge needs extra parameters.
            NoBaseUrlError: If no API base URL can be determined.
        """
        data = self._store.load(data_path)
        provider_data = provider_entry(data, provider)
        if provider_data is None:
            raise ProviderNotFoundError(
                f'Provider "{provider}" not found in models.dev data.',
                context={"provider": provider},
            )
        npm_package: Optional[str] = provider_data.get("npm") or None

        if npm_package is not None and self._router.requires_specialized_bridge(npm_package):
            return self._create_bridged(
                provider,
                npm_package,
                api_key=api_key,
                data_path=data_path,
                contract=contract,
                http_client=http_client,
                event_dispatcher=event_dispatcher,
            )

        resolved_url = self._resolve_base_url(provider, npm_package, base_url, data_path)

        model_catalog = ModelCatalog(provider, data_path, store=self._store)
        supports_completions, supports_embeddings = detect_support(model_catalog)
        logger.debug("Routing %s to the generic platform at %s", provider, resolved_url)

        return generic.create_platform(
            base_url=resolved_url,
            api_key=api_key,
            model_catalog=model_catalog,
            contract=contract,
            http_client=http_client,
            event_dispatcher=event_dispatcher,
            supports_completions=supports_completions,
            supports_embeddings=supports_embeddings,
        )

    def _create_bridged(
        self,
        provider: str,
        npm_package: str,
        *,
        api_key: Optional[str],
        data_path: Optional[PathLike],
        contract: Any,
        http_client: Any,
        event_dispatcher: Any,
    ) -> Any:
        package = self._router.package_name(npm_package)
        factory_ref = describe_reference(self._router.factory_ref(npm_package))
        context = {"provider": provider, "npm": npm_package, "package": package}

        if not self._router.is_available(npm_package):
            raise BridgeUnavailableError(
                f'Provider "{provider}" requires a specialized bridge ({npm_package}); '
                f'install it with pip install "{package}".',
                context=context,
            )
        if not self._router.is_routable(npm_package):
            required = ", ".join(self._router.required_params(npm_package))
            raise BridgeIncompatibleError(
                f'Provider "{provider}" requires "{package}" which has a different factory signature '
                f"(it also needs: {required}); use \"{factory_ref}\" directly.",
                context=context,
            )

        model_catalog = ModelCatalog(
            provider,
            data_path,
            completions_model=self._router.completions_model_override(npm_package),
            embeddings_model=self._router.embeddings_model_override(npm_package),
            store=self._store,
        )
        factory = self._router.load_factory(npm_package)
        logger.debug("Routing %s to bridge %s", provider, factory_ref)
        return factory(
            api_key=api_key,
            model_catalog=model_catalog,
            contract=contract,
            http_client=http_client,
            event_dispatcher=event_dispatcher,
        )

    def _resolve_base_url(
        self,
        provider: str,
        npm_package: Optional[str],
        base_url: Optional[str],
        data_path: Optional[PathLike],
    ) -> str:
        if base_url is None:
            base_url = ProviderDirectory(data_path, store=self._store).api_base_url(provider)
        if base_url is None and npm_package is not None:
            base_url = self._fallbacks.get(npm_package)
        if base_url is None:
            raise NoBaseUrlError(
                f'Provider "{provider}" does not have a known API base URL; '
                "please provide one via the base_url argument.",
                context={"provider": provider, "npm": npm_package},
            )
        return base_url.rstrip("/")


def create_platform(
    provider: str,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    data_path: Optional[PathLike] = None,
    contract: Any = None,
    http_client: Any = None,
    event_dispatcher: Any = None,
    *,
    router: Optional[BridgeRouter] = None,
    store: Optional[CatalogStore] = None,
    base_url_fallbacks: Optional[Mapping[str, str]] = None,
) -> Any:
    """Build a platform for ``provider``; see :meth:`PlatformFactory.create`."""

    factory = PlatformFactory(router=router, store=store, base_url_fallbacks=base_url_fallbacks)
    return factory.create(
        provider,
        api_key=api_key,
        base_url=base_url,
        data_path=data_path,
        contract=contract,
        http_client=http_client,
        event_dispatcher=event_dispatcher,
    )


__all__ = ["NPM_PACKAGE_BASE_URLS", "PlatformFactory", "create_platform", "detect_support"]
