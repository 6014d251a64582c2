"""Routing table for providers that need a specialized bridge.

models.dev tags each provider with the Vercel AI SDK package that talks to it
(its ``npm`` field). Most packages speak the OpenAI wire format and are served
by :mod:`modelsdev.models.providers.generic`; the packages listed in
:data:`BRIDGE_TABLE` need a dedicated bridge distribution instead.

Bridge implementations are referenced by module path so nothing is imported
until a platform is actually built. Whether a bridge is installed is answered
by an availability probe, ``importlib.util.find_spec`` by default, which
callers may replace (e.g. with a feature-flag lookup).

Examples:
    >>> from modelsdev.models.providers import BridgeRouter
    >>> router = BridgeRouter()
    >>> router.requires_specialized_bridge("@ai-sdk/anthropic")
    True
    >>> router.requires_specialized_bridge("@ai-sdk/openai")
    False
"""

from __future__ import annotations

import importlib.util
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from modelsdev._internal.exceptions import BridgeUnavailableError
from modelsdev.models.providers.base import (
    BridgeEntry,
    BridgeSignature,
    ModelReference,
    PlatformFactoryCallable,
    Reference,
    describe_reference,
    resolve_reference,
)

logger = logging.getLogger(__name__)

AvailabilityProbe = Callable[[str], bool]

# npm package id -> bridge. Matched by exact package id only.
BRIDGE_TABLE: Mapping[str, BridgeEntry] = MappingProxyType(
    {
        "@ai-sdk/anthropic": BridgeEntry(
            factory="modelsdev_anthropic:create_platform",
            package="modelsdev-anthropic",
            completions_model="modelsdev_anthropic:Claude",
        ),
        "@ai-sdk/google": BridgeEntry(
            factory="modelsdev_gemini:create_platform",
            package="modelsdev-gemini",
            completions_model="modelsdev_gemini:Gemini",
            embeddings_model="modelsdev_gemini:Embeddings",
        ),
        "@ai-sdk/google-vertex": BridgeEntry(
            factory="modelsdev_vertexai:create_platform",
            package="modelsdev-vertexai",
            signature=BridgeSignature.EXTENDED,
            required_params=("location", "project_id"),
        ),
        "@ai-sdk/google-vertex/anthropic": BridgeEntry(
            factory="modelsdev_vertexai:create_platform",
            package="modelsdev-vertexai",
            signature=BridgeSignature.EXTENDED,
            required_params=("location", "project_id"),
        ),
        "@ai-sdk/amazon-bedrock": BridgeEntry(
            factory="modelsdev_bedrock:create_platform",
            package="modelsdev-bedrock",
            signature=BridgeSignature.EXTENDED,
            required_params=("bedrock_runtime_client",),
        ),
    }
)


def module_available(module_name: str) -> bool:
    """Return True if ``module_name`` can be imported, without importing it."""

    try:
        return importlib.util.find_spec(module_name) is not None
    except (ImportError, ValueError):
        # Raised for dotted names whose parent package is missing.
        return False


class BridgeRouter:
    """Answer availability and routability questions about bridges.

    Args:
        entries: Bridge table keyed by npm package id.
        probe: Callable deciding whether a module is installed.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, BridgeEntry]] = None,
        *,
        probe: Optional[AvailabilityProbe] = None,
    ) -> None:
        self._entries: Mapping[str, BridgeEntry] = (
            BRIDGE_TABLE if entries is None else MappingProxyType(dict(entries))
        )
        self._probe = probe or module_available

    def entry(self, npm_package: str) -> Optional[BridgeEntry]:
        """Return the bridge entry for ``npm_package`` or None."""
        return self._entries.get(npm_package)

    def packages(self) -> Tuple[str, ...]:
        """Return the npm package ids that need a specialized bridge."""
        return tuple(self._entries)

    def requires_specialized_bridge(self, npm_package: str) -> bool:
        return npm_package in self._entries

    def factory_ref(self, npm_package: str) -> Optional[Reference]:
        entry = self.entry(npm_package)
        return entry.factory if entry else None

    def package_name(self, npm_package: str) -> Optional[str]:
        entry = self.entry(npm_package)
        return entry.package if entry else None

    def is_available(self, npm_package: str) -> bool:
        """Return True when the bridge's factory can be loaded right now."""
        entry = self.entry(npm_package)
        if entry is None:
            return False
        module_name = entry.factory_module
        if module_name is None:
            return True
        return self._probe(module_name)

    def is_routable(self, npm_package: str) -> bool:
        """Return True when the factory accepts the generic construction signature."""
        entry = self.entry(npm_package)
        return entry.routable if entry else False

    def required_params(self, npm_package: str) -> Tuple[str, ...]:
        entry = self.entry(npm_package)
        return entry.required_params if entry else ()

    def completions_model_override(self, npm_package: str) -> Optional[ModelReference]:
        entry = self.entry(npm_package)
        return entry.completions_model if entry else None

    def embeddings_model_override(self, npm_package: str) -> Optional[ModelReference]:
        entry = self.entry(npm_package)
        return entry.embeddings_model if entry else None

    def load_factory(self, npm_package: str) -> PlatformFactoryCallable:
        """Import and return the bridge factory.

        Raises:
            BridgeUnavailableError: If there is no entry or the import fails.
        """
        entry = self.entry(npm_package)
        if entry is None:
            raise BridgeUnavailableError(
                f'No specialized bridge is registered for "{npm_package}".',
                context={"npm": npm_package},
            )
        try:
            factory = resolve_reference(entry.factory)
        except (ImportError, AttributeError) as exc:
            raise BridgeUnavailableError(
                f'Cannot load bridge factory "{describe_reference(entry.factory)}"; '
                f'install it with pip install "{entry.package}".',
                context={"npm": npm_package, "package": entry.package},
            ) from exc
        logger.debug("Loaded bridge factory %s for %s", describe_reference(entry.factory), npm_package)
        return factory


_default_router = BridgeRouter()


def default_router() -> BridgeRouter:
    """Return the shared router over :data:`BRIDGE_TABLE`."""
    return _default_router


__all__ = [
    "AvailabilityProbe",
    "BRIDGE_TABLE",
    "BridgeEntry",
    "BridgeRouter",
    "BridgeSignature",
    "PlatformFactoryCallable",
    "default_router",
    "module_available",
]
