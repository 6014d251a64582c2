"""modelsdev model catalog, bridge routing, and typed schemas.

This package consolidates the catalog, the bridge router, and the resolver and
factory built on top of them. Bridge implementations remain lazily imported by
the router; the symbols re-exported here are explicit.
"""

from __future__ import annotations

from modelsdev.models.catalog import CatalogStore, ModelCatalog, ProviderDirectory
from modelsdev.models.providers import BRIDGE_TABLE, BridgeRouter
from modelsdev.models.providers.base import BridgeEntry, BridgeSignature
from modelsdev.models.providers.generic import Platform
from modelsdev.models.runtime import ModelSpecResolver, PlatformFactory, create_platform, resolve
from modelsdev.models.schemas import (
    Capability,
    CompletionsModel,
    EmbeddingsModel,
    Model,
    ModelRecord,
    ProviderRecord,
    ResolvedSpec,
)

__all__ = [
    # Catalog
    "CatalogStore",
    "ModelCatalog",
    "ProviderDirectory",
    # Routing
    "BRIDGE_TABLE",
    "BridgeEntry",
    "BridgeRouter",
    "BridgeSignature",
    "ModelSpecResolver",
    "Platform",
    "PlatformFactory",
    "create_platform",
    "resolve",
    # Schemas
    "Capability",
    "CompletionsModel",
    "EmbeddingsModel",
    "Model",
    "ModelRecord",
    "ProviderRecord",
    "ResolvedSpec",
]
