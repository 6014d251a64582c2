"""
modelsdev: models.dev-powered model resolution and platform routing
====================================================================

Resolve ``"provider"``, ``"model"`` or ``"provider::model"`` into a concrete
provider and model, inspect each provider's models and capabilities, and build
a platform that talks to it, through a specialized bridge when the provider
needs one and an OpenAI-compatible client otherwise.

Examples:
    import modelsdev

    spec = modelsdev.resolve("claude-opus-4-5")
    spec.provider          # 'anthropic'

    platform = modelsdev.create_platform("groq", api_key="...")
    platform.completions_url
"""

from __future__ import annotations

import importlib.metadata

from modelsdev import exceptions
from modelsdev.models import (
    Capability,
    CatalogStore,
    ModelCatalog,
    ModelSpecResolver,
    PlatformFactory,
    ProviderDirectory,
    ResolvedSpec,
    create_platform,
    resolve,
)

try:
    __version__ = importlib.metadata.version("modelsdev-platform")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "Capability",
    "CatalogStore",
    "ModelCatalog",
    "ModelSpecResolver",
    "PlatformFactory",
    "ProviderDirectory",
    "ResolvedSpec",
    "create_platform",
    "exceptions",
    "resolve",
    "__version__",
]
