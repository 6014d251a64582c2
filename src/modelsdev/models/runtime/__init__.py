"""Spec resolution and platform routing."""

from modelsdev.models.runtime.factory import (
    NPM_PACKAGE_BASE_URLS,
    PlatformFactory,
    create_platform,
    detect_support,
)
from modelsdev.models.runtime.resolver import (
    DEFAULT_CANONICAL_PROVIDERS,
    ModelSpecResolver,
    resolve,
)

__all__ = [
    "DEFAULT_CANONICAL_PROVIDERS",
    "ModelSpecResolver",
    "NPM_PACKAGE_BASE_URLS",
    "PlatformFactory",
    "create_platform",
    "detect_support",
    "resolve",
]
