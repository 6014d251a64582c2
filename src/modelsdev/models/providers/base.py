"""Contracts shared by the bridge router and bridge implementations.

A bridge is an installable integration for a provider whose API is not
OpenAI-compatible. Bridges are referenced lazily as ``"module:attribute"``
strings so that importing modelsdev never pulls in their SDKs.

Examples:
    >>> from modelsdev.models.providers.base import BridgeSignature
    >>> BridgeSignature.SIMPLE.routable
    True
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, Tuple, Union

if TYPE_CHECKING:
    from modelsdev.models.catalog.model_catalog import ModelCatalog
    from modelsdev.models.schemas import Model

Reference = Union[str, Callable[..., Any]]
ModelReference = Union[str, "type[Model]"]


class BridgeSignature(StrEnum):
    """Shape of a bridge factory's construction signature.

    ``SIMPLE`` factories accept the same keyword arguments as the generic
    factory and can be routed to automatically. ``EXTENDED`` factories need
    extra mandatory parameters and must be called directly.
    """

    SIMPLE = "simple"
    EXTENDED = "extended"

    @property
    def routable(self) -> bool:
        return self is BridgeSignature.SIMPLE


class PlatformFactoryCallable(Protocol):
    """Keyword signature every routable factory accepts."""

    def __call__(
        self,
        *,
        api_key: Optional[str] = None,
        model_catalog: Optional["ModelCatalog"] = None,
        contract: Any = None,
        http_client: Any = None,
        event_dispatcher: Any = None,
    ) -> Any: ...


@dataclass(frozen=True)
class BridgeEntry:
    """Static description of one specialized bridge.

    Attributes:
        factory: Factory reference (``"module:attribute"`` or the callable).
        package: Distribution to install to obtain the bridge.
        signature: Whether the factory can be called like the generic one.
        completions_model: Model class used for completions entries.
        embeddings_model: Model class used for embeddings entries.
        required_params: Extra mandatory parameters of an ``EXTENDED`` factory.
    """

    factory: Reference
    package: str
    signature: BridgeSignature = BridgeSignature.SIMPLE
    completions_model: Optional[ModelReference] = None
    embeddings_model: Optional[ModelReference] = None
    required_params: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def routable(self) -> bool:
        return self.signature.routable

    @property
    def factory_module(self) -> Optional[str]:
        """Module that must be importable for a string factory reference."""
        if isinstance(self.factory, str):
            return self.factory.partition(":")[0]
        return None


def describe_reference(reference: Any) -> str:
    """Return the ``"module:attribute"`` text for a reference."""

    if isinstance(reference, str):
        return reference
    module = getattr(reference, "__module__", None)
    qualname = getattr(reference, "__qualname__", None) or getattr(reference, "__name__", None)
    if module and qualname:
        return f"{module}:{qualname}"
    return repr(reference)


def resolve_reference(reference: Any) -> Any:
    """Import and return the object behind a ``"module:attribute"`` string.

    Non-string references are returned unchanged.

    Raises:
        ValueError: If a string reference lacks the ``':'`` separator.
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """

    if not isinstance(reference, str):
        return reference
    if ":" not in reference:
        raise ValueError(f"Invalid reference '{reference}'; expected 'module:attribute'")
    module_path, attribute = reference.split(":", 1)
    target: Any = importlib.import_module(module_path)
    for part in attribute.split("."):
        target = getattr(target, part)
    return target


__all__ = [
    "BridgeEntry",
    "BridgeSignature",
    "ModelReference",
    "PlatformFactoryCallable",
    "Reference",
    "describe_reference",
    "resolve_reference",
]
