"""Typed schemas shared across the modelsdev models stack.

Capability tags, model implementation kinds, and the immutable records built
from the models.dev catalog live here so every layer speaks the same types.

Examples:
    >>> from modelsdev.models.schemas import Capability, CompletionsModel
    >>> model = CompletionsModel("gpt-4o", [Capability.INPUT_MESSAGES])
    >>> model.supports(Capability.INPUT_MESSAGES)
    True

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable, Iterator, Optional, Tuple


class Capability(StrEnum):
    """Feature tags a model can advertise."""

    INPUT_MESSAGES = "input-messages"
    INPUT_TEXT = "input-text"
    INPUT_IMAGE = "input-image"
    INPUT_PDF = "input-pdf"
    INPUT_AUDIO = "input-audio"
    OUTPUT_TEXT = "output-text"
    OUTPUT_STREAMING = "output-streaming"
    OUTPUT_STRUCTURED = "output-structured"
    OUTPUT_IMAGE = "output-image"
    OUTPUT_AUDIO = "output-audio"
    TOOL_CALLING = "tool-calling"
    THINKING = "thinking"
    EMBEDDINGS = "embeddings"


class Model:
    """A named model together with the capabilities it supports.

    Bridges subclass :class:`CompletionsModel` or :class:`EmbeddingsModel` to
    attach provider-specific behaviour; routing only relies on the subclass
    relationship.
    """

    def __init__(self, name: str, capabilities: Iterable[Capability] = ()) -> None:
        self.name = name
        self.capabilities: Tuple[Capability, ...] = tuple(capabilities)

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name and self.capabilities == other.capabilities  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.capabilities))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CompletionsModel(Model):
    """Chat/completions model served through an OpenAI-compatible endpoint."""


class EmbeddingsModel(Model):
    """Embeddings model served through an OpenAI-compatible endpoint."""


@dataclass(frozen=True)
class ModelRecord:
    """Catalog entry describing how to build a model.

    Attributes:
        id: Provider-specific model identifier.
        kind: Implementation class (a :class:`Model` subclass).
        capabilities: Ordered capability tags.
        status: Release status reported by the catalog ('active' when absent).
    """

    id: str
    kind: type[Model]
    capabilities: Tuple[Capability, ...] = field(default_factory=tuple)
    status: str = "active"

    def build(self) -> Model:
        """Instantiate the implementation class for this record."""
        return self.kind(self.id, self.capabilities)


@dataclass(frozen=True)
class ProviderRecord:
    """Provider metadata read from the catalog.

    Attributes:
        id: models.dev provider id (e.g. 'groq').
        name: Display name.
        api: API base URL, when the catalog lists one.
        npm: Vercel AI SDK package id used to pick a bridge.
    """

    id: str
    name: str
    api: Optional[str] = None
    npm: Optional[str] = None


@dataclass(frozen=True)
class ResolvedSpec:
    """Result of resolving a model specification string."""

    provider: str
    model_id: str

    def __iter__(self) -> Iterator[str]:
        yield self.provider
        yield self.model_id

    def __str__(self) -> str:
        return f"{self.provider}::{self.model_id}"


__all__ = [
    "Capability",
    "Model",
    "CompletionsModel",
    "EmbeddingsModel",
    "ModelRecord",
    "ProviderRecord",
    "ResolvedSpec",
]
