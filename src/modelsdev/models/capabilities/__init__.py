"""Capability classification for models.dev model metadata.

The helpers map a raw models.dev model entry to an ordered list of
:class:`~modelsdev.models.schemas.Capability` tags and decide whether the
entry is an embeddings or a completions model. They are pure functions: no
catalog lookups, no I/O.

Examples:
    >>> from modelsdev.models.capabilities import classify
    >>> classify({"id": "text-embedding-3-small"})
    [<Capability.INPUT_TEXT: 'input-text'>, <Capability.EMBEDDINGS: 'embeddings'>]

"""

from __future__ import annotations

from typing import Any, List, Mapping

from modelsdev.models.schemas import Capability

COMPLETIONS = "completions"
EMBEDDINGS = "embeddings"

_EMBEDDING_CAPABILITIES = (Capability.INPUT_TEXT, Capability.EMBEDDINGS)
_BASE_COMPLETION_CAPABILITIES = (
    Capability.INPUT_MESSAGES,
    Capability.OUTPUT_TEXT,
    Capability.OUTPUT_STREAMING,
)

# (metadata flag, capability) pairs checked in order.
_FLAG_CAPABILITIES = (
    ("tool_call", Capability.TOOL_CALLING),
    ("structured_output", Capability.OUTPUT_STRUCTURED),
    ("reasoning", Capability.THINKING),
)
_INPUT_MODALITIES = (
    ("image", Capability.INPUT_IMAGE),
    ("pdf", Capability.INPUT_PDF),
    ("audio", Capability.INPUT_AUDIO),
)
_OUTPUT_MODALITIES = (
    ("image", Capability.OUTPUT_IMAGE),
    ("audio", Capability.OUTPUT_AUDIO),
)


def is_embedding_model(metadata: Mapping[str, Any]) -> bool:
    """Return True when the family, or failing that the id, mentions 'embed'."""

    family = metadata.get("family") or ""
    if family and "embed" in family:
        return True
    return "embed" in str(metadata.get("id", ""))


def implementation_kind(metadata: Mapping[str, Any]) -> str:
    """Return ``"embeddings"`` or ``"completions"`` for a model entry."""

    return EMBEDDINGS if is_embedding_model(metadata) else COMPLETIONS


def classify(metadata: Mapping[str, Any]) -> List[Capability]:
    """Map a models.dev model entry to its capability tags.

    Args:
        metadata: Raw model entry (``tool_call``, ``reasoning``,
            ``modalities`` ...). Missing flags count as false.

    Returns:
        Ordered capability list without duplicates.
    """

    if is_embedding_model(metadata):
        return list(_EMBEDDING_CAPABILITIES)

    capabilities = list(_BASE_COMPLETION_CAPABILITIES)
    for flag, capability in _FLAG_CAPABILITIES:
        if metadata.get(flag):
            capabilities.append(capability)

    modalities = metadata.get("modalities") or {}
    inputs = modalities.get("input") or ()
    for modality, capability in _INPUT_MODALITIES:
        if modality in inputs:
            capabilities.append(capability)

    outputs = modalities.get("output") or ()
    for modality, capability in _OUTPUT_MODALITIES:
        if modality in outputs:
            capabilities.append(capability)

    return capabilities


__all__ = [
    "COMPLETIONS",
    "EMBEDDINGS",
    "classify",
    "implementation_kind",
    "is_embedding_model",
]
