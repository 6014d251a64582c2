"""Generic platform for OpenAI-compatible providers.

Most models.dev providers expose the OpenAI wire format under their own API
root. :func:`create_platform` packages that root together with the provider's
model catalog and the collaborators the caller supplied; the ``openai`` SDK
client is only built when first requested.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from modelsdev._internal.exceptions import ModelsDevError
from modelsdev.models.schemas import Model

if TYPE_CHECKING:
    import openai

    from modelsdev.models.catalog.model_catalog import ModelCatalog

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/v1/chat/completions"
EMBEDDINGS_PATH = "/v1/embeddings"


@dataclass
class Platform:
    """Handle for an OpenAI-compatible API.

    Attributes:
        base_url: API root without trailing slash and without ``/v1``.
        model_catalog: Models the platform can serve.
        supports_completions: Whether any catalog model is a completions model.
        supports_embeddings: Whether any catalog model is an embeddings model.
        contract: Caller-supplied payload contract, passed through untouched.
        http_client: Caller-supplied HTTP client, passed through untouched.
        event_dispatcher: Caller-supplied event dispatcher, passed through untouched.
    """

    base_url: str
    model_catalog: "ModelCatalog"
    api_key: Optional[str] = field(default=None, repr=False)
    supports_completions: bool = True
    supports_embeddings: bool = True
    contract: Any = None
    http_client: Any = None
    event_dispatcher: Any = None
    _client: Optional["openai.OpenAI"] = field(default=None, init=False, repr=False, compare=False)

    @property
    def provider_id(self) -> str:
        return self.model_catalog.provider_id

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}{COMPLETIONS_PATH}"

    @property
    def embeddings_url(self) -> str:
        return f"{self.base_url}{EMBEDDINGS_PATH}"

    def model(self, model_id: str) -> Model:
        """Instantiate a catalog model, raising ModelNotFoundError if absent."""
        return self.model_catalog.create_model(model_id)

    @property
    def client(self) -> "openai.OpenAI":
        """Return an ``openai.OpenAI`` client pointed at this platform."""
        if self._client is None:
            import openai

            kwargs: dict[str, Any] = {"api_key": self.api_key, "base_url": f"{self.base_url}/v1"}
            if self.http_client is not None:
                kwargs["http_client"] = self.http_client
            try:
                self._client = openai.OpenAI(**kwargs)
            except openai.OpenAIError as exc:
                raise ModelsDevError(
                    f'Cannot create an OpenAI client for provider "{self.provider_id}": {exc}',
                    context={"provider": self.provider_id, "base_url": self.base_url},
                ) from exc
        return self._client


def create_platform(
    *,
    base_url: str,
    model_catalog: "ModelCatalog",
    api_key: Optional[str] = None,
    contract: Any = None,
    http_client: Any = None,
    event_dispatcher: Any = None,
    supports_completions: bool = True,
    supports_embeddings: bool = True,
) -> Platform:
    """Build a :class:`Platform` for an OpenAI-compatible provider."""

    platform = Platform(
        base_url=base_url.rstrip("/"),
        model_catalog=model_catalog,
        api_key=api_key,
        supports_completions=supports_completions,
        supports_embeddings=supports_embeddings,
        contract=contract,
        http_client=http_client,
        event_dispatcher=event_dispatcher,
    )
    logger.debug(
        "Created generic platform for %s at %s (completions=%s, embeddings=%s)",
        model_catalog.provider_id,
        platform.base_url,
        supports_completions,
        supports_embeddings,
    )
    return platform


__all__ = ["Platform", "create_platform", "COMPLETIONS_PATH", "EMBEDDINGS_PATH"]
