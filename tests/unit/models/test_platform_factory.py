"""Tests for platform routing and construction."""

import pytest

from modelsdev._internal.exceptions import (
    BridgeError,
    BridgeIncompatibleError,
    BridgeUnavailableError,
    DataSchemaError,
    NoBaseUrlError,
    ProviderNotFoundError,
)
from modelsdev.models.catalog import ModelCatalog, ProviderDirectory
from modelsdev.models.providers import BridgeRouter
from modelsdev.models.providers.base import BridgeEntry, BridgeSignature
from modelsdev.models.providers.generic import Platform
from modelsdev.models.runtime.factory import (
    NPM_PACKAGE_BASE_URLS,
    PlatformFactory,
    create_platform,
    detect_support,
)
from modelsdev.models.schemas import CompletionsModel, EmbeddingsModel


class Claude(CompletionsModel):
    pass


class RecordingFactory:
    def __init__(self):
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return ("bridged-platform", kwargs)


@pytest.fixture
def factory(store):
    def _build(**kwargs):
        kwargs.setdefault("store", store)
        kwargs.setdefault("base_url_fallbacks", {})
        return PlatformFactory(**kwargs)

    return _build


class TestGenericRouting:
    def test_provider_with_api_base_url(self, factory, sample_catalog_path):
        platform = factory().create("acme", api_key="test-key", data_path=sample_catalog_path)

        assert isinstance(platform, Platform)
        assert platform.base_url == "https://api.acme.test"
        assert platform.completions_url == "https://api.acme.test/v1/chat/completions"
        assert platform.embeddings_url == "https://api.acme.test/v1/embeddings"
        assert platform.provider_id == "acme"

    def test_explicit_base_url_wins(self, factory, sample_catalog_path):
        platform = factory().create(
            "acme", api_key="test-key", base_url="https://proxy.test/acme///", data_path=sample_catalog_path
        )

        assert platform.base_url == "https://proxy.test/acme"

    def test_npm_package_fallback(self, factory, sample_catalog_path):
        platform = factory().create("fastinf", api_key="test-key", data_path=sample_catalog_path)

        assert platform.base_url == NPM_PACKAGE_BASE_URLS["@ai-sdk/groq"]
        assert platform.completions_url == "https://api.groq.com/openai/v1/chat/completions"

    def test_configured_fallback(self, factory, sample_catalog_path):
        platform = factory(base_url_fallbacks={"@ai-sdk/azure": "https://azure.test/openai/"}).create(
            "nourl", data_path=sample_catalog_path
        )

        assert platform.base_url == "https://azure.test/openai"

    def test_no_base_url(self, factory, sample_catalog_path):
        with pytest.raises(NoBaseUrlError, match='Provider "nourl" does not have a known API base URL') as excinfo:
            factory().create("nourl", api_key="test-key", data_path=sample_catalog_path)

        assert excinfo.value.context == {"provider": "nourl", "npm": "@ai-sdk/azure"}

    def test_unknown_provider(self, factory, sample_catalog_path):
        with pytest.raises(ProviderNotFoundError, match='Provider "nonexistent" not found'):
            factory().create("nonexistent", data_path=sample_catalog_path)

    def test_malformed_provider_entry(self, factory, write_catalog):
        path = write_catalog({"acme": "https://api.acme.test"})

        with pytest.raises(DataSchemaError, match='provider "acme"'):
            factory().create("acme", data_path=path)

    def test_detects_completions_and_embeddings(self, factory, sample_catalog_path):
        platform = factory().create("acme", data_path=sample_catalog_path)

        assert platform.supports_completions
        assert platform.supports_embeddings

    def test_completions_only_provider(self, factory, sample_catalog_path):
        platform = factory().create("relay", data_path=sample_catalog_path)

        assert platform.supports_completions
        assert not platform.supports_embeddings

    def test_empty_provider_supports_nothing(self, factory, sample_catalog_path):
        platform = factory().create("empty", data_path=sample_catalog_path)

        assert not platform.supports_completions
        assert not platform.supports_embeddings

    def test_collaborators_are_passed_through(self, factory, sample_catalog_path):
        contract, http_client, dispatcher = object(), object(), object()

        platform = factory().create(
            "acme",
            api_key="secret",
            data_path=sample_catalog_path,
            contract=contract,
            http_client=http_client,
            event_dispatcher=dispatcher,
        )

        assert platform.api_key == "secret"
        assert platform.contract is contract
        assert platform.http_client is http_client
        assert platform.event_dispatcher is dispatcher

    def test_api_key_not_in_repr(self, factory, sample_catalog_path):
        platform = factory().create("acme", api_key="sk-very-secret-value", data_path=sample_catalog_path)

        assert "sk-very-secret-value" not in repr(platform)


class TestBridgeRouting:
    def test_routable_bridge_is_called(self, factory, sample_catalog_path):
        bridge = RecordingFactory()
        router = BridgeRouter(
            {
                "@ai-sdk/anthropic": BridgeEntry(
                    factory=bridge, package="modelsdev-anthropic", completions_model=Claude
                )
            }
        )

        result = factory(router=router).create("closed", api_key="test-key", data_path=sample_catalog_path)

        assert result[0] == "bridged-platform"
        kwargs = bridge.calls[0]
        assert set(kwargs) == {"api_key", "model_catalog", "contract", "http_client", "event_dispatcher"}
        assert kwargs["api_key"] == "test-key"
        catalog = kwargs["model_catalog"]
        assert isinstance(catalog, ModelCatalog)
        assert catalog.provider_id == "closed"
        assert catalog.model("closed-1").kind is Claude

    def test_bridge_ignores_base_url_sources(self, factory, sample_catalog_path):
        bridge = RecordingFactory()
        router = BridgeRouter({"@ai-sdk/anthropic": BridgeEntry(factory=bridge, package="modelsdev-anthropic")})

        factory(router=router).create("closed", base_url="https://ignored.test", data_path=sample_catalog_path)

        assert "base_url" not in bridge.calls[0]

    def test_bridge_not_installed(self, factory, sample_catalog_path):
        router = BridgeRouter(probe=lambda name: False)

        with pytest.raises(
            BridgeUnavailableError,
            match=r'Provider "closed" requires a specialized bridge \(@ai-sdk/anthropic\); '
            r'install it with pip install "modelsdev-anthropic"\.',
        ):
            factory(router=router).create("closed", api_key="test-key", data_path=sample_catalog_path)

    def test_non_routable_bridge(self, factory, sample_catalog_path):
        router = BridgeRouter(probe=lambda name: True)

        with pytest.raises(BridgeIncompatibleError) as excinfo:
            factory(router=router).create("cloudy", api_key="test-key", data_path=sample_catalog_path)

        message = str(excinfo.value)
        assert message.startswith(
            'Provider "cloudy" requires "modelsdev-vertexai" which has a different factory signature'
        )
        assert "location, project_id" in message
        assert '"modelsdev_vertexai:create_platform"' in message

    def test_non_routable_bridge_not_installed(self, factory, sample_catalog_path):
        router = BridgeRouter(probe=lambda name: False)

        with pytest.raises(BridgeError, match='install it with pip install "modelsdev-vertexai"'):
            factory(router=router).create("cloudy", data_path=sample_catalog_path)

    def test_custom_extended_entry(self, factory, sample_catalog_path):
        router = BridgeRouter(
            {
                "@ai-sdk/anthropic": BridgeEntry(
                    factory=RecordingFactory(),
                    package="modelsdev-anthropic",
                    signature=BridgeSignature.EXTENDED,
                    required_params=("region",),
                )
            }
        )

        with pytest.raises(BridgeIncompatibleError, match="it also needs: region"):
            factory(router=router).create("closed", data_path=sample_catalog_path)

    def test_bundled_vertex_provider(self, store):
        router = BridgeRouter(probe=lambda name: False)

        with pytest.raises(
            BridgeUnavailableError,
            match=r'Provider "google-vertex" requires a specialized bridge \(@ai-sdk/google-vertex\)',
        ):
            create_platform("google-vertex", api_key="test-key", router=router, store=store)


class TestBundledProviders:
    def test_deepseek(self):
        platform = create_platform("deepseek", api_key="test-key")

        assert platform.completions_url == "https://api.deepseek.com/v1/chat/completions"
        assert platform.supports_completions
        assert not platform.supports_embeddings

    def test_openai_uses_npm_fallback(self):
        platform = create_platform("openai", api_key="test-key")

        assert platform.base_url == "https://api.openai.com"
        assert platform.supports_completions
        assert platform.supports_embeddings

    def test_aggregator_urls_have_a_single_version_segment(self):
        platform = create_platform("openrouter", api_key="test-key")

        assert platform.completions_url == "https://openrouter.ai/api/v1/chat/completions"

    def test_bundled_api_roots_exclude_version(self):
        directory = ProviderDirectory()

        for provider_id in directory:
            api = directory.api_base_url(provider_id)
            assert api is None or not api.endswith("/v1"), provider_id

    def test_azure_has_no_base_url(self):
        with pytest.raises(NoBaseUrlError, match="base_url argument"):
            create_platform("azure", api_key="test-key")


class TestDetectSupport:
    def test_mixed_catalog(self, sample_catalog_path, store):
        assert detect_support(ModelCatalog("acme", sample_catalog_path, store=store)) == (True, True)

    def test_subclasses_count(self, sample_catalog_path, store):
        class Vectors(EmbeddingsModel):
            pass

        catalog = ModelCatalog("acme", sample_catalog_path, completions_model=Claude, embeddings_model=Vectors, store=store)

        assert detect_support(catalog) == (True, True)
