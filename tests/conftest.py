"""Configure pytest environment for all tests."""

import json
from pathlib import Path

import pytest

from modelsdev.core.config import reset_config
from modelsdev.models.catalog import CatalogStore, clear_cache

_MODELSDEV_ENV = (
    "MODELSDEV_DATA_PATH",
    "MODELSDEV_CANONICAL_PROVIDERS",
    "MODELSDEV_LOG_LEVEL",
)

SAMPLE_CATALOG = {
    "acme": {
        "id": "acme",
        "name": "Acme AI",
        "api": "https://api.acme.test/",
        "npm": "@ai-sdk/openai-compatible",
        "models": {
            "acme-legacy": {
                "id": "acme-legacy",
                "status": "deprecated",
                "modalities": {"input": ["text"], "output": ["text"]},
            },
            "acme-chat": {
                "id": "acme-chat",
                "family": "acme",
                "tool_call": True,
                "reasoning": True,
                "modalities": {"input": ["text", "image"], "output": ["text"]},
            },
            "acme-embed-v1": {
                "id": "acme-embed-v1",
                "family": "acme-embed",
                "modalities": {"input": ["text"], "output": ["text"]},
            },
        },
    },
    "relay": {
        "id": "relay",
        "name": "Relay",
        "api": "https://relay.test",
        "npm": "@ai-sdk/openai-compatible",
        "models": {
            "relay/auto": {"id": "relay/auto"},
            "acme-chat": {"id": "acme-chat", "tool_call": True},
        },
    },
    "empty": {
        "id": "empty",
        "name": "Empty",
        "api": "https://empty.test",
        "models": {},
    },
    "closed": {
        "id": "closed",
        "name": "Closed Labs",
        "npm": "@ai-sdk/anthropic",
        "models": {
            "closed-1": {"id": "closed-1", "tool_call": True},
        },
    },
    "cloudy": {
        "id": "cloudy",
        "npm": "@ai-sdk/google-vertex",
        "models": {"cloudy-1": {"id": "cloudy-1"}},
    },
    "nourl": {
        "id": "nourl",
        "name": "No URL",
        "npm": "@ai-sdk/azure",
        "models": {"nourl-chat": {"id": "nourl-chat"}},
    },
    "fastinf": {
        "id": "fastinf",
        "name": "Fast Inference",
        "npm": "@ai-sdk/groq",
        "models": {"fast-chat": {"id": "fast-chat"}},
    },
}


@pytest.fixture(autouse=True)
def isolated_modelsdev(tmp_path, monkeypatch):
    """Keep user config, environment overrides and cached data out of tests."""
    monkeypatch.setenv("MODELSDEV_CONFIG_PATH", str(tmp_path / "no-config.yaml"))
    for name in _MODELSDEV_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    clear_cache()
    yield
    reset_config()
    clear_cache()


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog data file and return its path."""

    def _write(data, name="models-dev.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_catalog_path(write_catalog) -> Path:
    return write_catalog(SAMPLE_CATALOG, name="sample.json")


@pytest.fixture
def store() -> CatalogStore:
    return CatalogStore()
