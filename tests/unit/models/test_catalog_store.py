"""Tests for the catalog data store."""

import pytest

from modelsdev._internal.exceptions import (
    CatalogDataError,
    DataFileNotFoundError,
    DataParseError,
    DataReadError,
    DataSchemaError,
    NotFoundError,
)
from modelsdev.core.config import reset_config
from modelsdev.models.catalog import BUNDLED_DATA_PATH, CatalogStore, load_data
from modelsdev.models.catalog import store as store_module


class TestCatalogStore:
    def test_load_default_file(self, store):
        data = store.load()

        assert "anthropic" in data
        assert "openai" in data
        assert store.cached_path == str(BUNDLED_DATA_PATH)

    def test_load_custom_file(self, store, write_catalog):
        path = write_catalog({"only": {"name": "Only", "models": {}}})

        data = store.load(path)

        assert list(data) == ["only"]
        assert data["only"]["name"] == "Only"

    def test_same_path_returns_cached_object(self, store, write_catalog):
        path = write_catalog({"one": {"models": {}}})

        first = store.load(path)
        path.write_text('{"two": {"models": {}}}', encoding="utf-8")
        second = store.load(str(path))

        assert second is first
        assert "two" not in second

    def test_other_path_replaces_cache(self, store, write_catalog):
        first_path = write_catalog({"one": {"models": {}}}, name="a.json")
        second_path = write_catalog({"two": {"models": {}}}, name="b.json")

        store.load(first_path)
        data = store.load(second_path)

        assert list(data) == ["two"]
        assert store.cached_path == str(second_path)

    def test_clear_cache_forces_reread(self, store, write_catalog):
        path = write_catalog({"one": {"models": {}}})
        first = store.load(path)

        path.write_text('{"two": {"models": {}}}', encoding="utf-8")
        store.clear_cache()
        second = store.load(path)

        assert store.cached_path == str(path)
        assert second is not first
        assert list(second) == ["two"]

    def test_missing_file(self, store, tmp_path):
        missing = tmp_path / "absent.json"

        with pytest.raises(DataFileNotFoundError, match="does not exist") as excinfo:
            store.load(missing)

        assert isinstance(excinfo.value, NotFoundError)
        assert excinfo.value.context["path"] == str(missing)
        assert store.cached_path is None

    def test_unreadable_path(self, store, tmp_path):
        with pytest.raises(DataReadError, match="Failed to read") as excinfo:
            store.load(tmp_path)

        assert isinstance(excinfo.value, CatalogDataError)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert store.cached_path is None

    def test_invalid_json(self, store, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataParseError) as excinfo:
            store.load(path)

        assert isinstance(excinfo.value, CatalogDataError)
        assert excinfo.value.__cause__ is not None

    @pytest.mark.parametrize("content", ['"a string"', "[1, 2, 3]", "42", "null"])
    def test_non_object_top_level(self, store, tmp_path, content):
        path = tmp_path / "scalar.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(DataSchemaError, match="Invalid models.dev API data"):
            store.load(path)

    def test_failed_load_keeps_previous_cache(self, store, write_catalog, tmp_path):
        path = write_catalog({"one": {"models": {}}})
        store.load(path)

        with pytest.raises(DataFileNotFoundError):
            store.load(tmp_path / "absent.json")

        assert store.cached_path == str(path)


class TestDefaultStore:
    def test_load_data_shares_default_store(self, sample_catalog_path):
        first = load_data(sample_catalog_path)

        assert load_data(sample_catalog_path) is first
        assert store_module.default_store().cached_path == str(sample_catalog_path)

    def test_configured_data_path(self, sample_catalog_path, monkeypatch):
        monkeypatch.setenv("MODELSDEV_DATA_PATH", str(sample_catalog_path))
        reset_config()

        assert store_module.default_data_path() == str(sample_catalog_path)
        assert "acme" in CatalogStore().load()

    def test_bundled_path_without_configuration(self):
        assert store_module.default_data_path() == str(BUNDLED_DATA_PATH)


class TestProviderEntry:
    def test_known_provider(self):
        assert store_module.provider_entry({"acme": {"name": "Acme"}}, "acme") == {"name": "Acme"}

    def test_unknown_provider(self):
        assert store_module.provider_entry({"acme": {}}, "other") is None

    @pytest.mark.parametrize("entry", [["not", "a", "mapping"], "text", None])
    def test_entry_must_be_an_object(self, entry):
        with pytest.raises(DataSchemaError, match='provider "acme"') as excinfo:
            store_module.provider_entry({"acme": entry}, "acme")

        assert excinfo.value.context["provider"] == "acme"
