import pytest

from case_documents.config import SearchIndexConfig, Settings, get_settings
from case_documents.errors import ConfigurationError, ErrorKind
from case_documents.main import create_app

from conftest import FakeSearchClient


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("OPENSEARCH_URL", "http://search.internal:9200")
    monkeypatch.setenv("OPENSEARCH_INDEX_CHUNKS_NAME", "chunks-v2")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.opensearch_url == "http://search.internal:9200"
        assert settings.index_config() == SearchIndexConfig(chunk_index="chunks-v2", page_metadata_index="page_metadata")
    finally:
        get_settings.cache_clear()


def test_missing_chunk_index_is_a_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        SearchIndexConfig(chunk_index="").validate()
    assert excinfo.value.kind is ErrorKind.CONFIGURATION


def test_app_refuses_to_start_without_chunk_index(monkeypatch):
    monkeypatch.delenv("OPENSEARCH_INDEX_CHUNKS_NAME", raising=False)
    settings = Settings(_env_file=None)
    with pytest.raises(ConfigurationError, match="OPENSEARCH_INDEX_CHUNKS_NAME"):
        create_app(settings, search_client=FakeSearchClient())
