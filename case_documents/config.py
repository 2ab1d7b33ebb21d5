"""
Application configuration helpers.
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from case_documents.errors import ConfigurationError


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    opensearch_url: str = Field("http://localhost:9200", alias="OPENSEARCH_URL")
    opensearch_index_chunks_name: str | None = Field(None, alias="OPENSEARCH_INDEX_CHUNKS_NAME")
    opensearch_index_page_metadata_name: str = Field(
        "page_metadata", alias="OPENSEARCH_INDEX_PAGE_METADATA_NAME"
    )
    opensearch_username: str | None = Field(None, alias="OPENSEARCH_USERNAME")
    opensearch_password: str | None = Field(None, alias="OPENSEARCH_PASSWORD")
    opensearch_timeout: float = Field(30.0, alias="OPENSEARCH_TIMEOUT")
    search_items_per_page_max: int = Field(100, alias="SEARCH_ITEMS_PER_PAGE_MAX")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def index_config(self) -> "SearchIndexConfig":
        return SearchIndexConfig(
            chunk_index=self.opensearch_index_chunks_name,
            page_metadata_index=self.opensearch_index_page_metadata_name,
        )


@dataclass(frozen=True, slots=True)
class SearchIndexConfig:
    """Index names the DAL queries. Read-only for the lifetime of the process."""

    chunk_index: str | None
    page_metadata_index: str = "page_metadata"

    def validate(self) -> "SearchIndexConfig":
        if not self.chunk_index:
            raise ConfigurationError('Setting "OPENSEARCH_INDEX_CHUNKS_NAME" must be set')
        if not self.page_metadata_index:
            raise ConfigurationError('Setting "OPENSEARCH_INDEX_PAGE_METADATA_NAME" must not be empty')
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
