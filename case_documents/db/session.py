"""
HTTP connection utilities for the OpenSearch index.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from case_documents.config import Settings

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    async def search(self, index: str, body: dict[str, Any]) -> dict[str, Any]: ...


class SearchIndexClient:
    """Thin async wrapper around the ``_search`` endpoint."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def search(self, index: str, body: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s/_search", index)
        response = await self.http_client.post(f"/{index}/_search", json=body)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        await self.http_client.aclose()


def create_search_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> SearchIndexClient:
    """Build a client bound to the configured cluster. One per process."""
    auth = None
    if settings.opensearch_username and settings.opensearch_password:
        auth = httpx.BasicAuth(settings.opensearch_username, settings.opensearch_password)

    http_client = httpx.AsyncClient(
        base_url=settings.opensearch_url.rstrip("/"),
        auth=auth,
        timeout=settings.opensearch_timeout,
        headers={"Content-Type": "application/json"},
        transport=transport,
    )
    return SearchIndexClient(http_client)
