from __future__ import annotations

from typing import Any

import pytest

from case_documents.config import SearchIndexConfig, Settings

CRN = "26-711111"
DOCUMENT_ID = "3f2504e0-4f89-41d3-9a0c-0305e82c3301"


class FakeSearchClient:
    """In-memory stand-in for the index: returns queued responses and records every query."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, dict]] = []

    async def search(self, index: str, body: dict) -> dict:
        self.calls.append((index, body))
        response = self.responses.pop(0) if self.responses else {"hits": {"hits": []}}
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        pass


def hits_response(*sources: dict, wrapped: bool = False) -> dict:
    hits = [
        {"_id": f"hit-{idx}", "_score": 1.0, "_source": source}
        for idx, source in enumerate(sources)
    ]
    body = {"hits": {"total": {"value": len(hits)}, "hits": hits}}
    return {"body": body} if wrapped else body


def page_metadata_source(**overrides: Any) -> dict:
    source = {
        "source_doc_id": DOCUMENT_ID,
        "page_num": 1,
        "page_count": 50,
        "page_id": "page-1",
        "page_width": 1240,
        "page_height": 1754,
        "s3_page_image_s3_uri": "s3://bucket-name/26-711111/test-doc/pages/1.png",
        "text": "Sample page text content",
        "correspondence_type": "TC19 - ADDITIONAL INFO REQUEST",
    }
    source.update(overrides)
    return source


def chunk_source(index: int, **box: float) -> dict:
    return {
        "chunk_id": f"chunk-{index}",
        "chunk_type": "LAYOUT_TEXT",
        "chunk_index": index,
        "chunk_text": f"chunk text {index}",
        "bounding_box": {"top": 0.0, "left": 0.0, "width": 0.1, "height": 0.1, **box},
    }


@pytest.fixture()
def index_config() -> SearchIndexConfig:
    return SearchIndexConfig(chunk_index="case-chunks", page_metadata_index="page_metadata")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        OPENSEARCH_URL="http://opensearch.test:9200",
        OPENSEARCH_INDEX_CHUNKS_NAME="case-chunks",
        SEARCH_ITEMS_PER_PAGE_MAX=50,
    )
