"""
Query body builders and response parsing for the search index.
"""

from __future__ import annotations

from typing import Any, Mapping

PAGE_METADATA_SOURCE_FIELDS = [
    "source_doc_id",
    "page_num",
    "page_count",
    "page_id",
    "page_width",
    "page_height",
    "s3_page_image_s3_uri",
    "text",
    "correspondence_type",
]
PAGE_CHUNK_SOURCE_FIELDS = ["chunk_id", "bounding_box", "chunk_type", "chunk_index", "chunk_text"]


def pagination_window(page_number: int, items_per_page: int) -> tuple[int, int]:
    """Return ``(from, size)`` for a 1-based results page."""
    return items_per_page * (page_number - 1), items_per_page


def keyword_chunks_query(
    keyword: str,
    case_reference_number: str,
    *,
    page_number: int,
    items_per_page: int,
) -> dict[str, Any]:
    """Both clauses are required matches, not a ranked OR."""
    offset, size = pagination_window(page_number, items_per_page)
    return {
        "from": offset,
        "size": size,
        "query": {
            "bool": {
                "must": [
                    {"match": {"chunk_text": keyword}},
                    {"match": {"case_ref": case_reference_number}},
                ]
            }
        },
    }


def page_metadata_query(document_id: str, page_number: int) -> dict[str, Any]:
    return {
        "query": {
            "bool": {
                "must": [
                    {"match": {"source_doc_id": document_id}},
                    {"match": {"page_num": page_number}},
                ]
            }
        },
        "_source": list(PAGE_METADATA_SOURCE_FIELDS),
    }


def page_chunks_query(
    document_id: str,
    page_number: int,
    case_reference_number: str,
    search_term: str | None = None,
) -> dict[str, Any]:
    must: list[dict[str, Any]] = [
        {"match": {"source_doc_id": document_id}},
        {"match": {"page_number": page_number}},
        {"match": {"case_ref": case_reference_number}},
    ]
    if search_term:
        must.append({"match": {"chunk_text": search_term}})

    return {
        "query": {"bool": {"must": must}},
        "_source": list(PAGE_CHUNK_SOURCE_FIELDS),
        "sort": [{"chunk_index": {"order": "asc"}}],
    }


def extract_hits(response: Any) -> list[Mapping[str, Any]]:
    """
    Pull the list of raw hits out of an index response.

    Handles the client-wrapped form ``{"body": {"hits": {"hits": [...]}}}``,
    the bare body ``{"hits": {"hits": [...]}}`` and a ``hits`` value that is
    already a list. Anything else yields no hits.
    """

    if not isinstance(response, Mapping):
        return []
    body = response.get("body", response)
    if not isinstance(body, Mapping):
        return []

    hits = body.get("hits")
    if isinstance(hits, Mapping):
        hits = hits.get("hits")
    if not isinstance(hits, list):
        return []
    return [hit for hit in hits if isinstance(hit, Mapping)]
