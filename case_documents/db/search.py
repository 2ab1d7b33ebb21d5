"""
Document data access over the OpenSearch index.
"""

from __future__ import annotations

import logging
from typing import Any

from case_documents.config import SearchIndexConfig
from case_documents.db import queries
from case_documents.db.models import Chunk, PageMetadata, SearchHit
from case_documents.db.session import SearchClient
from case_documents.errors import SearchExecutionError
from case_documents.validation import parse_page_number, validate_crn


class DocumentDAL:
    """
    Read operations over document chunks and page metadata, scoped to one case.

    The DAL is the only component that talks to the index. Every query it
    issues carries the bound case reference number or a document id, and
    every index failure is re-raised as ``SearchExecutionError``.
    """

    def __init__(
        self,
        config: SearchIndexConfig,
        client: SearchClient,
        case_reference_number: str,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config.validate()
        self.client = client
        self.case_reference_number = validate_crn(case_reference_number)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def chunk_index(self) -> str:
        return self.config.chunk_index  # type: ignore[return-value]

    async def _execute(self, index: str, body: dict[str, Any], context: str) -> list:
        try:
            response = await self.client.search(index, body)
        except Exception as exc:
            self.logger.error("Search error on index %s (%s): %s", index, context, exc)
            raise SearchExecutionError(
                f'Failed to execute search query on index "{index}" ({context}): {exc}',
                index=index,
            ) from exc
        return queries.extract_hits(response)

    async def search_chunks_by_keyword(
        self, keyword: str, page_number: int, items_per_page: int
    ) -> list[SearchHit]:
        """Return one page of chunks in this case whose text matches ``keyword``."""
        page_number = parse_page_number(page_number)
        items_per_page = parse_page_number(items_per_page)
        body = queries.keyword_chunks_query(
            keyword,
            self.case_reference_number,
            page_number=page_number,
            items_per_page=items_per_page,
        )
        self.logger.info(
            "Performing search on %s: keyword=%r case=%s page=%s size=%s",
            self.chunk_index,
            keyword,
            self.case_reference_number,
            page_number,
            items_per_page,
        )
        hits = await self._execute(self.chunk_index, body, "keyword search")
        self.logger.info("Search returned %d hits", len(hits))
        if not hits:
            self.logger.warning(
                "No results found for keyword %r in case %s", keyword, self.case_reference_number
            )
        return [SearchHit.from_hit(hit) for hit in hits]

    async def get_page_metadata(self, document_id: str, page_number: Any) -> PageMetadata | None:
        page_num = parse_page_number(page_number)
        index = self.config.page_metadata_index
        self.logger.info("Querying page metadata for document %s page %d", document_id, page_num)

        hits = await self._execute(
            index,
            queries.page_metadata_query(document_id, page_num),
            f'page metadata for document "{document_id}" page "{page_num}"',
        )
        if not hits:
            self.logger.info("Page metadata not found for document %s page %d", document_id, page_num)
            return None

        hit = hits[0]
        self.logger.info("Page metadata found (page_id=%s)", hit.get("_id"))
        return PageMetadata.from_source(hit.get("_source") or {})

    async def get_chunks_for_page(
        self, document_id: str, page_number: Any, search_term: str | None = None
    ) -> list[Chunk]:
        """Chunks on one page in ascending ``chunk_index`` order, optionally filtered by text."""
        page_num = parse_page_number(page_number)
        body = queries.page_chunks_query(
            document_id, page_num, self.case_reference_number, search_term
        )
        hits = await self._execute(
            self.chunk_index,
            body,
            f'page chunks for document "{document_id}" page "{page_num}"',
        )
        self.logger.info(
            "Retrieved %d chunks for document %s page %d (search_term=%r)",
            len(hits),
            document_id,
            page_num,
            search_term,
        )
        if not hits:
            self.logger.warning(
                "No chunks found for document %s page %d in case %s",
                document_id,
                page_num,
                self.case_reference_number,
            )
        return [Chunk.from_source(hit.get("_source") or {}) for hit in hits]
