"""
Page chunk retrieval for overlay rendering.
"""

from __future__ import annotations

import logging
from typing import Any

from case_documents.config import SearchIndexConfig
from case_documents.db.models import ChunkSummary
from case_documents.db.search import DocumentDAL
from case_documents.db.session import SearchClient
from case_documents.errors import DocumentServiceError, SearchExecutionError, status_code_of
from case_documents.highlights.alignment import determine_highlight_alignment_strategy
from case_documents.validation import validate_document_params


class PageChunksService:
    def __init__(
        self,
        config: SearchIndexConfig,
        client: SearchClient,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.client = client
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    async def get_page_chunks(
        self,
        document_id: str,
        page_number: Any,
        crn: str,
        search_term: str | None = None,
        *,
        align: bool = False,
    ) -> list[ChunkSummary]:
        """
        Return the bounding boxes of a page's chunks, optionally filtered by
        ``search_term``. With ``align`` set, overlapping boxes are resolved
        before they are returned.

        A failed index call surfaces as ``SearchExecutionError`` with its
        gateway status (502); only failures outside the index call fall back
        to 500.
        """

        document_id, page_num, crn = validate_document_params(document_id, page_number, crn)
        dal = DocumentDAL(self.config, self.client, crn, logger=self.logger)

        try:
            chunks = await dal.get_chunks_for_page(document_id, page_num, search_term)
        except Exception as exc:
            self.logger.error(
                "Failed to retrieve page chunks for document %s page %d (search_term=%r): %s",
                document_id,
                page_num,
                search_term,
                exc,
            )
            if isinstance(exc, DocumentServiceError):
                raise
            raise SearchExecutionError(str(exc), status_code=status_code_of(exc)) from exc

        summaries = [ChunkSummary.from_chunk(chunk) for chunk in chunks]
        return determine_highlight_alignment_strategy(align, summaries)
