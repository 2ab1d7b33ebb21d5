"""
Combines rendering metadata and correspondence metadata for one page.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from case_documents.config import SearchIndexConfig
from case_documents.db.models import CombinedMetadata
from case_documents.db.search import DocumentDAL
from case_documents.db.session import SearchClient
from case_documents.errors import (
    DocumentServiceError,
    NotFound,
    SearchExecutionError,
    status_code_of,
)
from case_documents.services.page_content import PageContentHelper
from case_documents.validation import parse_page_number

NOT_FOUND_MESSAGE = "Page metadata not found"


class PageMetadataService:
    """
    Builds the ``CombinedMetadata`` record a page view needs.

    The rendering lookup runs first; the correspondence lookup is only
    attempted once it has succeeded. An index failure in the rendering lookup
    keeps its gateway status (502); any failure in the correspondence lookup
    is reported as 500.
    """

    def __init__(
        self,
        config: SearchIndexConfig,
        client: SearchClient,
        *,
        logger: logging.Logger | None = None,
        content_helper_factory: Callable[[DocumentDAL], PageContentHelper] | None = None,
    ) -> None:
        self.config = config
        self.client = client
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.content_helper_factory = content_helper_factory or (
            lambda dal: PageContentHelper(dal, logger=self.logger)
        )

    def _dal(self, crn: str) -> DocumentDAL:
        return DocumentDAL(self.config, self.client, crn, logger=self.logger)

    async def get_combined_metadata(self, document_id: str, page_number: Any, crn: str) -> CombinedMetadata:
        requested_page = parse_page_number(page_number)
        dal = self._dal(crn)
        helper = self.content_helper_factory(dal)

        try:
            page_content = await helper.get_page_content(document_id, requested_page)
        except Exception as exc:
            self.logger.error(
                "Failed to retrieve page metadata for document %s page %d: %s",
                document_id,
                requested_page,
                exc,
            )
            if isinstance(exc, DocumentServiceError):
                raise
            raise SearchExecutionError(str(exc), status_code=status_code_of(exc)) from exc

        if page_content is None:
            raise NotFound(NOT_FOUND_MESSAGE)

        try:
            full_metadata = await dal.get_page_metadata(document_id, requested_page)
        except Exception as exc:
            self.logger.error(
                "Failed to retrieve full page metadata for document %s page %d: %s",
                document_id,
                requested_page,
                exc,
            )
            raise SearchExecutionError(
                str(exc), index=getattr(exc, "index", None), status_code=500
            ) from exc

        if full_metadata is None:
            raise NotFound(NOT_FOUND_MESSAGE)

        # page_num comes back from the index, so it is checked again
        page_num = parse_page_number(page_content.page_num)

        return CombinedMetadata(
            correspondence_type=full_metadata.correspondence_type or None,
            page_count=page_content.page_count,
            page_num=page_num,
            image_uri=page_content.image_uri,
            text=page_content.text,
        )
