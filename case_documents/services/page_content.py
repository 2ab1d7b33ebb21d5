"""
Rendering metadata lookup for a single document page.
"""

from __future__ import annotations

import logging
from typing import Any

from case_documents.db.models import PageContent
from case_documents.db.search import DocumentDAL


class PageContentHelper:
    """Fetches the page image location, text and dimensions from the page metadata index."""

    def __init__(self, dal: DocumentDAL, *, logger: logging.Logger | None = None) -> None:
        self.dal = dal
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    async def get_page_content(self, document_id: str, page_number: Any) -> PageContent | None:
        self.logger.info("Retrieving page content for document %s page %s", document_id, page_number)
        try:
            metadata = await self.dal.get_page_metadata(document_id, page_number)
        except Exception as exc:
            self.logger.error(
                "Failed to retrieve page content for document %s page %s: %s",
                document_id,
                page_number,
                exc,
            )
            raise

        if metadata is None:
            return None

        return PageContent(
            correspondence_type=metadata.correspondence_type,
            page_count=metadata.page_count,
            page_num=metadata.page_num,
            image_uri=metadata.image_uri,
            text=metadata.text,
            page_width=metadata.page_width,
            page_height=metadata.page_height,
        )
