"""
Keyword search over a case's document chunks.
"""

from __future__ import annotations

import logging
from typing import Any

from case_documents.config import SearchIndexConfig
from case_documents.db.models import SearchQuery
from case_documents.db.search import DocumentDAL
from case_documents.db.session import SearchClient
from case_documents.highlights.codec import attach_encoded_bounding_boxes
from case_documents.highlights.emphasis import emphasise_terms


class SearchService:
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

    async def get_search_results_by_keyword(
        self,
        keyword: str,
        page_number: Any,
        items_per_page: Any,
        crn: str,
        *,
        emphasise: bool = False,
    ) -> list[dict[str, Any]]:
        """
        Return one page of serialised hits for ``keyword`` within case ``crn``.

        Each hit's source gains ``bounding_box_base64`` for highlight links;
        with ``emphasise`` set the matched terms in ``chunk_text`` are wrapped
        in ``<strong>`` tags.
        """

        query = SearchQuery(
            keyword=keyword,
            case_reference_number=crn,
            page_number=page_number,
            items_per_page=items_per_page,
        )
        dal = DocumentDAL(self.config, self.client, query.case_reference_number, logger=self.logger)
        hits = await dal.search_chunks_by_keyword(query.keyword, query.page_number, query.items_per_page)

        results = []
        for hit in hits:
            data = hit.to_dict()
            data["source"] = attach_encoded_bounding_boxes([data["source"]])[0]
            results.append(data)

        if emphasise:
            results = emphasise_terms(results, [query.keyword])
        return results
