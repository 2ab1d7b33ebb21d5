"""
FastAPI routes for keyword search, page metadata and page chunks.
"""

from __future__ import annotations

import logging
import uuid
from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, Header, Path, Query, Request
from fastapi.responses import JSONResponse

from case_documents.errors import DocumentServiceError, InvalidArgument
from case_documents.services import PageChunksService, PageMetadataService, SearchService
from case_documents.validation import parse_page_number, validate_crn, validate_document_params

logger = logging.getLogger(__name__)

router = APIRouter()


def get_app_state(request: Request):
    return request.app.state


def error_response(status_code: int, detail: str) -> JSONResponse:
    try:
        title = HTTPStatus(status_code).phrase
    except ValueError:
        title = "Error"
    return JSONResponse(
        status_code=status_code,
        content={"errors": [{"status": status_code, "title": title, "detail": detail}]},
    )


async def handle_service_error(request: Request, exc: DocumentServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


@router.get("/healthz")
async def healthz():
    return {"status": "ok"}


@router.get("/search/{query}/{page_number}/{items_per_page}")
async def search_chunks(
    query: str = Path(..., min_length=2, max_length=200),
    page_number: str = Path(...),
    items_per_page: str = Path(...),
    crn: Optional[str] = Header(None, alias="On-Behalf-Of"),
    emphasise: bool = Query(False),
    state=Depends(get_app_state),
):
    validate_crn(crn)
    size = parse_page_number(items_per_page)
    if size > state.settings.search_items_per_page_max:
        raise InvalidArgument(
            f"Items per page must be {state.settings.search_items_per_page_max} or fewer"
        )
    logger.info("Querying %s items per page %s for %r", size, page_number, query)
    service = SearchService(state.index_config, state.search_client)
    results = await service.get_search_results_by_keyword(
        query, page_number, size, crn, emphasise=emphasise
    )
    return {
        "data": {
            "type": "search-results",
            "id": str(uuid.uuid4()),
            "attributes": {"query": query, "results": results},
        }
    }


@router.get("/document/{document_id}/page/{page_number}/metadata")
async def get_page_metadata(
    document_id: str,
    page_number: str,
    crn: Optional[str] = Query(None),
    state=Depends(get_app_state),
):
    document_id, page_num, crn = validate_document_params(document_id, page_number, crn)
    service = PageMetadataService(state.index_config, state.search_client)
    metadata = await service.get_combined_metadata(document_id, page_num, crn)
    return {"data": metadata.to_dict()}


@router.get("/document/{document_id}/page/{page_number}/chunks")
async def get_page_chunks(
    document_id: str,
    page_number: str,
    crn: Optional[str] = Query(None),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    align: Optional[str] = Query(None),
    state=Depends(get_app_state),
):
    document_id, page_num, crn = validate_document_params(document_id, page_number, crn)
    service = PageChunksService(state.index_config, state.search_client)
    chunks = await service.get_page_chunks(
        document_id, page_num, crn, search_term, align=align == "on"
    )
    return {
        "data": {
            "type": "page-chunks",
            "id": f"{document_id}-{page_num}",
            "attributes": {"chunks": [chunk.to_dict() for chunk in chunks]},
        }
    }
