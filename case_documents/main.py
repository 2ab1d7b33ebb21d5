"""
FastAPI entrypoint for the case documents API.

Run with ``uvicorn --factory case_documents.main:create_app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from case_documents.api import router
from case_documents.api.routes import error_response, handle_service_error
from case_documents.config import Settings, get_settings
from case_documents.db.session import SearchClient, create_search_client
from case_documents.errors import DocumentServiceError

logger = logging.getLogger(__name__)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    detail = "; ".join(error.get("msg", "Invalid request") for error in exc.errors()) or "Invalid request"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, detail)
    return error_response(400, detail)


def create_app(settings: Settings | None = None, search_client: SearchClient | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    # Missing index configuration halts startup here rather than failing per request.
    index_config = settings.index_config().validate()
    owns_client = search_client is None
    client = search_client or create_search_client(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_client:
            await client.close()

    app = FastAPI(title="Case Documents", version="0.1.0", lifespan=lifespan)
    app.include_router(router)
    app.add_exception_handler(DocumentServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.state.settings = settings
    app.state.index_config = index_config
    app.state.search_client = client
    logger.info(
        "Serving chunks from index %s and page metadata from %s",
        index_config.chunk_index,
        index_config.page_metadata_index,
    )
    return app
