"""
Request-scoped services composed over the document DAL.
"""

from .chunks import PageChunksService
from .metadata import PageMetadataService
from .page_content import PageContentHelper
from .search import SearchService

__all__ = ["PageChunksService", "PageContentHelper", "PageMetadataService", "SearchService"]
