"""
Search index access: query builders, transport and the document DAL.
"""

from .search import DocumentDAL
from .session import SearchClient, SearchIndexClient, create_search_client

__all__ = ["DocumentDAL", "SearchClient", "SearchIndexClient", "create_search_client"]
