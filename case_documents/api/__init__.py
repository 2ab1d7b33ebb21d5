"""
HTTP surface for the case documents API.
"""

from .routes import router

__all__ = ["router"]
