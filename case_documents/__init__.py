"""
Document chunk retrieval and highlight overlap resolution for case documents.
"""

__version__ = "0.1.0"
