"""
Books API backend
GraphQL catalogue of books and literary awards
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
