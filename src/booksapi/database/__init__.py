"""
Database module for the Books API backend
"""

from .connection import (
    check_database_connection,
    get_async_engine,
    get_async_session,
    init_database,
    reset_database,
)

__all__ = [
    "check_database_connection",
    "get_async_engine",
    "get_async_session",
    "init_database",
    "reset_database",
]
