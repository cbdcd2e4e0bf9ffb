"""
Centralized database layer for WhatsMS.

This package provides a unified location for all database entities and repositories,
organized by table.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one module per table
- session.py: Global engine and session factory management
- utils.py: Database utility functions (URL handling, engine, session)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    mask_database_url,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "mask_database_url",
    "normalize_database_url",
]
