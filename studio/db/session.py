"""
Database session management.

Provides the SQLModel engine used by the key-value store.
"""

from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from studio.core.config import settings


def make_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the key-value store.

    Args:
        url: SQLAlchemy URL, defaults to ``settings.STORE_URL``
        echo: Log SQL statements, defaults to ``settings.DEBUG``

    Returns:
        SQLAlchemy engine
    """
    url = url or settings.STORE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=settings.DEBUG if echo is None else echo, connect_args=connect_args)
