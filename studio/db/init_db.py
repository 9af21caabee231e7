"""
Database initialization.

Creates the key-value table.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Initialize database schema.

    Safe to call on every start: existing tables are left untouched.
    """

    # Import all models so SQLModel.metadata has them
    from studio.models.store_entry import StoreEntry  # noqa: F401

    logger.debug("Creating store tables on %s", engine.url)
    SQLModel.metadata.create_all(engine)
