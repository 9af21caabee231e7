"""Database repositories."""

from studio.db.repositories.store_entry import StoreEntryRepository

__all__ = [
    "StoreEntryRepository",
]
