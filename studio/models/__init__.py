"""SQLModel database models."""

from studio.models.store_entry import StoreEntry

__all__ = [
    "StoreEntry",
]
