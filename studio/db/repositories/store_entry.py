"""
Store entry repository.

Handles database operations for :class:`StoreEntry`. Methods never commit;
the caller owns the transaction so several keys can be written atomically.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from studio.models.store_entry import StoreEntry


class StoreEntryRepository:
    """Repository for StoreEntry database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get(self, key: str) -> Optional[StoreEntry]:
        """
        Get an entry by key.

        Args:
            key: Store key

        Returns:
            StoreEntry if found, None otherwise
        """
        return self.session.get(StoreEntry, key)

    def keys(self) -> list[str]:
        statement = select(StoreEntry.key).order_by(StoreEntry.key)
        return list(self.session.exec(statement).all())

    def put(self, key: str, value: str) -> StoreEntry:
        """
        Insert or replace the value stored under *key*.

        Args:
            key: Store key
            value: Encoded value

        Returns:
            The pending entry (flushed, not committed)
        """
        entry = self.get(key)
        now = datetime.datetime.now(datetime.timezone.utc)
        if entry:
            entry.value = value
            entry.updated_at = now
        else:
            entry = StoreEntry(key=key, value=value, updated_at=now)
        self.session.add(entry)
        self.session.flush()
        return entry

    def delete(self, key: str) -> bool:
        """
        Delete an entry by key.

        Returns:
            True if deleted, False if not found
        """
        entry = self.get(key)
        if entry:
            self.session.delete(entry)
            self.session.flush()
            return True
        return False
