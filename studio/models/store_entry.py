"""
Store entry database model.

One row per persisted collection: the collection key and its JSON text.
"""

import datetime

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class StoreEntry(SQLModel, table=True):
    """A single key-value pair of the local store.

    ``value`` holds the JSON encoding of a whole collection (or of the
    meta record); the store never stores partial collections.
    """

    __tablename__ = "store_entries"

    key: str = Field(primary_key=True, max_length=255)
    value: str = Field(sa_column=Column(Text, nullable=False))

    # Timestamps
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
