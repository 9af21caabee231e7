"""
Persistent key-value store for studio collections.

Every collection (users, programs, ...) is stored as one JSON array under a
fixed key. Reads never raise: a missing key or corrupt JSON is read as an
empty collection, and a record that does not validate is skipped without
being lost. Writes are synchronous and raise
:class:`~studio.core.exceptions.StoreWriteError` on failure.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from studio.core.exceptions import StoreWriteError
from studio.db.init_db import init_db
from studio.db.repositories.store_entry import StoreEntryRepository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

USERS_KEY = "studio.users"
PROGRAMS_KEY = "studio.programs"
EXERCISES_KEY = "studio.exercises"
WORKOUTS_KEY = "studio.workouts"
SESSIONS_KEY = "studio.sessions"
GROUPS_KEY = "studio.groups"
PRODUCTS_KEY = "studio.products"
META_KEY = "studio.meta"

COLLECTION_KEYS = [USERS_KEY, PROGRAMS_KEY, EXERCISES_KEY, WORKOUTS_KEY, SESSIONS_KEY, GROUPS_KEY, PRODUCTS_KEY, ]


def encode(value: Any) -> str:
    """Encode a collection (or meta object) as JSON text.

    Pydantic records are dumped in JSON mode with their camelCase aliases.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True)
    elif isinstance(value, (list, tuple)):
        value = [item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item
                 for item in value]
    return json.dumps(value, ensure_ascii=False)


class StoreAdapter:
    """Load/save collections against the ``store_entries`` table."""

    def __init__(self, engine: Engine, create_tables: bool = True):
        self.engine = engine
        self._held: dict[str, list] = {}
        if create_tables:
            init_db(engine)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _read(self, key: str) -> Optional[str]:
        try:
            with Session(self.engine) as session:
                entry = StoreEntryRepository(session).get(key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            logger.warning(f"Could not read '{key}', treating it as absent: {e}")
            return None

    def _decode(self, key: str, expected: type) -> Any:
        raw = self._read(key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt JSON under '{key}', treating it as absent: {e}")
            return None
        if not isinstance(value, expected):
            logger.warning(f"Unexpected {type(value).__name__} under '{key}', treating it as absent")
            return None
        return value

    def load(self, key: str) -> list:
        """Return the collection stored under *key*, or ``[]``."""
        value = self._decode(key, list)
        return value if value is not None else []

    def load_models(self, key: str, model: Type[M]) -> list[M]:
        """Return the collection under *key* validated as *model* records.

        Records that fail validation are skipped and held back. They are
        written back unchanged, after the valid records, the next time
        *key* is saved through this adapter.
        """
        adapter = TypeAdapter(model)
        records: list[M] = []
        held: list = []
        for index, item in enumerate(self.load(key)):
            try:
                records.append(adapter.validate_python(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {model.__name__} record {index} under '{key}': {e}")
                held.append(item)
        if held:
            self._held[key] = held
        else:
            self._held.pop(key, None)
        return records

    def held_records(self, key: str) -> list:
        """Raw records under *key* that the last :meth:`load_models` skipped."""
        return list(self._held.get(key, []))

    def load_object(self, key: str) -> dict:
        """Return the JSON object stored under *key*, or ``{}``."""
        value = self._decode(key, dict)
        return value if value is not None else {}

    def keys(self) -> list[str]:
        with Session(self.engine) as session:
            return StoreEntryRepository(session).keys()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _with_held(self, key: str, value: Any) -> Any:
        held = self._held.get(key)
        if held and isinstance(value, (list, tuple)):
            return [*value, *held]
        return value

    def save(self, key: str, collection: Iterable | Mapping) -> None:
        """Write one collection."""
        self.save_many({key: collection})

    def save_many(self, items: Mapping[str, Any]) -> None:
        """Write several keys in a single transaction.

        Either every key is written or none is.

        Raises:
            StoreWriteError: If the transaction fails
        """
        if not items:
            return
        encoded = {key: encode(self._with_held(key, value)) for key, value in items.items()}
        with Session(self.engine) as session:
            repository = StoreEntryRepository(session)
            try:
                for key, value in encoded.items():
                    repository.put(key, value)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Store write failed for {list(encoded)}: {e}")
                raise StoreWriteError(encoded.keys(), e) from e
        logger.debug(f"Saved {list(encoded)}")

    def delete(self, key: str) -> bool:
        """Remove *key* from the store. Returns False if it was absent."""
        with Session(self.engine) as session:
            try:
                deleted = StoreEntryRepository(session).delete(key)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Store delete failed for '{key}': {e}")
                raise StoreWriteError([key], e) from e
        return deleted
