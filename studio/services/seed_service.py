"""
Seed service.

Populates a fresh store with default accounts, a starter program and the
exercise library. Seeding happens on first run only: once the meta record
is marked ``initialized`` an emptied collection stays empty, unless
``RESEED_ON_EMPTY`` asks for the legacy reseed-on-empty behaviour.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable

from studio.core.config import Settings, settings as default_settings
from studio.core.security import hash_password
from studio.db.store import EXERCISES_KEY, META_KEY, PROGRAMS_KEY, USERS_KEY, StoreAdapter
from studio.schemas.base import StudioModel
from studio.schemas.exercise import Exercise
from studio.schemas.program import Program, ProgramExercise
from studio.schemas.user import User

logger = logging.getLogger(__name__)


# ======================================================================
# Default records
# ======================================================================

def default_users(settings: Settings = default_settings) -> list[User]:
    return [
        User(username=settings.SEED_TRAINER_USERNAME, password=hash_password(settings.SEED_TRAINER_PASSWORD),
             role="trainer", full_name="Studio Manager", ),
        User(username=settings.SEED_CLIENT_USERNAME, password=hash_password(settings.SEED_CLIENT_PASSWORD),
             role="client", full_name="Demo Client", ),
    ]


def default_programs() -> list[Program]:
    return [
        Program(
            name="Basic Program",
            description="General program for improving fitness",
            exercises=[
                ProgramExercise(name="Squat", sets=3, reps=12, rest=60, notes="Keep your back straight",
                                muscle_group="legs"),
                ProgramExercise(name="Bench Press", sets=3, reps=10, rest=60, muscle_group="chest"),
            ],
        )
    ]


def default_exercises() -> list[Exercise]:
    return [
        Exercise(name="Squat", muscle_group="legs", equipment="barbell"),
        Exercise(name="Bench Press", muscle_group="chest", equipment="barbell"),
        Exercise(name="Deadlift", muscle_group="back", equipment="barbell"),
        Exercise(name="Shoulder Press", muscle_group="shoulders", equipment="dumbbells"),
        Exercise(name="Biceps Curl", muscle_group="arms", equipment="dumbbells"),
        Exercise(name="Plank", muscle_group="core", equipment="bodyweight"),
    ]


# ======================================================================
# Seeding
# ======================================================================

def _seed_factories(settings: Settings) -> dict[str, Callable[[], list[StudioModel]]]:
    return {
        USERS_KEY: lambda: default_users(settings),
        PROGRAMS_KEY: default_programs,
        EXERCISES_KEY: default_exercises,
    }


def is_initialized(store: StoreAdapter) -> bool:
    return bool(store.load_object(META_KEY).get("initialized"))


def ensure_seeded(store: StoreAdapter, settings: Settings = default_settings) -> list[str]:
    """Seed every empty collection that has defaults.

    Seeds and the ``initialized`` flag are written in one transaction.

    Returns:
        Keys that were seeded (empty when nothing was written)

    Raises:
        StoreWriteError: If the seed transaction fails
    """
    if not settings.SEED_DEFAULTS:
        return []

    initialized = is_initialized(store)
    if initialized and not settings.RESEED_ON_EMPTY:
        return []

    pending: dict[str, object] = {}
    for key, factory in _seed_factories(settings).items():
        if not store.load(key):
            pending[key] = factory()

    if not initialized:
        pending[META_KEY] = {
            "initialized": True,
            "seededAt": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }

    store.save_many(pending)
    seeded = [key for key in pending if key != META_KEY]
    if seeded:
        logger.info(f"Seeded default data for {seeded}")
    return seeded
