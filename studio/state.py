"""
Application state container.

:class:`StudioState` holds the in-memory collections and the logged-in user,
dispatches every request to a pure handler in :mod:`studio.services`, and
writes changed collections through to the store.

Each method ends in a single :meth:`StudioState._commit` call. It persists
every collection that changed in one transaction, and only after that write
succeeds swaps the new collections in and notifies subscribers. A failed
write therefore leaves both the store and the in-memory state as they were.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from studio.core.config import Settings, settings as default_settings
from studio.core.exceptions import NotAuthenticatedError, StoreWriteError
from studio.db.store import (EXERCISES_KEY, GROUPS_KEY, PRODUCTS_KEY, PROGRAMS_KEY, SESSIONS_KEY, USERS_KEY,
                             WORKOUTS_KEY, StoreAdapter, )
from studio.schemas.exercise import Exercise
from studio.schemas.product import Product
from studio.schemas.program import Program
from studio.schemas.result import LoginResult, OperationResult
from studio.schemas.schedule import ClassSession, Group
from studio.schemas.user import MetricEntry, ProfileUpdate, Role, User
from studio.schemas.workout import ExerciseResult, WorkoutLog
from studio.services import (auth_service, exercise_service, metrics_service, product_service, profile_service,
                             program_service, schedule_service, seed_service, workout_service, )

logger = logging.getLogger(__name__)

ChangeListener = Callable[[set[str]], None]

# attribute name -> (store key, record type)
COLLECTIONS: dict[str, tuple[str, type]] = {
    "users": (USERS_KEY, User),
    "programs": (PROGRAMS_KEY, Program),
    "exercises": (EXERCISES_KEY, Exercise),
    "workouts": (WORKOUTS_KEY, WorkoutLog),
    "sessions": (SESSIONS_KEY, ClassSession),
    "groups": (GROUPS_KEY, Group),
    "products": (PRODUCTS_KEY, Product),
}

SAVE_FAILED = "Could not save changes"
NOT_AUTHENTICATED = "Not authenticated"


class StudioState:
    """In-memory studio data with write-through persistence."""

    def __init__(self, store: StoreAdapter, users: Optional[list[User]] = None,
                 programs: Optional[list[Program]] = None, exercises: Optional[list[Exercise]] = None,
                 workouts: Optional[list[WorkoutLog]] = None, sessions: Optional[list[ClassSession]] = None,
                 groups: Optional[list[Group]] = None, products: Optional[list[Product]] = None, ):
        self.store = store
        self.users: list[User] = users or []
        self.programs: list[Program] = programs or []
        self.exercises: list[Exercise] = exercises or []
        self.workouts: list[WorkoutLog] = workouts or []
        self.sessions: list[ClassSession] = sessions or []
        self.groups: list[Group] = groups or []
        self.products: list[Product] = products or []
        self.current_user_id: Optional[str] = None
        self._listeners: list[ChangeListener] = []

    @classmethod
    def load(cls, store: StoreAdapter, settings: Settings = default_settings) -> StudioState:
        """
        Seed a fresh store if needed, then load every collection.

        Raises:
            StoreWriteError: If seeding cannot be written
        """
        seed_service.ensure_seeded(store, settings)
        loaded = {name: store.load_models(key, model) for name, (key, model) in COLLECTIONS.items()}
        return cls(store, **loaded)

    # ------------------------------------------------------------------
    # Session pointer
    # ------------------------------------------------------------------

    @property
    def current_user(self) -> Optional[User]:
        """The logged-in user, read from the users collection."""
        if not self.current_user_id:
            return None
        return next((u for u in self.users if u.id == self.current_user_id), None)

    def _require_user(self) -> User:
        user = self.current_user
        if not user:
            raise NotAuthenticatedError(NOT_AUTHENTICATED)
        return user

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call *listener* with the names of changed collections after each commit.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, **changes: list) -> bool:
        """Persist and apply changed collections. Returns False if the write failed."""
        changed = {name: value for name, value in changes.items() if value is not getattr(self, name)}
        if not changed:
            return True
        try:
            self.store.save_many({COLLECTIONS[name][0]: value for name, value in changed.items()})
        except StoreWriteError as e:
            logger.error(f"Discarding change to {sorted(changed)}: {e}")
            return False
        for name, value in changed.items():
            setattr(self, name, value)
        for listener in list(self._listeners):
            listener(set(changed))
        return True

    def _apply(self, result: OperationResult, **changes: list) -> OperationResult:
        if not self._commit(**changes):
            return OperationResult.fail(SAVE_FAILED)
        return result

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def login(self, username: str, password: str) -> LoginResult:
        result = auth_service.login(self.users, username, password)
        if result.success and result.user:
            self.current_user_id = result.user.id
        return result

    def logout(self) -> None:
        self.current_user_id = None

    def register(self, username: str, password: str, role: Role = "client") -> OperationResult:
        users, result = auth_service.register(self.users, username, password, role)
        return self._apply(result, users=users)

    # ------------------------------------------------------------------
    # Programs and exercise library
    # ------------------------------------------------------------------

    def add_program(self, name: str, description: str = "", difficulty: Optional[str] = None,
                    duration: Optional[str] = None, ) -> OperationResult:
        programs, result = program_service.add_program(self.programs, name, description, difficulty, duration)
        return self._apply(result, programs=programs)

    def update_program(self, program_id: str, program: Program) -> OperationResult:
        programs = program_service.update_program(self.programs, program_id, program)
        return self._apply(OperationResult.ok(record_id=program_id), programs=programs)

    def remove_program(self, program_id: str) -> OperationResult:
        programs = program_service.remove_program(self.programs, program_id)
        return self._apply(OperationResult.ok(record_id=program_id), programs=programs)

    def assign_program(self, username: str, program_id: Optional[str]) -> OperationResult:
        users = program_service.assign_program(self.users, username, program_id)
        return self._apply(OperationResult.ok(record_id=program_id), users=users)

    def assigned_program(self) -> Optional[Program]:
        user = self.current_user
        return program_service.assigned_program(user, self.programs) if user else None

    def add_exercise(self, name: str, muscle_group: str = "", equipment: str = "") -> OperationResult:
        exercises, result = exercise_service.add_exercise(self.exercises, name, muscle_group, equipment)
        return self._apply(result, exercises=exercises)

    def add_exercise_to_program(self, program_id: str, exercise_id: str) -> OperationResult:
        programs = program_service.add_exercise_to_program(self.programs, self.exercises, program_id, exercise_id)
        return self._apply(OperationResult.ok(record_id=program_id), programs=programs)

    def remove_exercise_from_program(self, program_id: str, exercise_id: str) -> OperationResult:
        programs = program_service.remove_exercise_from_program(self.programs, program_id, exercise_id)
        return self._apply(OperationResult.ok(record_id=program_id), programs=programs)

    def update_exercise_in_program(self, program_id: str, exercise_id: str, field: str,
                                   value: Any) -> OperationResult:
        programs = program_service.update_exercise_in_program(self.programs, program_id, exercise_id, field, value)
        return self._apply(OperationResult.ok(record_id=program_id), programs=programs)

    # ------------------------------------------------------------------
    # Metrics and workouts
    # ------------------------------------------------------------------

    def add_metric(self, user_id: str, entry: MetricEntry | Mapping[str, Any]) -> OperationResult:
        users, result = metrics_service.add_metric(self.users, user_id, entry)
        return self._apply(result, users=users)

    def start_workout(self, program_id: str) -> list[ExerciseResult]:
        program = program_service.find_program(self.programs, program_id)
        return workout_service.start_workout(program) if program else []

    def complete_workout(self, program_id: Optional[str], results: list[ExerciseResult],
                         notes: str = "") -> OperationResult:
        workouts, users, result = workout_service.complete_workout(self.workouts, self.users, self.current_user_id,
                                                                   program_id, results, notes, )
        return self._apply(result, workouts=workouts, users=users)

    # ------------------------------------------------------------------
    # Sessions and groups
    # ------------------------------------------------------------------

    def create_session(self, title: str, date: str, time: str, capacity: Any,
                       description: str = "") -> OperationResult:
        sessions, result = schedule_service.create_session(self.sessions, title, date, time, capacity, description)
        return self._apply(result, sessions=sessions)

    def book_session(self, session_id: str) -> OperationResult:
        try:
            user = self._require_user()
        except NotAuthenticatedError as e:
            return OperationResult.fail(str(e))
        sessions, users, result = schedule_service.book_session(self.sessions, self.users, session_id, user.id)
        return self._apply(result, sessions=sessions, users=users)

    def create_group(self, title: str, date: str, time: str, capacity: Any,
                     description: str = "") -> OperationResult:
        groups, result = schedule_service.create_group(self.groups, title, date, time, capacity, description)
        return self._apply(result, groups=groups)

    def join_group(self, group_id: str) -> OperationResult:
        try:
            user = self._require_user()
        except NotAuthenticatedError as e:
            return OperationResult.fail(str(e))
        groups, users, result = schedule_service.join_group(self.groups, self.users, group_id, user.id)
        return self._apply(result, groups=groups, users=users)

    # ------------------------------------------------------------------
    # Store and profile
    # ------------------------------------------------------------------

    def create_product(self, name: str, price: Any, description: str = "") -> OperationResult:
        products, result = product_service.create_product(self.products, name, price, description)
        return self._apply(result, products=products)

    def purchase_product(self, product_id: str) -> OperationResult:
        try:
            user = self._require_user()
        except NotAuthenticatedError as e:
            return OperationResult.fail(str(e))
        users, result = product_service.purchase_product(self.products, self.users, product_id, user.id)
        return self._apply(result, users=users)

    def save_profile(self, data: ProfileUpdate | Mapping[str, Any]) -> OperationResult:
        try:
            user = self._require_user()
            users = profile_service.save_profile(self.users, user.id, data)
        except NotAuthenticatedError as e:
            return OperationResult.fail(str(e))
        except ValidationError as e:
            logger.debug(f"save_profile: rejected {data!r}: {e}")
            return OperationResult.fail("Invalid profile data")
        return self._apply(OperationResult.ok("Profile saved", record_id=user.id), users=users)
