"""
Workout service.

A workout runs in three steps: :func:`start_workout` snapshots a program
into an editable result set, the caller records reps/weight per set, and
:func:`complete_workout` stores the log. An abandoned workout is simply
never completed; nothing about it is persisted.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from studio.schemas.program import Program
from studio.schemas.result import OperationResult
from studio.schemas.user import User
from studio.schemas.workout import ExerciseResult, SetResult, WorkoutLog

logger = logging.getLogger(__name__)


def start_workout(program: Program) -> list[ExerciseResult]:
    """One result per program exercise, prefilled with the planned sets."""
    return [
        ExerciseResult(exercise_id=ex.id, name=ex.name,
                       sets=[SetResult(reps=ex.reps, weight=ex.weight) for _ in range(ex.sets)], )
        for ex in program.exercises
    ]


def complete_workout(workouts: list[WorkoutLog], users: list[User], user_id: Optional[str],
                     program_id: Optional[str], results: list[ExerciseResult], notes: str = "",
                     now: Optional[datetime.datetime] = None, ) -> tuple[list[WorkoutLog], list[User], OperationResult]:
    """
    Store a completed workout for *user_id*.

    The log and the user's ``completed_workouts`` entry are produced
    together; on failure both collections are returned unchanged.
    """
    if not user_id:
        return workouts, users, OperationResult.fail("Not authenticated")
    if not any(u.id == user_id for u in users):
        return workouts, users, OperationResult.fail("User not found")

    log = WorkoutLog(user_id=user_id, program_id=program_id, results=list(results), notes=notes or "",
                     timestamp=now or datetime.datetime.now(datetime.timezone.utc), )
    new_users = [u.model_copy(update={"completed_workouts": [*u.completed_workouts, log.id]}) if u.id == user_id else u
                 for u in users]
    logger.info(f"User {user_id} completed a workout of program {program_id}")
    return [*workouts, log], new_users, OperationResult.ok("Workout saved", record_id=log.id)


def workouts_for_user(workouts: list[WorkoutLog], user_id: str) -> list[WorkoutLog]:
    return [w for w in workouts if w.user_id == user_id]
