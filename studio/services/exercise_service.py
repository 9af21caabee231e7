"""Exercise library service."""

from __future__ import annotations

from typing import Optional

from studio.schemas.exercise import Exercise
from studio.schemas.result import OperationResult


def find_exercise(exercises: list[Exercise], exercise_id: Optional[str]) -> Exercise | None:
    return next((e for e in exercises if e.id == exercise_id), None)


def add_exercise(exercises: list[Exercise], name: str, muscle_group: str = "",
                 equipment: str = "") -> tuple[list[Exercise], OperationResult]:
    if not name:
        return exercises, OperationResult.fail("Exercise name is required")
    exercise = Exercise(name=name, muscle_group=muscle_group or "", equipment=equipment or "")
    return [*exercises, exercise], OperationResult.ok("Exercise added", record_id=exercise.id)
