"""
Program service.

Program CRUD, assignment and editing of the exercises embedded in a
program. Operations on an unknown id leave the collection unchanged and
return the same list object.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from studio.schemas.exercise import Exercise
from studio.schemas.program import Program, ProgramExercise
from studio.schemas.result import OperationResult
from studio.schemas.user import User
from studio.services.exercise_service import find_exercise

logger = logging.getLogger(__name__)

# Prescription given to a library exercise when it is added to a program
DEFAULT_SETS = 3
DEFAULT_REPS = 10
DEFAULT_WEIGHT = 0.0
DEFAULT_REST_SECONDS = 60


def find_program(programs: list[Program], program_id: Optional[str]) -> Program | None:
    return next((p for p in programs if p.id == program_id), None)


def _replace(programs: list[Program], program_id: str, program: Program) -> list[Program]:
    return [program if p.id == program_id else p for p in programs]


# ------------------------------------------------------------------
# Programs
# ------------------------------------------------------------------

def add_program(programs: list[Program], name: str, description: str = "", difficulty: Optional[str] = None,
                duration: Optional[str] = None, ) -> tuple[list[Program], OperationResult]:
    if not name:
        return programs, OperationResult.fail("Program name is required")
    program = Program(name=name, description=description or "", difficulty=difficulty, duration=duration)
    return [*programs, program], OperationResult.ok("Program created", record_id=program.id)


def update_program(programs: list[Program], program_id: str, program: Program) -> list[Program]:
    """Replace the program matching *program_id*. The id itself is kept."""
    if not find_program(programs, program_id):
        logger.debug(f"update_program: unknown program {program_id}")
        return programs
    return _replace(programs, program_id, program.model_copy(update={"id": program_id}))


def remove_program(programs: list[Program], program_id: str) -> list[Program]:
    if not find_program(programs, program_id):
        logger.debug(f"remove_program: unknown program {program_id}")
        return programs
    return [p for p in programs if p.id != program_id]


def assign_program(users: list[User], username: str, program_id: Optional[str]) -> list[User]:
    """Point a user at a program. The program id is not validated."""
    if not any(u.username == username for u in users):
        logger.debug(f"assign_program: unknown user '{username}'")
        return users
    return [u.model_copy(update={"assigned_program_id": program_id}) if u.username == username else u for u in users]


def assigned_program(user: User, programs: list[Program]) -> Program | None:
    """Program assigned to *user*; a dangling reference reads as None."""
    if not user.assigned_program_id:
        return None
    return find_program(programs, user.assigned_program_id)


# ------------------------------------------------------------------
# Embedded exercises
# ------------------------------------------------------------------

def add_exercise_to_program(programs: list[Program], exercises: list[Exercise], program_id: str,
                            exercise_id: str, ) -> list[Program]:
    program = find_program(programs, program_id)
    exercise = find_exercise(exercises, exercise_id)
    if not program or not exercise:
        logger.debug(f"add_exercise_to_program: unresolved program {program_id} / exercise {exercise_id}")
        return programs

    embedded = ProgramExercise(name=exercise.name, muscle_group=exercise.muscle_group, sets=DEFAULT_SETS,
                               reps=DEFAULT_REPS, weight=DEFAULT_WEIGHT, rest=DEFAULT_REST_SECONDS, )
    updated = program.model_copy(update={"exercises": [*program.exercises, embedded]})
    return _replace(programs, program_id, updated)


def remove_exercise_from_program(programs: list[Program], program_id: str, exercise_id: str) -> list[Program]:
    program = find_program(programs, program_id)
    if not program or not any(e.id == exercise_id for e in program.exercises):
        return programs
    updated = program.model_copy(update={"exercises": [e for e in program.exercises if e.id != exercise_id]})
    return _replace(programs, program_id, updated)


def update_exercise_in_program(programs: list[Program], program_id: str, exercise_id: str, field: str,
                               value: Any, ) -> list[Program]:
    """Patch one field of an embedded exercise.

    Unknown fields, the ``id`` field and values that fail validation are
    ignored.
    """
    program = find_program(programs, program_id)
    if not program:
        return programs
    exercise = next((e for e in program.exercises if e.id == exercise_id), None)
    if not exercise:
        return programs
    if field == "id" or field not in ProgramExercise.model_fields:
        logger.debug(f"update_exercise_in_program: ignoring field '{field}'")
        return programs

    try:
        patched = ProgramExercise.model_validate({**exercise.model_dump(), field: value})
    except ValidationError as e:
        logger.debug(f"update_exercise_in_program: rejected {field}={value!r}: {e}")
        return programs

    exercises = [patched if e.id == exercise_id else e for e in program.exercises]
    return _replace(programs, program_id, program.model_copy(update={"exercises": exercises}))
