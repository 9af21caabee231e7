"""Tests for program CRUD, assignment and embedded exercises."""

import pytest

from studio.schemas.exercise import Exercise
from studio.schemas.program import Program, ProgramExercise
from studio.schemas.user import User
from studio.services.program_service import (
    DEFAULT_REPS,
    DEFAULT_REST_SECONDS,
    DEFAULT_SETS,
    add_exercise_to_program,
    add_program,
    assign_program,
    assigned_program,
    remove_exercise_from_program,
    remove_program,
    update_exercise_in_program,
    update_program,
)


@pytest.fixture
def library():
    return [Exercise(id="ex-squat", name="Squat", muscle_group="legs", equipment="barbell")]


@pytest.fixture
def programs():
    return [Program(id="p1", name="Basic", exercises=[ProgramExercise(id="pe1", name="Plank", muscle_group="core")])]


# ======================================================================
# Programs
# ======================================================================


class TestPrograms:

    def test_add_program(self, programs):
        new_programs, result = add_program(programs, "Strength", "Heavy days")
        assert result.success
        assert len(new_programs) == 2
        created = new_programs[-1]
        assert created.id == result.record_id
        assert created.exercises == []
        assert created.description == "Heavy days"

    def test_add_program_requires_name(self, programs):
        new_programs, result = add_program(programs, "")
        assert not result.success
        assert new_programs is programs

    def test_update_program_replaces_record(self, programs):
        replacement = Program(id="other", name="Renamed", difficulty="hard")
        new_programs = update_program(programs, "p1", replacement)
        assert new_programs[0].name == "Renamed"
        assert new_programs[0].id == "p1"
        assert new_programs[0].exercises == []

    def test_update_unknown_program_is_noop(self, programs):
        assert update_program(programs, "missing", Program(name="x")) is programs

    def test_remove_program(self, programs):
        assert remove_program(programs, "p1") == []
        assert remove_program(programs, "missing") is programs


# ======================================================================
# Assignment
# ======================================================================


class TestAssignment:

    @pytest.fixture
    def users(self):
        return [User(id="u1", username="demo", password="x"), User(id="u2", username="other", password="x")]

    def test_assign(self, users):
        new_users = assign_program(users, "demo", "p1")
        assert new_users[0].assigned_program_id == "p1"
        assert new_users[1].assigned_program_id is None
        assert users[0].assigned_program_id is None

    def test_unknown_user_is_noop(self, users):
        assert assign_program(users, "ghost", "p1") is users

    def test_program_id_not_validated(self, users, programs):
        new_users = assign_program(users, "demo", "does-not-exist")
        assert new_users[0].assigned_program_id == "does-not-exist"
        assert assigned_program(new_users[0], programs) is None

    def test_assigned_program_lookup(self, users, programs):
        user = assign_program(users, "demo", "p1")[0]
        assert assigned_program(user, programs).name == "Basic"
        assert assigned_program(users[0], programs) is None


# ======================================================================
# Embedded exercises
# ======================================================================


class TestEmbeddedExercises:

    def test_add_from_library_uses_defaults(self, programs, library):
        new_programs = add_exercise_to_program(programs, library, "p1", "ex-squat")
        added = new_programs[0].exercises[-1]

        assert added.name == "Squat"
        assert added.muscle_group == "legs"
        assert (added.sets, added.reps, added.weight, added.rest) == (DEFAULT_SETS, DEFAULT_REPS, 0, DEFAULT_REST_SECONDS)
        assert added.id != "ex-squat"
        assert len(programs[0].exercises) == 1

    @pytest.mark.parametrize("program_id,exercise_id", [("missing", "ex-squat"), ("p1", "missing")])
    def test_add_unresolved_is_noop(self, programs, library, program_id, exercise_id):
        assert add_exercise_to_program(programs, library, program_id, exercise_id) is programs

    def test_remove(self, programs):
        assert remove_exercise_from_program(programs, "p1", "pe1")[0].exercises == []
        assert remove_exercise_from_program(programs, "p1", "missing") is programs

    def test_update_field(self, programs):
        new_programs = update_exercise_in_program(programs, "p1", "pe1", "reps", 15)
        assert new_programs[0].exercises[0].reps == 15
        assert programs[0].exercises[0].reps == 10

    def test_update_coerces_form_values(self, programs):
        new_programs = update_exercise_in_program(programs, "p1", "pe1", "weight", "22.5")
        assert new_programs[0].exercises[0].weight == 22.5

    def test_update_completion_flag(self, programs):
        new_programs = update_exercise_in_program(programs, "p1", "pe1", "completed", True)
        assert new_programs[0].exercises[0].completed is True

    @pytest.mark.parametrize("field,value", [("id", "new"), ("unknown", 1), ("reps", "lots"), ("sets", -1)])
    def test_rejected_updates_are_noop(self, programs, field, value):
        assert update_exercise_in_program(programs, "p1", "pe1", field, value) is programs
