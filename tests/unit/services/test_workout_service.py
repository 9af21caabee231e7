"""Tests for workout start / completion."""

import datetime

import pytest

from studio.schemas.program import Program, ProgramExercise
from studio.schemas.user import User
from studio.schemas.workout import ExerciseResult, SetResult
from studio.services.workout_service import complete_workout, start_workout, workouts_for_user


@pytest.fixture
def program():
    return Program(id="p1", name="Basic", exercises=[
        ProgramExercise(id="pe1", name="Squat", sets=3, reps=12, weight=60),
        ProgramExercise(id="pe2", name="Bench Press", sets=2, reps=10),
    ])


@pytest.fixture
def users():
    return [User(id="u1", username="demo", password="x")]


class TestStartWorkout:

    def test_snapshot_of_program(self, program):
        results = start_workout(program)

        assert [r.name for r in results] == ["Squat", "Bench Press"]
        assert results[0].exercise_id == "pe1"
        assert results[0].sets == [SetResult(reps=12, weight=60)] * 3
        assert len(results[1].sets) == 2

    def test_editing_snapshot_leaves_program_alone(self, program):
        results = start_workout(program)
        results[0].sets[0].reps = 5
        assert program.exercises[0].reps == 12


class TestCompleteWorkout:

    def test_appends_log_and_user_reference(self, users, program):
        now = datetime.datetime(2026, 10, 18, 9, 30, tzinfo=datetime.timezone.utc)
        results = [ExerciseResult(name="Squat", sets=[SetResult(reps=12, weight=60)])]

        workouts, new_users, result = complete_workout([], users, "u1", "p1", results, "felt good", now=now)

        assert result.success
        log = workouts[0]
        assert log.id == result.record_id
        assert (log.user_id, log.program_id, log.timestamp, log.notes) == ("u1", "p1", now, "felt good")
        assert log.results == results
        assert new_users[0].completed_workouts == [log.id]

    def test_not_authenticated(self, users):
        workouts, new_users, result = complete_workout([], users, None, "p1", [])
        assert not result.success
        assert result.message == "Not authenticated"
        assert workouts == [] and new_users is users

    def test_unknown_user(self, users):
        workouts, new_users, result = complete_workout([], users, "ghost", "p1", [])
        assert not result.success
        assert new_users is users

    def test_workouts_for_user(self, users):
        workouts, users, _ = complete_workout([], users, "u1", "p1", [])
        assert len(workouts_for_user(workouts, "u1")) == 1
        assert workouts_for_user(workouts, "u2") == []
