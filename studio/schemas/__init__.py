"""Pydantic schemas for persisted records and operation results."""

from studio.schemas.base import StudioModel, new_id
from studio.schemas.user import Goals, MetricEntry, ProfileUpdate, Role, User
from studio.schemas.program import Program, ProgramExercise
from studio.schemas.exercise import Exercise
from studio.schemas.workout import ExerciseResult, SetResult, WorkoutLog
from studio.schemas.schedule import ClassSession, Group
from studio.schemas.product import Product
from studio.schemas.result import LoginResult, OperationResult

__all__ = [
    "StudioModel",
    "new_id",
    "Goals",
    "MetricEntry",
    "ProfileUpdate",
    "Role",
    "User",
    "Program",
    "ProgramExercise",
    "Exercise",
    "ExerciseResult",
    "SetResult",
    "WorkoutLog",
    "ClassSession",
    "Group",
    "Product",
    "LoginResult",
    "OperationResult",
]
