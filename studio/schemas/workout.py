"""
Workout log schemas.

A log entry records what a user actually did for each exercise of a
program: the reps and weight of every completed set.
"""

import datetime
from typing import Optional

from pydantic import Field

from studio.schemas.base import StudioModel, new_id


class SetResult(StudioModel):
    """A single performed set."""
    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0.0)


class ExerciseResult(StudioModel):
    """Per-exercise results of one workout."""
    exercise_id: Optional[str] = None
    name: str
    sets: list[SetResult] = Field(default_factory=list)


class WorkoutLog(StudioModel):
    """A completed workout."""

    id: str = Field(default_factory=new_id)
    user_id: str
    program_id: Optional[str] = None
    timestamp: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
    results: list[ExerciseResult] = Field(default_factory=list)
    notes: str = ""
