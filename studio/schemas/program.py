"""
Program schemas.

A program is an ordered list of exercises with their planned load.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from studio.schemas.base import StudioModel, new_id


class ProgramExercise(StudioModel):
    """An exercise embedded in a program, with its prescription."""

    id: str = Field(default_factory=new_id)
    name: str
    sets: int = Field(3, ge=0)
    reps: int = Field(10, ge=0)
    weight: float = Field(0.0, ge=0.0, description="Planned load (kg)")
    rest: int = Field(60, ge=0, description="Rest between sets (seconds)")
    notes: str = ""
    muscle_group: str = ""
    completed: bool = False
    video: str = ""


class Program(StudioModel):
    """A workout program a trainer can assign to clients."""

    id: str = Field(default_factory=new_id)
    name: str
    description: str = ""
    difficulty: Optional[str] = None
    duration: Optional[str] = None
    exercises: list[ProgramExercise] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _position_ids(cls, data: Any) -> Any:
        """Give stored exercises without an id one derived from the program id and position."""
        if not isinstance(data, dict) or not data.get("id") or not isinstance(data.get("exercises"), list):
            return data
        exercises = [
            {**item, "id": f"{data['id']}-{index}"} if isinstance(item, dict) and not item.get("id") else item
            for index, item in enumerate(data["exercises"])
        ]
        return {**data, "exercises": exercises}
