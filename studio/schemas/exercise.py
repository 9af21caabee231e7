"""Exercise library schema."""

from pydantic import Field

from studio.schemas.base import StudioModel, new_id


class Exercise(StudioModel):
    """A library exercise, independent of any program."""
    id: str = Field(default_factory=new_id)
    name: str
    muscle_group: str = ""
    equipment: str = ""
