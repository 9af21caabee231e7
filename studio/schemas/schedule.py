"""
Scheduled class and group schemas.

Both carry a capacity; membership in ``participants``/``members`` means the
user is booked.
"""

from pydantic import Field

from studio.schemas.base import StudioModel, new_id


class ClassSession(StudioModel):
    """A scheduled class clients can book."""

    id: str = Field(default_factory=new_id)
    title: str
    date: str = ""
    time: str = ""
    capacity: int = Field(0, ge=0)
    description: str = ""
    participants: list[str] = Field(default_factory=list)


class Group(StudioModel):
    """A training group clients can join."""

    id: str = Field(default_factory=new_id)
    title: str
    date: str = ""
    time: str = ""
    capacity: int = Field(0, ge=0)
    description: str = ""
    members: list[str] = Field(default_factory=list)
