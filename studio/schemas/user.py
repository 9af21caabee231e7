"""
User schemas.

Accounts, profile data and the append-only body-metric history.
"""

import datetime
from typing import Literal, Optional

from pydantic import Field

from studio.schemas.base import StudioModel, new_id

Role = Literal["trainer", "client"]

DEFAULT_WATER_GOAL = 2.0


class Goals(StudioModel):
    """Per-metric targets set on the profile page."""
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None


def today_label() -> str:
    """Today as a day.month.year label, e.g. ``18.10.2026``."""
    today = datetime.date.today()
    return f"{today.day}.{today.month}.{today.year}"


class MetricEntry(StudioModel):
    """One body-metric snapshot. Never edited once appended."""

    date: str = Field(default_factory=today_label, description="Display date, day.month.year")
    weight: float = Field(..., description="Body weight (kg)")
    body_fat: float = Field(0.0, description="Body fat (%)")
    chest: float = Field(0.0, description="Chest circumference (cm)")
    waist: float = Field(0.0, description="Waist circumference (cm)")


class User(StudioModel):
    """A trainer or client account."""

    id: str = Field(default_factory=new_id)
    username: str
    password: str = Field(..., description="SHA-256 hex digest of the password")
    role: Role = "client"

    # Profile
    full_name: str = ""
    email: str = ""
    phone: str = ""
    goals: Goals = Field(default_factory=Goals)
    water_goal: float = Field(DEFAULT_WATER_GOAL, description="Daily water intake target (litres)")

    # References
    assigned_program_id: Optional[str] = None
    joined_sessions: list[str] = Field(default_factory=list)
    joined_groups: list[str] = Field(default_factory=list)
    purchased_products: list[str] = Field(default_factory=list)
    completed_workouts: list[str] = Field(default_factory=list)

    metrics: list[MetricEntry] = Field(default_factory=list)


class ProfileUpdate(StudioModel):
    """Profile fields a user may change. Only fields that are set get merged."""
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    goals: Optional[Goals] = None
    water_goal: Optional[float] = None
