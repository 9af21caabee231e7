"""
Mutation handlers.

Each handler takes the current collections plus a request and returns new
collections; none of them writes to the store.
"""

from studio.services import (
    auth_service,
    exercise_service,
    metrics_service,
    product_service,
    profile_service,
    program_service,
    schedule_service,
    seed_service,
    workout_service,
)

__all__ = [
    "auth_service",
    "exercise_service",
    "metrics_service",
    "product_service",
    "profile_service",
    "program_service",
    "schedule_service",
    "seed_service",
    "workout_service",
]
