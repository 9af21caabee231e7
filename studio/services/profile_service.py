"""Profile service."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from studio.schemas.user import ProfileUpdate, User

logger = logging.getLogger(__name__)


def save_profile(users: list[User], user_id: str, data: ProfileUpdate | Mapping[str, Any]) -> list[User]:
    """
    Shallow-merge profile fields into a user.

    Only fields explicitly set (and not None) on *data* are applied;
    ``goals`` replaces the whole goals object.

    Raises:
        pydantic.ValidationError: If a mapping *data* has invalid values
    """
    if not isinstance(data, ProfileUpdate):
        data = ProfileUpdate.model_validate(data)
    changes = {}
    for name in data.model_fields_set:
        value = getattr(data, name)
        if value is not None:
            changes[name] = value
    if not changes or not any(u.id == user_id for u in users):
        return users
    return [u.model_copy(update=changes) if u.id == user_id else u for u in users]


def clients(users: list[User]) -> list[User]:
    """Users a trainer can assign programs to."""
    return [u for u in users if u.role == "client"]
