"""
Metrics service.

Body-metric history is append-only: entries are added, never edited or
removed.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from studio.schemas.result import OperationResult
from studio.schemas.user import MetricEntry, User

logger = logging.getLogger(__name__)


def add_metric(users: list[User], user_id: str,
               entry: MetricEntry | Mapping[str, Any]) -> tuple[list[User], OperationResult]:
    """
    Append a metric snapshot to a user's history.

    Args:
        users: Current users collection
        user_id: Owner of the entry
        entry: MetricEntry, or a mapping with at least ``weight``; body fat,
            chest and waist default to 0

    Returns:
        (new users collection, result). An unknown user leaves the
        collection unchanged.
    """
    if not isinstance(entry, MetricEntry):
        try:
            entry = MetricEntry.model_validate(entry)
        except ValidationError as e:
            logger.debug(f"add_metric: rejected entry {entry!r}: {e}")
            return users, OperationResult.fail("Weight is required")
    if not any(u.id == user_id for u in users):
        logger.debug(f"add_metric: unknown user {user_id}")
        return users, OperationResult.ok()
    new_users = [u.model_copy(update={"metrics": [*u.metrics, entry]}) if u.id == user_id else u for u in users]
    return new_users, OperationResult.ok("Metric saved")


def latest_metric(user: User) -> MetricEntry | None:
    """Most recently appended entry, or None."""
    return user.metrics[-1] if user.metrics else None
