"""
Schedule service.

Scheduled classes ("sessions") and groups share the same rules: a capacity
fixed at creation, idempotent enrollment while the member count is below
capacity, and a joined-list on the user that changes only together with
the class/group itself.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from studio.schemas.result import OperationResult
from studio.schemas.schedule import ClassSession, Group
from studio.schemas.user import User

logger = logging.getLogger(__name__)

R = TypeVar("R", ClassSession, Group)


def parse_capacity(value: Any) -> Optional[int]:
    """Integer capacity >= 0, or None when *value* is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    try:
        capacity = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return capacity if capacity >= 0 else None


def spots_left(record: ClassSession | Group) -> int:
    members = record.participants if isinstance(record, ClassSession) else record.members
    return max(record.capacity - len(members), 0)


# ------------------------------------------------------------------
# Creation
# ------------------------------------------------------------------

def _create(records: list[R], model: type[R], title: str, date: str, time: str, capacity: Any,
            description: str, ) -> tuple[list[R], OperationResult]:
    if not title:
        return records, OperationResult.fail("Title is required")
    parsed = parse_capacity(capacity)
    if parsed is None:
        return records, OperationResult.fail("Capacity must be a non-negative integer")
    record = model(title=title, date=date or "", time=time or "", capacity=parsed, description=description or "")
    return [*records, record], OperationResult.ok(f"{model.__name__} created", record_id=record.id)


def create_session(sessions: list[ClassSession], title: str, date: str, time: str, capacity: Any,
                   description: str = "", ) -> tuple[list[ClassSession], OperationResult]:
    return _create(sessions, ClassSession, title, date, time, capacity, description)


def create_group(groups: list[Group], title: str, date: str, time: str, capacity: Any,
                 description: str = "", ) -> tuple[list[Group], OperationResult]:
    return _create(groups, Group, title, date, time, capacity, description)


# ------------------------------------------------------------------
# Enrollment
# ------------------------------------------------------------------

def _enroll(records: list[R], users: list[User], record_id: str, user_id: str, member_field: str,
            joined_field: str, label: str, ) -> tuple[list[R], list[User], OperationResult]:
    record = next((r for r in records if r.id == record_id), None)
    if not record:
        return records, users, OperationResult.fail(f"{label} not found")
    user = next((u for u in users if u.id == user_id), None)
    if not user:
        return records, users, OperationResult.fail("User not found")

    members: list[str] = getattr(record, member_field)
    if user_id in members:
        return records, users, OperationResult.ok("Already enrolled", record_id=record_id)
    if len(members) >= record.capacity:
        return records, users, OperationResult.fail(f"{label} is full")

    updated = record.model_copy(update={member_field: [*members, user_id]})
    joined: list[str] = getattr(user, joined_field)
    new_user = user if record_id in joined else user.model_copy(update={joined_field: [*joined, record_id]})

    new_records = [updated if r.id == record_id else r for r in records]
    new_users = [new_user if u.id == user_id else u for u in users]
    logger.info(f"User {user_id} enrolled in {label.lower()} {record_id}")
    return new_records, new_users, OperationResult.ok("Enrolled", record_id=record_id)


def book_session(sessions: list[ClassSession], users: list[User], session_id: str,
                 user_id: str) -> tuple[list[ClassSession], list[User], OperationResult]:
    return _enroll(sessions, users, session_id, user_id, "participants", "joined_sessions", "Session")


def join_group(groups: list[Group], users: list[User], group_id: str,
               user_id: str) -> tuple[list[Group], list[User], OperationResult]:
    return _enroll(groups, users, group_id, user_id, "members", "joined_groups", "Group")
