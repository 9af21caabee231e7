"""
Authentication service.

Login and registration against the users collection. Both hash the
submitted password before comparing or storing it; every stored credential
is a SHA-256 hex digest.
"""

from __future__ import annotations

import logging
from typing import get_args

from studio.core.security import hash_password, verify_password
from studio.schemas.result import LoginResult, OperationResult
from studio.schemas.user import Role, User

logger = logging.getLogger(__name__)


def find_user(users: list[User], username: str) -> User | None:
    """Exact, case-sensitive lookup by username."""
    return next((u for u in users if u.username == username), None)


def login(users: list[User], username: str, password: str) -> LoginResult:
    """
    Check credentials.

    Args:
        users: Current users collection
        username: Submitted username
        password: Submitted plain-text password

    Returns:
        LoginResult carrying the matched user on success
    """
    user = find_user(users, username)
    if not user:
        return LoginResult(success=False, message="User not found")
    if not verify_password(password, user.password):
        return LoginResult(success=False, message="Wrong password")
    logger.info(f"User '{username}' logged in")
    return LoginResult(success=True, user=user)


def register(users: list[User], username: str, password: str,
             role: Role = "client") -> tuple[list[User], OperationResult]:
    """
    Register a new account.

    Args:
        users: Current users collection
        username: Desired username, must not exist yet
        password: Plain-text password, stored hashed
        role: ``trainer`` or ``client``

    Returns:
        (new users collection, result). The collection is unchanged on failure.
    """
    if not username or not password:
        return users, OperationResult.fail("Username and password are required")
    if role not in get_args(Role):
        return users, OperationResult.fail(f"Unknown role '{role}'")
    if find_user(users, username):
        return users, OperationResult.fail("Username already exists")

    user = User(username=username, password=hash_password(password), role=role)
    logger.info(f"Registered {role} '{username}'")
    return [*users, user], OperationResult.ok("Registered successfully", record_id=user.id)
