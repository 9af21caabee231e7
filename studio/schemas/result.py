"""
Operation result schemas.

Validation failures are reported through these values instead of being
raised.
"""

from typing import Optional

from pydantic import BaseModel

from studio.schemas.user import User


class OperationResult(BaseModel):
    """Outcome of a mutation."""
    success: bool
    message: str = ""
    record_id: Optional[str] = None

    @classmethod
    def ok(cls, message: str = "", record_id: Optional[str] = None) -> "OperationResult":
        return cls(success=True, message=message, record_id=record_id)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)


class LoginResult(BaseModel):
    """Outcome of a login attempt. ``user`` is set only on success."""
    success: bool
    message: str = ""
    user: Optional[User] = None
