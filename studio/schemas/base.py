"""
Shared base for persisted records.

Records are stored with camelCase keys (``assignedProgramId``) and read back
either by alias or by field name. Keys that a record does not declare are
ignored, so older or newer payloads still load.
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Opaque random record identifier."""
    return uuid4().hex


class StudioModel(BaseModel):
    """Base model for every persisted record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
