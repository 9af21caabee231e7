"""Store product schema."""

from pydantic import Field

from studio.schemas.base import StudioModel, new_id


class Product(StudioModel):
    """A product sold in the studio store."""
    id: str = Field(default_factory=new_id)
    name: str
    price: float = Field(0.0, ge=0.0)
    description: str = ""
