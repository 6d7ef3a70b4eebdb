from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import Field, ConfigDict


class Product(Document):
    """Catalog product. Written once by the seed step, read-only afterwards."""
    id: Optional[PydanticObjectId] = Field(None, alias="_id")

    name: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0)
    description: str = ""
    image: str = ""
    category: str = ""

    class Settings:
        name = "products"
        indexes = [
            [("category", 1)],
        ]

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )
