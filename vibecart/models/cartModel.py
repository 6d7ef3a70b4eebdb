from datetime import datetime
from typing import Optional
from beanie import Document, PydanticObjectId
from pydantic import Field, ConfigDict
from pymongo import ASCENDING, IndexModel

# MongoDB stores integers as at most 8 bytes
MAX_QUANTITY = 2 ** 63 - 1


class CartItem(Document):
    """One product line in a session's cart"""
    id: Optional[PydanticObjectId] = Field(None, alias="_id")
    session_id: str  # Cart partition key
    product_id: PydanticObjectId  # Reference to Product
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY)
    added_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "cart_items"
        indexes = [
            # At most one line per product in a session's cart
            IndexModel(
                [("session_id", ASCENDING), ("product_id", ASCENDING)],
                name="session_product_unique",
                unique=True,
            ),
        ]

    model_config = ConfigDict(populate_by_name=True)
