from datetime import datetime
from typing import List
from beanie import PydanticObjectId
from pydantic import BaseModel, Field, ConfigDict

from vibecart.schemas.productSchema import ProductRead
from vibecart.models.cartModel import MAX_QUANTITY


# ============= CART SCHEMAS =============
class CartAddItemRequest(BaseModel):
    """Request schema for adding to cart"""
    product_id: PydanticObjectId = Field(..., alias="productId")
    quantity: int = Field(default=1, gt=0, le=MAX_QUANTITY)

    model_config = ConfigDict(populate_by_name=True)


class CartUpdateItemRequest(BaseModel):
    """Request schema for updating cart item. Zero or less removes the item."""
    quantity: int = Field(..., le=MAX_QUANTITY)


class CartItemWithProduct(BaseModel):
    """Cart item with its product resolved (for frontend)"""
    id: PydanticObjectId = Field(..., alias="_id")
    product: ProductRead = Field(..., alias="productId")
    quantity: int
    added_at: datetime = Field(..., alias="addedAt")

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )


class CartRead(BaseModel):
    """Schema for reading a session's cart"""
    session_id: str = Field(..., alias="sessionId")
    items: List[CartItemWithProduct]
    item_count: int = Field(..., alias="itemCount")
    total: float
    tax: float
    grand_total: float = Field(..., alias="grandTotal")

    model_config = ConfigDict(populate_by_name=True)
