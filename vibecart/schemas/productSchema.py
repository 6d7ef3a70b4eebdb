from beanie import PydanticObjectId
from pydantic import BaseModel, Field, ConfigDict


# ============= PRODUCT SCHEMAS =============
class ProductRead(BaseModel):
    """Schema for reading a product"""
    id: PydanticObjectId = Field(..., alias="_id")
    name: str
    price: float
    description: str
    image: str
    category: str

    model_config = ConfigDict(
        populate_by_name=True,  # Enable from_orm to work with ORM models
        from_attributes=True,  # This allows Pydantic to use aliases
    )
