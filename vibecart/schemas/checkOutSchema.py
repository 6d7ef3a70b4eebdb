from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, ConfigDict


class CheckOutRequest(BaseModel):
    """Customer details submitted with the checkout form"""
    name: str = Field(..., min_length=1, max_length=100, description="Customer's full name")
    email: EmailStr = Field(..., description="Valid email address")
    address: Optional[str] = Field(None, max_length=500, description="Shipping address")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "address": "1 Main Street"
            }
        }


class CustomerInfo(BaseModel):
    name: str
    email: EmailStr
    address: Optional[str] = None


class ReceiptItem(BaseModel):
    """Snapshot of one cart line at checkout"""
    product: str
    quantity: int
    price: float
    subtotal: float


class ReceiptRead(BaseModel):
    """Receipt returned by checkout. Not persisted."""
    order_id: str = Field(..., alias="orderId")
    customer: CustomerInfo
    items: List[ReceiptItem]
    total: float
    tax: float
    grand_total: float = Field(..., alias="grandTotal")
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)
