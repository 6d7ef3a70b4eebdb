from fastapi import APIRouter
from typing import List, Optional

from vibecart.schemas.productSchema import ProductRead
from vibecart.crud.productService import ProductService

router = APIRouter()


# ============= PRODUCTS ROUTES =============
@router.get("/products", response_model=List[ProductRead], tags=["products"])
async def list_products(category: Optional[str] = None):
    """Get all products, optionally filtered by category"""
    products = await ProductService.list_products(category=category)
    return products
