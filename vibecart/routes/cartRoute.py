from fastapi import APIRouter, Depends
from beanie import PydanticObjectId
from typing import Union

from vibecart.schemas.cartSchema import (
    CartRead, CartAddItemRequest, CartUpdateItemRequest, CartItemWithProduct
)
from vibecart.schemas.commonSchema import MessageResponse
from vibecart.crud.cartService import CartService
from vibecart.dependencies.session_dependencies import cart_session

router = APIRouter()

ITEM_REMOVED = {"message": "Item removed from cart"}


# ============= CART ROUTES =============
@router.get("/cart", response_model=CartRead, tags=["cart"])
async def get_cart(session_id: str = Depends(cart_session)):
    """Get the current session's cart with totals"""
    return await CartService.get_cart(session_id)


@router.post("/cart", response_model=CartItemWithProduct, tags=["cart"])
async def add_to_cart(
        item: CartAddItemRequest,
        session_id: str = Depends(cart_session)
):
    """Add item to cart"""
    return await CartService.add_item(session_id, item.product_id, item.quantity)


@router.put("/cart/{item_id}", response_model=Union[CartItemWithProduct, MessageResponse], tags=["cart"])
async def update_cart_item(
        item_id: PydanticObjectId,
        update: CartUpdateItemRequest,
        session_id: str = Depends(cart_session)
):
    """Update quantity of item in cart; zero or less removes it"""
    updated = await CartService.update_item_quantity(session_id, item_id, update.quantity)
    if updated is None:
        return ITEM_REMOVED
    return updated


@router.delete("/cart/{item_id}", response_model=MessageResponse, tags=["cart"])
async def remove_from_cart(
        item_id: PydanticObjectId,
        session_id: str = Depends(cart_session)
):
    """Remove item from cart"""
    await CartService.remove_item(session_id, item_id)
    return ITEM_REMOVED


@router.delete("/cart", response_model=MessageResponse, tags=["cart"])
async def clear_cart(session_id: str = Depends(cart_session)):
    """Clear entire cart"""
    await CartService.clear_cart(session_id)
    return {"message": "Cart cleared"}
