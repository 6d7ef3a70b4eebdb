from datetime import datetime
from typing import List, Dict, Any, Optional, Tuple
from beanie import PydanticObjectId
from fastapi import HTTPException, status
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from vibecart.config.settings import settings
from vibecart.models.productModel import Product
from vibecart.models.cartModel import CartItem, MAX_QUANTITY
from vibecart.commonUtils.exceptions import CartIntegrityError
import logging

logger = logging.getLogger(__name__)


class CartService:
    """Service layer for cart operations. Every call is scoped to one session's cart."""

    @staticmethod
    def price_summary(total: float) -> Tuple[float, float, float]:
        """
        Round the pre-tax total and derive tax from the rounded grand total.

        Returns:
            tuple: (total, tax, grand_total)
        """
        total = round(total, 2)
        grand_total = round(total * (1 + settings.TAX_RATE), 2)
        tax = round(grand_total - total, 2)
        return total, tax, grand_total

    @staticmethod
    def serialize_item(item: CartItem, product: Product) -> Dict[str, Any]:
        return {
            "id": item.id,
            "product": product,
            "quantity": item.quantity,
            "added_at": item.added_at,
        }

    @staticmethod
    async def get_items_with_products(session_id: str) -> List[Tuple[CartItem, Product]]:
        """
        Load the session's cart items paired with their products.

        Raises CartIntegrityError when an item points at a product that is gone.
        """
        items = await CartItem.find(CartItem.session_id == session_id).sort(("added_at", 1)).to_list()

        product_ids = list({item.product_id for item in items})
        products = await Product.find({"_id": {"$in": product_ids}}).to_list()
        products_map = {p.id: p for p in products}

        lines = []
        for item in items:
            product = products_map.get(item.product_id)
            if product is None:
                raise CartIntegrityError(item.id, item.product_id)
            lines.append((item, product))

        return lines

    @staticmethod
    async def get_cart(session_id: str) -> Dict[str, Any]:
        """Get cart with full product details and calculations"""
        lines = await CartService.get_items_with_products(session_id)

        subtotal = sum(product.price * item.quantity for item, product in lines)
        total, tax, grand_total = CartService.price_summary(subtotal)

        return {
            "session_id": session_id,
            "items": [CartService.serialize_item(item, product) for item, product in lines],
            "item_count": sum(item.quantity for item, _ in lines),
            "total": total,
            "tax": tax,
            "grand_total": grand_total,
        }

    @staticmethod
    async def add_item(
            session_id: str,
            product_id: PydanticObjectId,
            quantity: int = 1
    ) -> Dict[str, Any]:
        """Add item to cart or increase quantity if it is already there"""
        product = await Product.get(product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )

        # Single round trip so concurrent adds of the same product cannot lose an increment.
        # The quantity filter keeps the stored total inside MongoDB's 8-byte integers.
        collection = CartItem.get_motor_collection()
        query = {
            "session_id": session_id,
            "product_id": product.id,
            "quantity": {"$lte": MAX_QUANTITY - quantity},
        }
        update = {
            "$inc": {"quantity": quantity},
            "$setOnInsert": {"added_at": datetime.utcnow()},
        }

        try:
            try:
                raw = await collection.find_one_and_update(
                    query, update, upsert=True, return_document=ReturnDocument.AFTER
                )
            except DuplicateKeyError:
                # The line exists already: another request inserted it first,
                # or its quantity is too large to pass the filter
                raw = await collection.find_one_and_update(
                    query, update, return_document=ReturnDocument.AFTER
                )
        except OverflowError:
            raw = None

        if raw is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Quantity too large"
            )

        item = CartItem.model_validate(raw)
        logger.info(f"Session {session_id}: {product.name} quantity now {item.quantity}")
        return CartService.serialize_item(item, product)

    @staticmethod
    async def update_item_quantity(
            session_id: str,
            item_id: PydanticObjectId,
            quantity: int
    ) -> Optional[Dict[str, Any]]:
        """Set quantity of a cart item. Returns None when the item was removed instead."""
        if quantity <= 0:
            await CartService.remove_item(session_id, item_id)
            return None

        item = await CartItem.find_one({"_id": item_id, "session_id": session_id})
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart item not found"
            )

        product = await Product.get(item.product_id)
        if product is None:
            raise CartIntegrityError(item.id, item.product_id)

        item.quantity = quantity
        await item.save()
        return CartService.serialize_item(item, product)

    @staticmethod
    async def remove_item(session_id: str, item_id: PydanticObjectId) -> None:
        """Remove item from cart. Removing an unknown id is not an error."""
        await CartItem.find({"_id": item_id, "session_id": session_id}).delete()

    @staticmethod
    async def clear_cart(session_id: str) -> None:
        """Clear all items from cart"""
        await CartItem.find(CartItem.session_id == session_id).delete()
