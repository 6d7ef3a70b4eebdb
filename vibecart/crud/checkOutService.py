from datetime import datetime, timezone
from typing import Dict, Any, Optional

from vibecart.config.settings import settings
from vibecart.models.cartModel import CartItem
from vibecart.crud.cartService import CartService
from vibecart.schemas.checkOutSchema import CheckOutRequest
import logging

logger = logging.getLogger(__name__)


class CheckOutService:
    """Service layer for checkout. Receipts are returned, never stored."""

    @staticmethod
    def generate_order_id(now: datetime) -> str:
        """Order id is the configured prefix followed by epoch milliseconds."""
        return f"{settings.ORDER_ID_PREFIX}{int(now.timestamp() * 1000)}"

    @staticmethod
    async def checkout(
            session_id: str,
            customer: CheckOutRequest,
            now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Build a receipt for the session's cart and empty the cart.
        An empty cart gives a receipt with no items and zero totals.

        Only the items read for the receipt are deleted, so an item added while
        the checkout is running stays in the cart.
        """
        lines = await CartService.get_items_with_products(session_id)

        now = now or datetime.now(timezone.utc)

        items = []
        subtotal = 0
        for item, product in lines:
            line_total = product.price * item.quantity
            subtotal += line_total
            items.append({
                "product": product.name,
                "quantity": item.quantity,
                "price": product.price,
                "subtotal": round(line_total, 2),
            })

        total, tax, grand_total = CartService.price_summary(subtotal)

        receipt = {
            "order_id": CheckOutService.generate_order_id(now),
            "customer": customer.model_dump(),
            "items": items,
            "total": total,
            "tax": tax,
            "grand_total": grand_total,
            "timestamp": now,
        }

        item_ids = [item.id for item, _ in lines]
        if item_ids:
            await CartItem.find({"_id": {"$in": item_ids}}).delete()

        logger.info(
            f"Order {receipt['order_id']} placed by {customer.email}: "
            f"{len(items)} line(s), grand total {grand_total}"
        )
        return receipt
