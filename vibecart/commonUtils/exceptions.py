class CartIntegrityError(Exception):
    """A cart item references a product that no longer exists."""

    def __init__(self, cart_item_id, product_id):
        self.cart_item_id = cart_item_id
        self.product_id = product_id
        super().__init__(
            f"Cart item {cart_item_id} references missing product {product_id}"
        )
