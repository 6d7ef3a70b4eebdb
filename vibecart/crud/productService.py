from typing import List, Optional
from vibecart.models.productModel import Product
import logging

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Bluetooth Headphones",
        "price": 79.99,
        "description": "High-quality wireless headphones with noise cancellation",
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=300&h=300&fit=crop",
        "category": "Electronics",
    },
    {
        "name": "Smart Fitness Watch",
        "price": 199.99,
        "description": "Track your fitness and health metrics",
        "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=300&h=300&fit=crop",
        "category": "Electronics",
    },
    {
        "name": "Organic Cotton T-Shirt",
        "price": 29.99,
        "description": "Comfortable and sustainable cotton t-shirt",
        "image": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=300&h=300&fit=crop",
        "category": "Clothing",
    },
    {
        "name": "Stainless Steel Water Bottle",
        "price": 24.99,
        "description": "Keep your drinks hot or cold for hours",
        "image": "https://images.unsplash.com/photo-1602143407151-7111542de6e8?w=300&h=300&fit=crop",
        "category": "Accessories",
    },
    {
        "name": "Laptop Backpack",
        "price": 59.99,
        "description": "Durable backpack with laptop compartment",
        "image": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=300&h=300&fit=crop",
        "category": "Accessories",
    },
    {
        "name": "Ceramic Coffee Mug Set",
        "price": 34.99,
        "description": "Set of 4 beautiful ceramic mugs",
        "image": "https://images.unsplash.com/photo-1544787219-7f47ccb76574?w=300&h=300&fit=crop",
        "category": "Home",
    },
]


class ProductService:
    """Service layer for product operations"""

    @staticmethod
    async def seed_products() -> int:
        """Insert the sample catalog if the collection is empty. Returns the number inserted."""
        count = await Product.count()
        if count > 0:
            logger.info(f"Product catalog already has {count} products, skipping seed")
            return 0

        await Product.insert_many([Product(**data) for data in SAMPLE_PRODUCTS])
        logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
        return len(SAMPLE_PRODUCTS)

    @staticmethod
    async def list_products(category: Optional[str] = None) -> List[Product]:
        """Get every product, optionally only one category"""
        query = {}

        if category:
            query["category"] = category

        return await Product.find(query).to_list()
