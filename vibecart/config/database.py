from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from vibecart.models.productModel import Product
from vibecart.models.cartModel import CartItem
from .settings import settings
import logging

logger = logging.getLogger(__name__)

# Set by startDB(), read by the health check.
client: Optional[AsyncIOMotorClient] = None


def create_client():
    return AsyncIOMotorClient(settings.MONGO_URI, uuidRepresentation="standard", serverSelectionTimeoutMS=5000)


# Call this from within your event loop to get beanie setup.
async def startDB():
    global client

    client = create_client()
    database = client[settings.MONGO_DATABASE]

    await init_beanie(database=database, document_models=[Product, CartItem])
    logger.info(f"Connected to MongoDB database '{settings.MONGO_DATABASE}'")


async def is_connected() -> bool:
    """Ping the server; False when there is no client or the ping fails."""
    if client is None:
        return False
    try:
        await client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning(f"MongoDB ping failed: {str(e)}")
        return False
