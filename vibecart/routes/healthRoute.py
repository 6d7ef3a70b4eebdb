from datetime import datetime, timezone
from fastapi import APIRouter

from vibecart.config import database
from vibecart.schemas.commonSchema import HealthRead

router = APIRouter()


@router.get("/health", response_model=HealthRead, tags=["health"])
async def health():
    """Report store connectivity. Always answers 200."""
    connected = await database.is_connected()
    return {
        "status": "OK",
        "database": "Connected" if connected else "Disconnected",
        "timestamp": datetime.now(timezone.utc),
    }
