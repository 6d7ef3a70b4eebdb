from datetime import datetime
from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthRead(BaseModel):
    status: str
    database: str  # "Connected" or "Disconnected"
    timestamp: datetime

