from typing import List

from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DATABASE: str = os.getenv("MONGO_DATABASE", "ecom-cart")

    PORT: int = int(os.getenv("PORT", "5000"))
    CLIENT_ORIGIN: str = os.getenv("CLIENT_ORIGIN", "*")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    TAX_RATE: float = float(os.getenv("TAX_RATE", "0.08"))
    ORDER_ID_PREFIX: str = os.getenv("ORDER_ID_PREFIX", "ORD-")
    SEED_ON_STARTUP: bool = True

    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    RATE_LIMITING_ENABLED: bool = False

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CLIENT_ORIGIN.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# create a singleton instance
settings = Settings()
