"""
HMPI Configuration Settings
"""
from typing import List

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App settings
    APP_NAME: str = "HMPI Groundwater API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API settings
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # Largest number of samples accepted by the batch endpoints
    MAX_BATCH_SIZE: int = 500

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "HMPI_"
        extra = "ignore"  # Ignore extra env vars


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
