"""
API configuration settings.
"""

from pydantic_settings import BaseSettings
from typing import List

from src.core.constants import DEFAULT_SEARCH_BUDGET


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Solver
    SEARCH_BUDGET: int = DEFAULT_SEARCH_BUDGET

    class Config:
        env_file = ".env"


settings = Settings()
