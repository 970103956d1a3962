# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    DATABASE_URL: str
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Dish Order API"
    DEBUG: bool = False

    CORS_ORIGINS: str = "http://localhost:3000"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    REPORT_TIMEZONE: str = "UTC"  # IANA name, defines the "day" of the daily sales report
    SEED_MENU_ON_STARTUP: bool = True

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


settings = Settings()
