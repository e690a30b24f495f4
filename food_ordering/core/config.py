"""Application configuration."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Menu persistence
    menu_file: Path = Path("menu_data.txt")

    # Shop
    shop_name: str = "Food Ordering System"
    currency_symbol: str = "$"

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FOOD_ORDERING_",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
