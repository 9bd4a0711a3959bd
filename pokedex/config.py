"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the working directory as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATA_DIR: Path = DEFAULT_DATA_DIR
    LOG_LEVEL: str = "WARNING"

    # Demo data
    SEED_DEMO_DATA: bool = True
    DEMO_SEED: Optional[int] = None
    STARTING_MONEY: int = 1_000_000


settings = Settings()
