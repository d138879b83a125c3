"""
Calculator configuration
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings from environment variables"""

    # SQLite file holding stored matches
    STORAGE_PATH: str = os.getenv("DUCKWORTH_LEWIS_STORAGE", "store.db")

    LOG_LEVEL: str = os.getenv("DLC_LOG_LEVEL", "WARNING").upper()

    # Extra API origins (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")


settings = Settings()


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
