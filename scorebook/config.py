"""
Service configuration
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings from environment variables"""

    # Storage
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "scorebook.db")

    # Comma-separated extra origins allowed to call the API
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Overlay style used when the viewer does not pick one
    DEFAULT_THEME: str = os.getenv("DEFAULT_THEME", "midnight-pro")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


def configure_logging(level: str = None):
    """Root logging setup for the API process and the CLI"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
