"""Configuration settings for the marketplace listing service"""

from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    PROJECT_NAME: str = "Marketplace Listing Service"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 9000

    # CORS Settings
    FRONT_URL: str = "http://localhost:3000"

    # Storage Settings
    STORAGE_BACKEND: Literal["sqlite", "json"] = "sqlite"
    DATABASE_URL: str = "sqlite:///db/marketplace.sqlite3"
    ITEMS_JSON_PATH: str = "items.json"

    # Image Settings
    IMAGE_DIR: str = "images"
    DEFAULT_IMAGE: str = "default.jpg"

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
