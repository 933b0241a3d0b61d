"""
Application settings module
Central place for environment variables and deployment configuration.
"""
from pathlib import Path
from functools import lru_cache

import yaml
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config files"""

    # Application
    APP_NAME: str = "Video Asset API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8091

    # Database
    DATABASE_PATH: str = "./data/videos.db"

    # Asset storage
    ASSETS_ROOT: str = "./assets"
    ASSETS_BASE_URL: str = "http://localhost:8091/assets"
    THUMBNAIL_MAX_MEMORY: int = 10 << 20  # 10 MiB

    # JWT Authentication
    JWT_SECRET_KEY: str = "your-secret-key-change-this-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "video-asset-api"
    JWT_EXPIRATION_HOURS: int = 1

    # Logging
    LOG_DIR: str = "./logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance

    Returns:
        Settings: Application settings
    """
    return Settings()


def load_database_config(config_path: Path = None) -> dict:
    """
    Load database configuration from YAML file

    Args:
        config_path: YAML file to read (defaults to config/database.yml)

    Returns:
        dict: Database configuration
    """
    config_path = config_path or Path(__file__).parent / "database.yml"

    if not config_path.exists():
        return {
            "database": {
                "check_same_thread": False,
                "timeout": 30,
                "foreign_keys": True,
                "journal_mode": "WAL",
            }
        }

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
