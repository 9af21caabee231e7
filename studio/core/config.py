"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Studio"
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Key-value store
    STORE_URL: str = "sqlite:///./studio.db"

    # Seed data
    SEED_DEFAULTS: bool = True
    RESEED_ON_EMPTY: bool = False
    SEED_TRAINER_USERNAME: str = "admin"
    SEED_TRAINER_PASSWORD: str = "admin"
    SEED_CLIENT_USERNAME: str = "demo"
    SEED_CLIENT_PASSWORD: str = "demo"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
