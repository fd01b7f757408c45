"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    db_name: str = "excel_data"
    mongo_tls: bool = False
    mongo_timeout_ms: int = 5000

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 500

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
