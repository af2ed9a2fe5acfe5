"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "Institutelist"
    mongo_server_selection_timeout_ms: int = 5000

    # CORS
    cors_origins: list[str] = ["*"]

    # Nested institute arrays. Empty means any well-formed field name.
    nested_array_fields: list[str] = []

    # Object storage (S3). Uploads are rejected when no bucket is set.
    s3_bucket_name: str = ""
    aws_region: str = "us-east-1"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
