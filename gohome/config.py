"""
Configuration management using Pydantic settings.
Handles the MongoDB connection string, token secret, and server options.
"""

from pydantic import validator
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings read from the environment and an optional .env file."""

    # Application configuration
    app_name: str = "go-home"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 15000
    cors_origins: List[str] = ["*"]

    # Document store configuration (Mongo_URI / MONGO_URI both match)
    mongo_uri: str = "mongodb://localhost:27017"
    database_name: str = "go-home"
    server_selection_timeout_ms: int = 5000

    # Token configuration
    access_token_secret: str = "go-home-development-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 30

    # Password hashing
    bcrypt_rounds: int = 10

    # Business rules
    booking_limit: int = 2

    @validator("access_token_secret")
    def validate_access_token_secret(cls, v):
        """Token secret must be present."""
        if not v or not v.strip():
            raise ValueError("ACCESS_TOKEN_SECRET is required")
        return v

    @validator("environment")
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @validator("bcrypt_rounds")
    def validate_bcrypt_rounds(cls, v):
        # bcrypt accepts log2 rounds in 4..31
        if v < 4 or v > 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @validator("booking_limit")
    def validate_booking_limit(cls, v):
        if v < 1:
            raise ValueError("booking_limit must be at least 1")
        return v

    @validator("log_level")
    def normalize_log_level(cls, v):
        return v.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def redacted_mongo_uri(self) -> str:
        """Connection string with credentials stripped, safe for logs."""
        if "@" not in self.mongo_uri:
            return self.mongo_uri
        scheme, _, rest = self.mongo_uri.partition("://")
        return f"{scheme}://***@{rest.split('@', 1)[1]}"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


settings = get_settings()
