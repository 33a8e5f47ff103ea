"""
FoodBin settings, read once from the environment or a .env file.

The bin's door mode and capacity are fixed for the life of the process.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    # Storage bin
    storage_capacity: int = Field(default=8, ge=1, description="Slots in the bin")
    use_opposite_door: bool = Field(
        default=False,
        description="True: in at the front door, out at the opposite door (FIFO). "
        "False: front door only (LIFO).",
    )
    best_before_max_days: int = Field(
        default=14, ge=0, description="Latest accepted best-before, in days from today"
    )

    # Application / server
    app_name: str = "FoodBin"
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # HTTP surface
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]
    api_prefix: str = ""
    api_title: str = "FoodBin API"
    api_description: str = "Fixed-capacity food storage bin with stack or queue exit order"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        return Environment(v.lower()) if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
