"""
Application Settings for the Admission Chance Engine

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

import logging
from functools import lru_cache
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings loaded from environment variables.

    HISTORICAL_ADJUSTMENT_ENABLED toggles the post-sigmoid GPA adjustment
    used by single-program prediction, so it can be tuned independently.
    """

    # Application Settings
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Scoring Configuration
    historical_adjustment_enabled: bool = True

    # Catalog Configuration
    catalog_path: Optional[str] = None  # JSON catalog; sample catalog when unset
    max_ranked_results: Optional[int] = None  # None = return every match

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("max_ranked_results")
    @classmethod
    def validate_max_ranked_results(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("MAX_RANKED_RESULTS must be at least 1")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
