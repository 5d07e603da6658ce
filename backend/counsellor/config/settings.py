"""
Application Settings for the Study-Abroad Counsellor

Centralized configuration using Pydantic Settings with .env support.
Nothing is required: without a Gemini key the scoring API still runs and
only the chat endpoint is unavailable.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google AI Configuration (accepts GOOGLE_API_KEY or GEMINI_API_KEY)
    google_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_temperature: float = 0.7
    gemini_max_output_tokens: int = 1024

    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # Catalog Configuration (None = packaged seed catalog)
    catalog_path: Optional[str] = None

    # Chat Configuration
    chat_context_universities: int = Field(5, ge=0, le=50)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def normalize_api_keys(self) -> "Settings":
        """Accept GEMINI_API_KEY as an alias for GOOGLE_API_KEY."""
        if not self.google_api_key and self.gemini_api_key:
            self.google_api_key = self.gemini_api_key
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode is never enabled in production."""
        return self.debug and not self.is_production

    @property
    def chat_enabled(self) -> bool:
        return bool(self.google_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
