"""Application configuration using Pydantic Settings."""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys (optional - fallback responses used when not configured)
    groq_api_key: str = ""  # Groq for Whisper transcription and LLM inference

    # Provider models
    transcription_model: str = "whisper-large-v3-turbo"
    transcription_language: str = "en"
    llm_model: str = "llama-3.3-70b-versatile"

    # Generation limits
    extraction_max_tokens: int = 300
    extraction_temperature: float = 0.1
    answer_max_tokens: int = 300
    answer_temperature: float = 0.3

    # Shared secret gate (empty = open)
    auth_password: str = ""

    # Database (empty = in-memory note store)
    database_url: str = ""

    # Pre-load the demo notes at startup
    seed_demo_notes: bool = False

    # Uploads
    max_audio_bytes: int = 25 * 1024 * 1024  # Whisper upload limit

    # App Settings
    debug: bool = True
    allowed_origins: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
