"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Chat Completion API Configuration
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "gpt-4"
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 1000
    LLM_TIMEOUT_SECONDS: float = 60.0  # Applied to connect, read and write

    # User Settings Configuration
    DEFAULT_LANGUAGE: str = "english"  # Options: english, spanish
    PROPERTIES_STORAGE_PATH: str = "~/.sheet_grammar/properties"  # One JSON file per user

    # Application Configuration
    LOG_LEVEL: str = "INFO"

    # Logging Configuration (Optional - per-module log levels)
    APP_LOG_LEVEL: Optional[str] = None
    HTTPX_LOG_LEVEL: Optional[str] = None
    HTTPCORE_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
