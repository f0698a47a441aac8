"""Configuration for the image tagging service using pydantic-settings."""

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Image tagging service settings loaded from environment variables."""

    # LLM API (chat completions endpoint lives under /v1/chat/completions)
    llm_api_base_url: str = "http://localhost:8080"
    llm_api_token: SecretStr = SecretStr("")
    llm_model: str = "gpt-5"

    # HTTP client configuration
    llm_timeout: float = 100.0  # seconds

    # Optional sampling parameters, omitted from the request when unset
    llm_temperature: Optional[float] = None
    llm_max_tokens: Optional[int] = None
    llm_top_p: Optional[float] = None

    # CORS configuration (comma-separated)
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Application settings
    app_name: str = "Image Tagging Service"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
