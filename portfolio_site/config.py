"""Application configuration loaded from environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Centralised settings — no hardcoded values anywhere else."""

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: Optional[str] = Field(None)
    groq_api_url: str = Field("https://api.groq.com/openai/v1/chat/completions")
    groq_model: str = Field("llama-3.3-70b-versatile")
    chat_max_tokens: int = Field(1000, gt=0)
    chat_temperature: float = Field(0.7, ge=0.0, le=2.0)
    upstream_timeout_seconds: Optional[float] = Field(60.0)

    # CORS
    allowed_origins: str = Field("*")

    # App
    app_env: str = Field("development")
    log_level: str = Field("INFO")

    # Chat client
    api_base_url: str = Field("http://localhost:8000")
    section_change_delay_seconds: float = Field(0.5, ge=0.0)

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
