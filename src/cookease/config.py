"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str
    jwt_expire_hours: int = 24
    bcrypt_rounds: int = 12
    google_client_id: str | None = None
    google_client_secret: str | None = None
    google_callback_url: str | None = None
    frontend_url: str = "http://localhost:5173"
    openai_api_key: str
    openai_model: str = "gpt-4.1-mini"
    recommendation_timeout_seconds: float = 30.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def google_enabled(self) -> bool:
        """Return True when all Google OAuth settings are present."""
        return bool(
            self.google_client_id
            and self.google_client_secret
            and self.google_callback_url
        )


def parse_cors_origins(raw: str) -> list[str]:
    """Parse a comma separated list of allowed origins."""
    origins: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().rstrip("/")
        if value:
            origins.append(value)
    return origins
