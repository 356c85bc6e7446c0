"""Centralised application settings loaded from environment / .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./rides.db"
    database_echo: bool = False

    # HTTP
    app_host: str = "0.0.0.0"
    app_port: int = 8010

    # Rate limiting (per client address)
    rate_limit_enabled: bool = True
    rate_limit_max: int = Field(100, ge=1)
    rate_limit_window_minutes: int = Field(15, ge=1)

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def rate_limit(self) -> str:
        """slowapi limit string, e.g. ``"100 per 15 minutes"``."""
        return f"{self.rate_limit_max} per {self.rate_limit_window_minutes} minutes"


settings = Settings()
