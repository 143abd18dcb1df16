"""Configuration management for rsspod."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GENERATOR = "rsspod - https://pypi.org/project/rsspod/"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RSSPOD_", extra="ignore"
    )

    # Channel defaults
    generator: str = DEFAULT_GENERATOR

    # Indented output: prefix written at the start of every line, plus one
    # indent string per nesting level
    indent_prefix: str = "  "
    indent: str = "    "

    # Logging
    log_level: str = Field(
        default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
