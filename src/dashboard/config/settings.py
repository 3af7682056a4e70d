"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Portfolio Dashboard"
    app_version: str = "0.1.0"

    log_level: str = "INFO"
    backend_port: int = 8001

    # Quote resolution
    quote_cache_ttl_seconds: float = 300
    quote_fetch_timeout_seconds: float = 3.0
    exchange_suffix: str = ".NS"
    recognized_suffixes: list[str] = [".NS", ".BO"]

    # Symbols the external price sources do not carry
    unavailable_symbols: list[str] = ["SAVANI", "BAJAJHLDNG", "GENSOL"]

    # Secondary quote source
    alpha_vantage_url: str = "https://www.alphavantage.co/query"
    alpha_vantage_api_key: str = "demo"

    # Client polling interval advertised on the root endpoint
    refresh_interval_seconds: int = 15


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
