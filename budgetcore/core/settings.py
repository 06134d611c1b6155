"""Configuration and environment settings for the budgetcore service."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the budgetcore service."""

    database_url: str = "sqlite:///budgets.db"
    database_echo: bool = False
    log_level: str = "INFO"
    log_file: str | None = "logs/budgetcore.log"
    default_budget_color: str = "#3B82F6"
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
