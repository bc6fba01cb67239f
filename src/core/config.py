"""Application configuration using Pydantic V2."""

from datetime import date

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="econ-dashboard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    page_title: str = Field(default="Economic Comparison Dashboard", description="Browser title")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Market data
    min_stock_date: date = Field(
        default=date(2007, 1, 1), description="Earliest selectable date for stock prices"
    )
    default_lookback_days: int = Field(
        default=365, gt=0, description="Length of the default stock date range"
    )
    fetch_attempts: int = Field(
        default=1, ge=1, description="Attempts per market-data request (1 = no retry)"
    )


# Singleton instance
settings = Settings()
