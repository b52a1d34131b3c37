"""Application configuration using pydantic-settings."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Feed source (spreadsheet "publish to web" CSV export)
    shows_csv_url: str = Field(
        default="",
        validation_alias=AliasChoices("shows_csv_url", "gsheet_csv_url"),
    )

    # 5 = date, time, venue, city, tickets; 4 = legacy sheet without time
    expected_columns: int = 5

    # Fetch settings
    fetch_timeout: int = 30

    # IANA zone used to decide what "today" is; empty means server local time
    timezone: str = ""

    # API settings
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    log_level: str = "INFO"

    @field_validator("expected_columns")
    @classmethod
    def _check_expected_columns(cls, value: int) -> int:
        if value not in (4, 5):
            raise ValueError("expected_columns must be 4 or 5")
        return value


# Global settings instance
settings = Settings()
