"""
Application configuration loaded from environment variables.

Only the I/O boundary is configurable; the commission rate and bonus
schedule are fixed business rules and live in the domain package.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    All settings are loaded from environment variables prefixed with
    DIVIDENDS_ (e.g. DIVIDENDS_OUTPUT_FORMAT=json).
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIVIDENDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Report output
    output_path: Path = Field(
        default=Path("dividends.xml"),
        description="Where the dividend report is written"
    )
    output_format: Literal["xml", "json"] = Field(
        default="xml",
        description="Report serialization format"
    )

    # Input
    input_encoding: str = Field(
        default="utf-8",
        description="Text encoding of ledger files"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()
