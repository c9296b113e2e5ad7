"""
Configuration management for textfilters.

The conversion functions take no options; these settings drive logging and
the command-line tool.
"""

from pathlib import Path
from typing import Optional, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from textfilters.styles import CaseStyle

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Main application settings."""

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # Template rendering
    filter_prefix: str = ""
    autoescape: bool = False
    template_encoding: str = "utf-8"

    # CLI
    default_style: CaseStyle = Field(default=CaseStyle.SNAKE)

    @field_validator("default_style", mode="before")
    @classmethod
    def parse_style(cls, value: Any) -> CaseStyle:
        """Accept style values and filter names, e.g. snake or snake_case."""
        return CaseStyle.parse(value)

    class Config:
        env_prefix = "TEXTFILTERS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def update_settings(**kwargs: Any) -> Settings:
    """Update settings with new values."""
    global settings
    settings = Settings(**kwargs)
    return settings
