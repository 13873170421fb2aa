"""Configuration management for Mercdex using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="MERCDEX_",
        extra="ignore",
    )

    # Data resources
    data_dir: Path = Field(default=Path("./data"), description="Directory holding roster data")
    roster_file: str = Field(default="mercs.json", description="Roster resource file name")
    filters_file: str = Field(
        default="filters.json", description="Filter-option resource file name"
    )

    # Progression bounds
    max_level: int = Field(default=31, ge=1, description="Highest selectable level")
    max_reboot: int = Field(default=7, ge=0, description="Highest selectable reboot count")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    @property
    def roster_path(self) -> Path:
        """Get the roster resource path."""
        return self.data_dir / self.roster_file

    @property
    def filters_path(self) -> Path:
        """Get the filter-option resource path."""
        return self.data_dir / self.filters_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
