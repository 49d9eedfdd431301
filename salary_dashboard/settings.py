"""
Module: settings

Purpose: Centralized configuration management for the salary dashboard.

Key Functions:
- get_settings: Load settings from environment variables
- Settings: Pydantic settings model with validation

Architecture Notes:
- Uses pydantic-settings for type-safe configuration
- Defaults reproduce the dashboard's Sankey canvas (700px wide minus margins)
- Environment variables (prefix SALARY_DASHBOARD_) override defaults
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for loading data and laying out the flow diagram."""

    model_config = SettingsConfigDict(
        env_prefix="SALARY_DASHBOARD_",
        env_file=".env",
        extra="ignore",
    )

    data_path: Path = Path("ds_salaries.csv")

    # Sankey canvas
    sankey_width: float = Field(default=620.0, gt=0)
    sankey_height: float = Field(default=250.0, gt=0)
    node_width: float = Field(default=15.0, gt=0)
    node_padding: float = Field(default=10.0, ge=0)
    min_node_height: float = Field(default=1.0, ge=0)

    strict_node_names: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
