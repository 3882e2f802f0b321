"""Settings for the reference host and logging.

Values come from ``SKETCHUNITS_*`` environment variables.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Reference host locale and model units options
    decimal_separator: Literal[".", ","] = "."
    length_format: int = Field(default=0, ge=0, le=3)  # 0 = decimal
    length_unit: int = Field(default=4, ge=0, le=4)  # 4 = meters
    length_precision: int = Field(default=1, ge=0)
    area_labels: Literal["abbreviated", "legacy"] = "abbreviated"

    model_config = SettingsConfigDict(env_prefix="SKETCHUNITS_")


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the settings singleton so the next call re-reads the environment."""
    global _settings
    _settings = None
