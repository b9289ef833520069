"""Settings for the toolkit CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

These settings only affect the toolkit's own diagnostics. Action inputs are
read through `actions_toolkit.core.input`, never through settings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ToolkitSettings(BaseSettings):
    """Settings for the toolkit.

    Environment variables:
    - ACTIONS_TOOLKIT_LOG_LEVEL   (optional)
    - ACTIONS_TOOLKIT_LOG_FORMAT  (optional, json | text)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ToolkitSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="WARNING",
        description="Level of the diagnostic logger (written to stderr)",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Diagnostic log format",
    )

    model_config = SettingsConfigDict(
        env_prefix="ACTIONS_TOOLKIT_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level
