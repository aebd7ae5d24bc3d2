"""
Application settings.

Values come from `TALLY_*` environment variables or a local `.env` file.
`mode` plays the role of the bundler's NODE_ENV switch.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TALLY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    mode: Literal["production", "development"] = Field(
        default="production",
        description="Runtime mode; development turns on debug logging.",
    )
    url: str = Field(
        default="https://example.com",
        min_length=8,
        description="Site root used to build profile URLs.",
    )
    greeting: str = Field(default="Hello there {name}", min_length=1)
    default_match: str = Field(
        default="Flexbox",
        description="Label substring used when a request does not give one.",
    )
    log_level: Optional[LogLevel] = Field(default=None, description="Overrides the mode-derived level.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    def resolved_log_level(self) -> int:
        if self.log_level:
            return logging.getLevelName(self.log_level)
        return logging.DEBUG if self.mode == "development" else logging.INFO


def say_hi(name: str, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return settings.greeting.format(name=name)
