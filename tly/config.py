"""
Client configuration via pydantic-settings.

All settings are loaded from ``TLY_``-prefixed environment variables (and an
optional .env file). Explicit constructor arguments always win.
"""

from __future__ import annotations

from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.t.ly"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TLY_", env_file=".env", extra="ignore")

    log_level: str = "WARNING"
    log_format: str = "console"  # or "json"

    @field_validator("log_format", mode="after")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return v


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TLY_", env_file=".env", extra="ignore")

    # Empty means "not configured"; TlyClient.from_settings refuses to start
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    # None leaves the httpx default timeout in place
    timeout: Optional[float] = None

    logging: Optional[LoggingSettings] = None

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "ClientSettings":
        if self.logging is None:
            self.logging = LoggingSettings()
        return self

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
