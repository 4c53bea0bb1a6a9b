"""
Configuration Management

Two layers of configuration for the feedback report lambda:

- Settings: pydantic-settings based ambient configuration (logging,
  HTTP transport). Overridable via FEEDBACK_REPORT_* environment variables
  and loaded once per process.
- ReportConfig: the three endpoint/recipient values the report flow needs.
  These carry no defaults and are resolved fresh on every invocation from
  a settings provider (os.environ unless one is injected).
"""

import os
from collections.abc import Mapping
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reporting.exceptions import MissingSettingError

MS_FEEDBACK_BASE_URL_ENV = "MS_FEEDBACK_BASE_URL"
NOTIFICATION_BASE_URL_ENV = "NOTIFICATION_BASE_URL"
REPORT_EMAIL_ENV = "REPORT_EMAIL"

# Resolution order is fixed: the first missing setting is the one reported.
REQUIRED_SETTINGS: tuple[str, ...] = (
    MS_FEEDBACK_BASE_URL_ENV,
    NOTIFICATION_BASE_URL_ENV,
    REPORT_EMAIL_ENV,
)


class Settings(BaseSettings):
    """
    Ambient settings loaded from environment variables.

    Environment variables are prefixed with FEEDBACK_REPORT_ and are case-insensitive.
    Example: FEEDBACK_REPORT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDBACK_REPORT_",
        env_file=[".env.local", ".env"],  # Try .env.local first
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout applied to each outbound HTTP call (httpx default)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached ambient settings.

    Uses lru_cache to ensure settings are loaded only once.
    Call get_settings.cache_clear() in tests after changing the environment.
    """
    return Settings()


class ReportConfig(BaseModel):
    """Endpoints and recipient for one report invocation."""

    model_config = ConfigDict(frozen=True)

    ms_feedback_base_url: str = Field(..., min_length=1)
    notification_base_url: str = Field(..., min_length=1)
    report_email: str = Field(..., min_length=1)

    @property
    def feedback_report_url(self) -> str:
        """Full URL of the feedback report endpoint."""
        return f"{self.ms_feedback_base_url}/ms-feedback/v1/feedback/report"


def resolve_report_config(environ: Mapping[str, str] | None = None) -> ReportConfig:
    """
    Resolve the report configuration from a settings provider.

    Args:
        environ: Mapping to read settings from (default: os.environ)

    Returns:
        ReportConfig for this invocation

    Raises:
        MissingSettingError: For the first absent or empty setting,
            checked in REQUIRED_SETTINGS order
    """
    source = os.environ if environ is None else environ

    values: dict[str, str] = {}
    for name in REQUIRED_SETTINGS:
        value = source.get(name)
        if not value:
            raise MissingSettingError(name)
        values[name.lower()] = value

    return ReportConfig(**values)
