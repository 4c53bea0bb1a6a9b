# Shared Infrastructure for the Feedback Report Lambda
"""
Shared components for the feedback report lambda.

This package provides:
- Configuration management (ambient settings and per-invocation report config)
- Pydantic models for the feedback and notification services
- Outbound clients for both services
- Custom exceptions
"""

from reporting.config import ReportConfig, Settings, get_settings, resolve_report_config
from reporting.exceptions import (
    FeedbackFetchError,
    FeedbackReportError,
    MissingAuthorizationError,
    MissingSettingError,
    NotificationSendError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "ReportConfig",
    "resolve_report_config",
    # Exceptions
    "FeedbackReportError",
    "MissingSettingError",
    "MissingAuthorizationError",
    "FeedbackFetchError",
    "NotificationSendError",
]
