"""
Custom Exceptions for the Feedback Report Lambda

Each exception maps to one stage of the report flow and knows the HTTP
status and message it surfaces to the caller.
"""

from dataclasses import dataclass
from typing import Any

from reporting.models.outcome import ReportStage

DEFAULT_ERROR_STATUS = 500


class FeedbackReportError(Exception):
    """Base exception for the feedback report flow."""

    stage: ReportStage = ReportStage.INTERNAL

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    @property
    def http_status(self) -> int:
        """Status code returned to the caller."""
        return DEFAULT_ERROR_STATUS

    @property
    def response_message(self) -> str:
        """Message placed in the error response body."""
        return self.message


@dataclass
class MissingSettingError(FeedbackReportError):
    """A required environment setting is absent or empty."""

    setting_name: str

    stage = ReportStage.CONFIG

    def __init__(self, setting_name: str) -> None:
        self.setting_name = setting_name
        super().__init__(
            f"{setting_name} environment variable is not set",
            setting_name=setting_name,
        )


class MissingAuthorizationError(FeedbackReportError):
    """Inbound request carries no Authorization header."""

    stage = ReportStage.AUTHORIZATION

    def __init__(self) -> None:
        super().__init__("Authorization header is missing")

    @property
    def http_status(self) -> int:
        return 401


class UpstreamError(FeedbackReportError):
    """
    A downstream service call failed.

    status_code is the observed HTTP status, or None when the call failed
    before a status was obtained (connection error, timeout, unreadable body).
    """

    action: str = "call upstream service"

    def __init__(
        self,
        status_code: int | None = None,
        error_message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_message = error_message
        detail = str(status_code) if status_code is not None else (error_message or "Unknown error")
        super().__init__(
            f"Failed to {self.action}: {detail}",
            status_code=status_code,
            error_message=error_message,
        )

    @property
    def http_status(self) -> int:
        if self.status_code is None:
            return DEFAULT_ERROR_STATUS
        return self.status_code


class FeedbackFetchError(UpstreamError):
    """Feedback service returned non-200 or could not be reached."""

    stage = ReportStage.UPSTREAM_FETCH
    action = "fetch feedback report"


class NotificationSendError(UpstreamError):
    """Notification service returned outside [200, 300) or could not be reached."""

    stage = ReportStage.UPSTREAM_NOTIFY
    action = "send notification"
