# Report Models
"""
Pydantic models for the feedback service, the notification service and
the invocation outcome.
"""

from reporting.models.feedback import (
    DayEvaluation,
    FeedbackReportRequest,
    FeedbackReportResult,
    UrgencyEvaluation,
    format_utc_instant,
)
from reporting.models.notification import REPORT_SUBJECT, NotificationRequest
from reporting.models.outcome import (
    SUCCESS_MESSAGE,
    InvocationOutcome,
    ReportStage,
)

__all__ = [
    # Feedback service
    "DayEvaluation",
    "UrgencyEvaluation",
    "FeedbackReportRequest",
    "FeedbackReportResult",
    "format_utc_instant",
    # Notification service
    "REPORT_SUBJECT",
    "NotificationRequest",
    # Outcome
    "SUCCESS_MESSAGE",
    "InvocationOutcome",
    "ReportStage",
]
