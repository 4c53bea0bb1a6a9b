"""
Notification Service Models
"""

from pydantic import BaseModel, ConfigDict, Field

REPORT_SUBJECT = "Feedback Report"


class NotificationRequest(BaseModel):
    """Addressed message handed to the notification service."""

    model_config = ConfigDict(frozen=True)

    to: str = Field(..., description="Recipient address")
    subject: str = Field(default=REPORT_SUBJECT, description="Message subject")
    body: str = Field(..., description="Plain text message body")
