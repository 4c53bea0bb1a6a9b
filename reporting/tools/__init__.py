# Report Tools
"""
Outbound calls to the feedback and notification services.
"""

from reporting.tools.feedback import fetch_feedback_report
from reporting.tools.gateway import HttpReportGateway, ReportGateway
from reporting.tools.notification import build_report_notification, send_notification

__all__ = [
    # Feedback service
    "fetch_feedback_report",
    # Notification service
    "build_report_notification",
    "send_notification",
    # Gateway
    "ReportGateway",
    "HttpReportGateway",
]
