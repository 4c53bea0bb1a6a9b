"""
Report Gateway

The two outbound operations of the report flow behind one interface, so
the handler can run against any transport.
"""

from typing import Protocol

import httpx

from reporting.config import ReportConfig, get_settings
from reporting.models.feedback import FeedbackReportResult
from reporting.models.notification import NotificationRequest
from reporting.tools.feedback import fetch_feedback_report
from reporting.tools.notification import send_notification


class ReportGateway(Protocol):
    """Outbound operations used by the report handler."""

    def fetch_feedback(self, config: ReportConfig, authorization: str) -> FeedbackReportResult:
        ...

    def send_notification(self, config: ReportConfig, request: NotificationRequest) -> None:
        ...


class HttpReportGateway:
    """
    ReportGateway backed by an httpx client.

    When no client is given, one is created with the configured timeout
    and closed together with the gateway.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=get_settings().http_timeout_seconds)
        self._client = client

    def fetch_feedback(self, config: ReportConfig, authorization: str) -> FeedbackReportResult:
        return fetch_feedback_report(config, authorization, client=self._client)

    def send_notification(self, config: ReportConfig, request: NotificationRequest) -> None:
        send_notification(config, request, client=self._client)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpReportGateway":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
