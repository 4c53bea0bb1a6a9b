"""
Notification Service Tools

Delivers the formatted report through the notification service. Only the
status code of the response is checked; its body is never read.
"""

import httpx
import structlog

from reporting.config import ReportConfig
from reporting.exceptions import NotificationSendError
from reporting.models.notification import NotificationRequest

log = structlog.get_logger()


def build_report_notification(config: ReportConfig, report_text: str) -> NotificationRequest:
    """Address the report text to the configured recipient."""
    return NotificationRequest(to=config.report_email, body=report_text)


def send_notification(
    config: ReportConfig,
    request: NotificationRequest,
    *,
    client: httpx.Client,
) -> int:
    """
    Send a notification.

    The notification base URL is the full request URL; no path is appended
    and no credential is forwarded.

    Args:
        config: Resolved report configuration
        request: Notification to deliver
        client: HTTP client used for the call

    Returns:
        HTTP status code of the notification service response

    Raises:
        NotificationSendError: On a status outside [200, 300) or transport failure
    """
    url = config.notification_base_url

    log.info(
        "sending_notification",
        url=url,
        subject=request.subject,
    )

    try:
        response = client.post(
            url,
            headers={"Content-Type": "application/json"},
            json=request.model_dump(),
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.error(
            "notification_transport_failed",
            url=url,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise NotificationSendError(
            error_message=f"transport error ({type(e).__name__}: {e})",
        ) from e

    if not 200 <= response.status_code < 300:
        log.error(
            "notification_send_failed",
            url=url,
            status_code=response.status_code,
        )
        raise NotificationSendError(status_code=response.status_code)

    log.info("notification_sent", url=url, status_code=response.status_code)

    return response.status_code
