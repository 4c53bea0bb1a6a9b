"""
GenerateFeedbackReport Lambda Handler

Main entry point for the HTTP-triggered feedback report Lambda.
Fetches today's aggregated feedback report and mails it as plain text
through the notification service.

Trigger: API Gateway (REST or HTTP API) proxy integration
Output: JSON response {"message": ...} or {"error": ...}

Flow:
1. Resolve MS_FEEDBACK_BASE_URL, NOTIFICATION_BASE_URL, REPORT_EMAIL
2. Require an Authorization header on the inbound request
3. Fetch the feedback report for now (UTC), forwarding Authorization
4. Format the report as plain text
5. Send the text to REPORT_EMAIL through the notification service
6. Map the outcome onto status code and JSON body

Any failing step ends the invocation; nothing is retried.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any

import structlog

from lambdas.generate_feedback_report.report_formatter import format_report
from reporting.config import ReportConfig, get_settings, resolve_report_config
from reporting.exceptions import FeedbackReportError, MissingAuthorizationError
from reporting.models.outcome import InvocationOutcome, ReportStage
from reporting.tools.gateway import HttpReportGateway, ReportGateway
from reporting.tools.notification import build_report_notification

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.basicConfig(format="%(message)s", level=get_settings().log_level)

log = structlog.get_logger()

AUTHORIZATION_HEADER = "Authorization"


def _get_authorization(headers: Mapping[str, Any] | None) -> str | None:
    """
    Find the Authorization header value.

    Header names are matched case-insensitively since HTTP APIs deliver
    them lower-cased.
    """
    if not headers:
        return None

    wanted = AUTHORIZATION_HEADER.lower()
    for name, value in headers.items():
        if name.lower() == wanted and value is not None:
            return value
    return None


def _run_report(config: ReportConfig, authorization: str, gateway: ReportGateway) -> None:
    """Fetch, format and send the report."""
    result = gateway.fetch_feedback(config, authorization)

    report_text = format_report(result)
    log.debug("report_formatted", length=len(report_text))

    gateway.send_notification(config, build_report_notification(config, report_text))


def generate_report(
    headers: Mapping[str, Any] | None,
    *,
    gateway: ReportGateway | None = None,
    environ: Mapping[str, str] | None = None,
) -> InvocationOutcome:
    """
    Run one report invocation.

    Args:
        headers: Headers of the inbound request
        gateway: Outbound transport (default: HttpReportGateway over httpx)
        environ: Settings provider (default: os.environ)

    Returns:
        InvocationOutcome describing success or the failing stage
    """
    try:
        config = resolve_report_config(environ)

        authorization = _get_authorization(headers)
        if authorization is None:
            raise MissingAuthorizationError()

        if gateway is None:
            with HttpReportGateway() as http_gateway:
                _run_report(config, authorization, http_gateway)
        else:
            _run_report(config, authorization, gateway)

    except FeedbackReportError as e:
        log.error(
            "report_invocation_failed",
            stage=e.stage.value,
            status_code=e.http_status,
            error=e.response_message,
        )
        return InvocationOutcome.failure(e.stage, e.http_status, e.response_message)

    except Exception as e:
        log.exception(
            "report_invocation_error",
            error=str(e),
            error_type=type(e).__name__,
        )
        return InvocationOutcome.failure(ReportStage.INTERNAL, 500, str(e))

    return InvocationOutcome.success()


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Main Lambda handler for the feedback report.

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        Lambda proxy response with statusCode, headers and JSON body
    """
    start_time = time.time()
    request_log = log.bind(request_id=getattr(context, "aws_request_id", None))

    request_log.info("feedback_report_requested")

    outcome = generate_report(event.get("headers"))

    request_log.info(
        "feedback_report_completed",
        status_code=outcome.status_code,
        stage=outcome.stage.value if outcome.stage else None,
        duration_ms=round((time.time() - start_time) * 1000, 2),
    )

    return outcome.to_response()
