"""
Feedback Service Tools

Single-shot client for the ms-feedback report endpoint. The caller's
Authorization header is forwarded verbatim; nothing is retried.
"""

from datetime import datetime

import httpx
import structlog

from reporting.config import ReportConfig
from reporting.exceptions import FeedbackFetchError
from reporting.models.feedback import FeedbackReportRequest, FeedbackReportResult

log = structlog.get_logger()

FEEDBACK_SUCCESS_STATUS = 200


def _build_headers(authorization: str) -> dict[str, str]:
    return {
        "accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": authorization,
    }


def fetch_feedback_report(
    config: ReportConfig,
    authorization: str,
    *,
    client: httpx.Client,
    report_date: datetime | None = None,
) -> FeedbackReportResult:
    """
    Fetch the aggregated feedback report for today (UTC).

    Args:
        config: Resolved report configuration
        authorization: Authorization header value of the inbound request
        client: HTTP client used for the call
        report_date: Override the report instant (default: now, UTC)

    Returns:
        Parsed FeedbackReportResult

    Raises:
        FeedbackFetchError: On any status other than 200, on transport
            failure, or when the body is not a JSON object
    """
    if report_date is None:
        request = FeedbackReportRequest()
    else:
        request = FeedbackReportRequest(date=report_date)

    url = config.feedback_report_url
    payload = request.model_dump(mode="json")

    log.info("fetching_feedback_report", url=url, date=payload["date"])

    try:
        response = client.post(url, headers=_build_headers(authorization), json=payload)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.error(
            "feedback_report_transport_failed",
            url=url,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise FeedbackFetchError(
            error_message=f"transport error ({type(e).__name__}: {e})",
        ) from e

    if response.status_code != FEEDBACK_SUCCESS_STATUS:
        log.error(
            "feedback_report_fetch_failed",
            url=url,
            status_code=response.status_code,
        )
        raise FeedbackFetchError(status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        log.error("feedback_report_malformed", url=url, error=str(e))
        raise FeedbackFetchError(error_message="malformed response body") from e

    if not isinstance(data, dict):
        log.error("feedback_report_malformed", url=url, body_type=type(data).__name__)
        raise FeedbackFetchError(error_message="malformed response body")

    result = FeedbackReportResult.model_validate(data)

    log.info(
        "feedback_report_fetched",
        has_evaluations_per_day=result.evaluations_per_day is not None,
        has_evaluations_per_urgency=result.evaluations_per_urgency is not None,
    )

    return result
