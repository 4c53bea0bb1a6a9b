"""
Pytest Configuration and Shared Fixtures

Provides report settings, sample feedback payloads, and mock HTTP transports.
"""

import os
from typing import Any

import pytest

# Keep ambient settings deterministic before importing application modules
os.environ["FEEDBACK_REPORT_LOG_LEVEL"] = "DEBUG"

from reporting.config import ReportConfig, get_settings  # noqa: E402
from reporting.tools.gateway import HttpReportGateway  # noqa: E402
from tests.mocks.mock_http import MockHTTPTransport  # noqa: E402

FEEDBACK_BASE_URL = "http://localhost:9084"
NOTIFICATION_BASE_URL = "http://localhost:8080"
REPORT_EMAIL = "test@example.com"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload ambient settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# --- Configuration Fixtures ---


@pytest.fixture
def report_environ() -> dict[str, str]:
    """Environment with all three report settings present."""
    return {
        "MS_FEEDBACK_BASE_URL": FEEDBACK_BASE_URL,
        "NOTIFICATION_BASE_URL": NOTIFICATION_BASE_URL,
        "REPORT_EMAIL": REPORT_EMAIL,
    }


@pytest.fixture
def report_config() -> ReportConfig:
    return ReportConfig(
        ms_feedback_base_url=FEEDBACK_BASE_URL,
        notification_base_url=NOTIFICATION_BASE_URL,
        report_email=REPORT_EMAIL,
    )


@pytest.fixture
def authorization() -> str:
    return "Bearer test-token"


@pytest.fixture
def inbound_headers(authorization: str) -> dict[str, str]:
    return {"Authorization": authorization, "Content-Type": "application/json"}


# --- Feedback Payload Fixtures ---


@pytest.fixture
def feedback_payload() -> dict[str, Any]:
    """Feedback report with one day and one urgency entry."""
    return {
        "evaluationsPerDay": [{"day": "2026-01-03", "quantity": 6}],
        "evaluationsPerUrgency": [{"urgency": "LOW", "quantity": 4}],
    }


@pytest.fixture
def full_feedback_payload() -> dict[str, Any]:
    """Feedback report with several entries per section."""
    return {
        "evaluationsPerDay": [
            {"day": "2026-01-03", "quantity": 6},
            {"day": "2026-01-02", "quantity": 2},
        ],
        "evaluationsPerUrgency": [
            {"urgency": "LOW", "quantity": 4},
            {"urgency": "URGENT", "quantity": 5},
        ],
    }


# --- HTTP Mocking Fixtures ---


@pytest.fixture
def transport() -> MockHTTPTransport:
    return MockHTTPTransport()


@pytest.fixture
def gateway(transport: MockHTTPTransport):
    """HttpReportGateway routed through the mock transport."""
    client = transport.client()
    yield HttpReportGateway(client)
    client.close()


# --- Lambda Event Fixtures ---


@pytest.fixture
def api_gateway_event(inbound_headers: dict[str, str]) -> dict[str, Any]:
    """API Gateway REST proxy event."""
    return {
        "resource": "/report",
        "path": "/report",
        "httpMethod": "POST",
        "headers": inbound_headers,
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def http_api_event(authorization: str) -> dict[str, Any]:
    """API Gateway HTTP API (payload v2) event with lower-cased headers."""
    return {
        "version": "2.0",
        "routeKey": "POST /report",
        "rawPath": "/report",
        "headers": {"authorization": authorization, "content-type": "application/json"},
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """Minimal Lambda context."""

    class _Context:
        aws_request_id = "req-0001"
        function_name = "generate-feedback-report"

    return _Context()
