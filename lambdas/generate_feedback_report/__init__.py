"""
GenerateFeedbackReport Lambda

HTTP-triggered Lambda that fetches the aggregated feedback report from
ms-feedback and forwards it as plain text to the notification service.

Components:
- handler: Lambda entry point and outcome mapping
- report_formatter: Plain-text rendering of the feedback report

Flow:
1. Resolve endpoint and recipient settings from the environment
2. Check the inbound Authorization header
3. Fetch today's feedback report
4. Format it as text
5. Send it to the report recipient
"""

from lambdas.generate_feedback_report.handler import generate_report, lambda_handler
from lambdas.generate_feedback_report.report_formatter import format_report

__all__ = [
    "lambda_handler",
    "generate_report",
    "format_report",
]
