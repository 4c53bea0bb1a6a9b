"""
Report Formatter

Renders a FeedbackReportResult as the plain-text body of the report
notification. Pure and deterministic: the same input always yields the
same text, byte for byte.

Layout:

    Feedback Report
    ===============

    Evaluations per day:
      <day>: <quantity>

    Evaluations per urgency:
      <urgency>: <quantity>

A section is rendered whenever its key was present in the feedback
response, even when the list is empty. The urgency section is always last
and has no trailing blank line.
"""

from reporting.models.feedback import FeedbackReportResult

REPORT_TITLE = "Feedback Report"
DAY_SECTION_TITLE = "Evaluations per day:"
URGENCY_SECTION_TITLE = "Evaluations per urgency:"


def format_report(result: FeedbackReportResult) -> str:
    """Render the report text for a feedback report result."""
    parts = [REPORT_TITLE, "\n", "=" * len(REPORT_TITLE), "\n\n"]

    if result.evaluations_per_day is not None:
        parts.append(f"{DAY_SECTION_TITLE}\n")
        parts.extend(
            f"  {evaluation.day}: {evaluation.quantity}\n"
            for evaluation in result.evaluations_per_day
        )
        parts.append("\n")

    if result.evaluations_per_urgency is not None:
        parts.append(f"{URGENCY_SECTION_TITLE}\n")
        parts.extend(
            f"  {evaluation.urgency}: {evaluation.quantity}\n"
            for evaluation in result.evaluations_per_urgency
        )

    return "".join(parts)
