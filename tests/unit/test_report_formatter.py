"""
Unit tests for the plain-text report formatter.
"""

from reporting.models.feedback import FeedbackReportResult

from lambdas.generate_feedback_report.report_formatter import format_report

HEADER = "Feedback Report\n===============\n\n"


def _result(payload: dict) -> FeedbackReportResult:
    return FeedbackReportResult.model_validate(payload)


class TestFormatReport:
    """Tests for format_report."""

    def test_both_sections_exact(self, feedback_payload):
        """Exact layout with one entry per section."""
        text = format_report(_result(feedback_payload))

        assert text == (
            "Feedback Report\n"
            "===============\n"
            "\n"
            "Evaluations per day:\n"
            "  2026-01-03: 6\n"
            "\n"
            "Evaluations per urgency:\n"
            "  LOW: 4\n"
        )

    def test_multiple_entries_in_order(self, full_feedback_payload):
        text = format_report(_result(full_feedback_payload))

        assert text == (
            HEADER
            + "Evaluations per day:\n"
            "  2026-01-03: 6\n"
            "  2026-01-02: 2\n"
            "\n"
            "Evaluations per urgency:\n"
            "  LOW: 4\n"
            "  URGENT: 5\n"
        )

    def test_only_days(self):
        text = format_report(_result({
            "evaluationsPerDay": [{"day": "2026-01-01", "quantity": 1}],
        }))

        assert text == HEADER + "Evaluations per day:\n  2026-01-01: 1\n\n"
        assert "Evaluations per urgency:" not in text

    def test_only_urgencies(self):
        text = format_report(_result({
            "evaluationsPerUrgency": [{"urgency": "MEDIUM", "quantity": 3}],
        }))

        assert text == HEADER + "Evaluations per urgency:\n  MEDIUM: 3\n"
        assert "Evaluations per day:" not in text

    def test_no_sections(self):
        assert format_report(_result({})) == "Feedback Report\n===============\n\n"

    def test_empty_day_section_still_rendered(self):
        """A present but empty section keeps its title and trailing blank line."""
        text = format_report(_result({"evaluationsPerDay": []}))

        assert text == HEADER + "Evaluations per day:\n\n"

    def test_empty_urgency_section_still_rendered(self):
        text = format_report(_result({"evaluationsPerUrgency": []}))

        assert text == HEADER + "Evaluations per urgency:\n"

    def test_formatting_is_deterministic(self, full_feedback_payload):
        result = _result(full_feedback_payload)

        assert format_report(result) == format_report(result)
