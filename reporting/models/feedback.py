"""
Feedback Service Models

Request and response payloads of the ms-feedback report endpoint.
Aliases match the camelCase keys used on the wire.
"""

from datetime import datetime, timezone

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
)

log = structlog.get_logger()


def format_utc_instant(moment: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC instant with millisecond precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FeedbackReportRequest(BaseModel):
    """Body of the feedback report request: the report date."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Report instant, defaults to now (UTC)",
    )

    @field_serializer("date")
    def _serialize_date(self, value: datetime) -> str:
        return format_utc_instant(value)


class DayEvaluation(BaseModel):
    """Number of evaluations recorded on one day."""

    model_config = ConfigDict(frozen=True)

    day: str
    quantity: StrictInt


class UrgencyEvaluation(BaseModel):
    """Number of evaluations for one urgency level."""

    model_config = ConfigDict(frozen=True)

    urgency: str
    quantity: StrictInt


class FeedbackReportResult(BaseModel):
    """
    Aggregated feedback report.

    Both sections are optional and independent and are read only from their
    camelCase keys; every other key is ignored. A section that is present
    but not a list of well-formed records is treated as absent. One bad
    record (missing field, non-integer quantity) drops the whole section,
    including its valid records, so a partially trusted list is never
    rendered.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    evaluations_per_day: list[DayEvaluation] | None = Field(
        default=None,
        alias="evaluationsPerDay",
    )
    evaluations_per_urgency: list[UrgencyEvaluation] | None = Field(
        default=None,
        alias="evaluationsPerUrgency",
    )

    @field_validator("evaluations_per_day", "evaluations_per_urgency", mode="wrap")
    @classmethod
    def _drop_malformed_section(
        cls,
        value: object,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> object:
        try:
            return handler(value)
        except ValidationError as e:
            log.warning(
                "malformed_feedback_section_ignored",
                section=info.field_name,
                error_count=e.error_count(),
            )
            return None
