"""
Invocation Outcome

Result of one report invocation and its mapping onto the Lambda proxy
response returned to the caller.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

SUCCESS_MESSAGE = "Report generated and sent successfully"
JSON_HEADERS = {"Content-Type": "application/json"}


class ReportStage(str, Enum):
    """Stage of the report flow that produced a failure."""

    CONFIG = "config"
    AUTHORIZATION = "authorization"
    UPSTREAM_FETCH = "upstream_fetch"
    UPSTREAM_NOTIFY = "upstream_notify"
    INTERNAL = "internal"


@dataclass(frozen=True)
class InvocationOutcome:
    """Success marker, or a failure tagged with the stage that failed."""

    status_code: int
    message: str
    stage: ReportStage | None = None

    @classmethod
    def success(cls) -> "InvocationOutcome":
        return cls(status_code=200, message=SUCCESS_MESSAGE)

    @classmethod
    def failure(cls, stage: ReportStage, status_code: int, message: str) -> "InvocationOutcome":
        return cls(status_code=status_code, message=message, stage=stage)

    @property
    def succeeded(self) -> bool:
        return self.stage is None

    def to_body(self) -> dict[str, str]:
        """JSON body sent back to the caller."""
        if self.succeeded:
            return {"message": self.message}
        return {"error": self.message}

    def to_response(self) -> dict[str, Any]:
        """Convert to a Lambda proxy integration response."""
        return {
            "statusCode": self.status_code,
            "headers": dict(JSON_HEADERS),
            "body": json.dumps(self.to_body()),
        }
