"""User-facing notice model.

Exactly four notices exist in the registration workflow:
1. Validation failure: "All fields are required."
2. Submission success: includes the returned case identifier
3. Application failure: collaborator-supplied or generic error text
4. Transport failure: thrown or generic error text

Each has a kind, a lifetime after which it auto-dismisses, and can be
dismissed early by the user. Rendering mechanics belong to the
presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from uuid import UUID, uuid4

DEFAULT_NOTICE_DURATION_MS = 5000

GENERIC_ERROR_MESSAGE = "An unknown error occurred."
VALIDATION_FAILURE_TITLE = "All fields are required."
SUCCESS_TITLE_TEMPLATE = "Case registered successfully with Case ID: {case_id}"
APPLICATION_FAILURE_TITLE = "Failed to register case."
TRANSPORT_FAILURE_TITLE = "Error"


class NoticeKind(Enum):
    """Visual category of a notice."""

    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Notice:
    """A short-lived, dismissable feedback message.

    Attributes:
        kind: ERROR or SUCCESS.
        title: Headline text.
        description: Optional detail text.
        created_at: When the notice was raised (timezone-aware).
        duration_ms: Lifetime before auto-dismissal.
        dismissible: Whether the user may close it early.
        id: Unique notice identifier.
    """

    kind: NoticeKind
    title: str
    created_at: datetime
    description: str | None = None
    duration_ms: int = DEFAULT_NOTICE_DURATION_MS
    dismissible: bool = True
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.duration_ms < 1:
            raise ValueError(f"duration_ms must be positive, got {self.duration_ms}")

    @property
    def expires_at(self) -> datetime:
        return self.created_at + timedelta(milliseconds=self.duration_ms)

    @property
    def text(self) -> str:
        """Title and description joined, as a reader would see them."""
        if self.description:
            return f"{self.title} {self.description}"
        return self.title

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


def validation_failure_notice(created_at: datetime, duration_ms: int) -> Notice:
    return Notice(
        kind=NoticeKind.ERROR,
        title=VALIDATION_FAILURE_TITLE,
        created_at=created_at,
        duration_ms=duration_ms,
    )


def submission_success_notice(
    case_id: str | None, created_at: datetime, duration_ms: int
) -> Notice:
    return Notice(
        kind=NoticeKind.SUCCESS,
        title=SUCCESS_TITLE_TEMPLATE.format(
            case_id=case_id if case_id is not None else ""
        ),
        created_at=created_at,
        duration_ms=duration_ms,
    )


def application_failure_notice(
    error: str | None, created_at: datetime, duration_ms: int
) -> Notice:
    return Notice(
        kind=NoticeKind.ERROR,
        title=APPLICATION_FAILURE_TITLE,
        description=error or GENERIC_ERROR_MESSAGE,
        created_at=created_at,
        duration_ms=duration_ms,
    )


def transport_failure_notice(
    error: str | None, created_at: datetime, duration_ms: int
) -> Notice:
    return Notice(
        kind=NoticeKind.ERROR,
        title=TRANSPORT_FAILURE_TITLE,
        description=error or GENERIC_ERROR_MESSAGE,
        created_at=created_at,
        duration_ms=duration_ms,
    )
