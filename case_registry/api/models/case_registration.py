"""Case registration API request/response models.

Draft fields are plain strings defaulting to "" because the workflow,
not the schema, decides what counts as filled in: an empty field must
reach the validator and produce the "All fields are required." notice.
case_type and status are the exception on input. Like select widgets they
only take one of their choices or "", so other values fail with 422.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from case_registry.application.services.case_registration_view import (
    RegistrationSnapshot,
)
from case_registry.domain.models.case_draft import CaseDraftValues
from case_registry.domain.models.notice import Notice
from case_registry.domain.models.submission import SubmissionOutcome

# Select-widget choices; "" clears the selection
CaseTypeChoice = Literal["", "Civil", "Criminal", "Family"]
CaseStatusChoice = Literal["", "Open", "Under Investigation", "Closed"]

# ISO 8601 with Z suffix
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class RegistrationStateEnum(str, Enum):
    """Observable session state.

    States:
        LOADING: Access check pending; show a waiting indicator only
        DENIED: Caller may not register cases; show page_notice only
        GRANTED_IDLE: Form shown, submit trigger enabled
        GRANTED_IN_FLIGHT: Form shown, submit trigger disabled
    """

    LOADING = "LOADING"
    DENIED = "DENIED"
    GRANTED_IDLE = "GRANTED_IDLE"
    GRANTED_IN_FLIGHT = "GRANTED_IN_FLIGHT"


class CaseDraftModel(BaseModel):
    """Current form values."""

    court_id: str = ""
    description: str = ""
    case_type: str = Field(default="", description="Civil, Criminal or Family")
    petitioner: str = ""
    respondent: str = ""
    start_date: str = Field(default="", description="ISO calendar date (YYYY-MM-DD)")
    status: str = Field(
        default="", description="Open, Under Investigation or Closed"
    )

    @classmethod
    def from_values(cls, values: CaseDraftValues) -> CaseDraftModel:
        return cls(**values.as_dict())


class UpdateDraftRequest(BaseModel):
    """Partial form update. Omitted fields keep their current value."""

    model_config = ConfigDict(extra="forbid")

    court_id: str | None = None
    description: str | None = None
    case_type: CaseTypeChoice | None = None
    petitioner: str | None = None
    respondent: str | None = None
    start_date: str | None = None
    status: CaseStatusChoice | None = None

    def changes(self) -> dict[str, str]:
        """Return only the fields the client sent."""
        return self.model_dump(exclude_none=True)


class NoticeModel(BaseModel):
    """A transient notice."""

    id: UUID
    kind: str = Field(..., description="error or success")
    title: str
    description: str | None = None
    duration_ms: int
    dismissible: bool
    created_at: DateTimeWithZ
    expires_at: DateTimeWithZ

    @classmethod
    def from_notice(cls, notice: Notice) -> NoticeModel:
        return cls(
            id=notice.id,
            kind=notice.kind.value,
            title=notice.title,
            description=notice.description,
            duration_ms=notice.duration_ms,
            dismissible=notice.dismissible,
            created_at=notice.created_at,
            expires_at=notice.expires_at,
        )


class RegistrationSessionResponse(BaseModel):
    """Presentation-neutral snapshot of a registration session."""

    session_id: UUID
    state: RegistrationStateEnum
    show_loading_indicator: bool
    page_notice: str | None = None
    form: CaseDraftModel | None = None
    can_submit: bool
    notices: list[NoticeModel] = Field(default_factory=list)
    access_failure: str | None = Field(
        default=None,
        description="ACCESS_CHECK when DENIED because the role check failed",
    )

    @classmethod
    def from_snapshot(
        cls, session_id: UUID, snapshot: RegistrationSnapshot
    ) -> RegistrationSessionResponse:
        return cls(
            session_id=session_id,
            state=RegistrationStateEnum(snapshot.state.value),
            show_loading_indicator=snapshot.show_loading_indicator,
            page_notice=snapshot.page_notice,
            form=(
                CaseDraftModel.from_values(snapshot.form)
                if snapshot.form is not None
                else None
            ),
            can_submit=snapshot.can_submit,
            notices=[NoticeModel.from_notice(n) for n in snapshot.notices],
            access_failure=(
                snapshot.access_failure.value
                if snapshot.access_failure is not None
                else None
            ),
        )


class SubmissionOutcomeModel(BaseModel):
    """Outcome of one submit trigger."""

    status: bool
    new_case_id: str | None = None
    error: str | None = None
    failure: str | None = Field(
        default=None,
        description="VALIDATION, SUBMISSION_APPLICATION or SUBMISSION_TRANSPORT",
    )

    @classmethod
    def from_outcome(cls, outcome: SubmissionOutcome) -> SubmissionOutcomeModel:
        return cls(
            status=outcome.status,
            new_case_id=outcome.new_case_id,
            error=outcome.error,
            failure=outcome.failure.value if outcome.failure is not None else None,
        )


class SubmitCaseResponse(BaseModel):
    """Response to the submit trigger."""

    session: RegistrationSessionResponse
    outcome: SubmissionOutcomeModel | None = None


class CaseRegistrationErrorResponse(BaseModel):
    """Error response for case registration operations (RFC 7807).

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request path that caused the error.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request path that caused the error")
