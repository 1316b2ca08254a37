"""Submission state and outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from case_registry.domain.errors.registration import FailureKind


class SubmissionState(Enum):
    """Single-flight guard state.

    States:
        IDLE: No submission in progress; the trigger may fire
        IN_FLIGHT: A case-creation call is awaiting its result
    """

    IDLE = "IDLE"
    IN_FLIGHT = "IN_FLIGHT"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one submission attempt, kept only long enough to build feedback.

    Attributes:
        status: True when the backend registered the case.
        new_case_id: Identifier assigned by the backend on success.
        error: Error text shown to the user on failure.
        failure: Which failure path produced this outcome, None on success.
    """

    status: bool
    new_case_id: str | None = None
    error: str | None = None
    failure: FailureKind | None = None

    @classmethod
    def succeeded(cls, new_case_id: str | None) -> SubmissionOutcome:
        return cls(status=True, new_case_id=new_case_id)

    @classmethod
    def invalid(cls, error: str) -> SubmissionOutcome:
        return cls(status=False, error=error, failure=FailureKind.VALIDATION)

    @classmethod
    def rejected(cls, error: str) -> SubmissionOutcome:
        return cls(
            status=False,
            error=error,
            failure=FailureKind.SUBMISSION_APPLICATION,
        )

    @classmethod
    def failed(cls, error: str) -> SubmissionOutcome:
        return cls(
            status=False,
            error=error,
            failure=FailureKind.SUBMISSION_TRANSPORT,
        )
