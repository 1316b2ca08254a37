"""Submission controller.

Single-flight call to the case-creation collaborator. At most one
submission is in flight at a time; a trigger that fires while one is
pending is a no-op. Every exit path returns the controller to IDLE.

Result handling:
- status=True  -> success notice naming the new case id; draft cleared
- status=False -> "Failed to register case." notice; draft kept
- raised       -> "Error" notice; draft kept

The guard is a plain state check, not a lock: the event loop is single
threaded and the only suspension point is the collaborator call, which
happens after the state has been set to IN_FLIGHT.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from case_registry.application.ports.case_creation import CaseCreationProtocol
from case_registry.application.ports.notice_publisher import NoticePublisherProtocol
from case_registry.application.ports.registration_metrics import (
    RegistrationMetricsProtocol,
)
from case_registry.application.ports.time_authority import TimeAuthorityProtocol
from case_registry.application.services.base import LoggingMixin
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from case_registry.domain.errors.registration import FailureKind
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.case_draft import CaseDraft, CaseDraftValues
from case_registry.domain.models.notice import (
    DEFAULT_NOTICE_DURATION_MS,
    GENERIC_ERROR_MESSAGE,
    Notice,
    application_failure_notice,
    submission_success_notice,
    transport_failure_notice,
)
from case_registry.domain.models.submission import SubmissionOutcome, SubmissionState

SubmissionStateListener = Callable[[SubmissionState], None]

_METRIC_OUTCOMES: dict[FailureKind | None, str] = {
    None: "success",
    FailureKind.SUBMISSION_APPLICATION: "rejected",
    FailureKind.SUBMISSION_TRANSPORT: "error",
}


class SubmissionController(LoggingMixin):
    """Sends one case draft to the case-creation collaborator at a time.

    Attributes:
        state: Current SubmissionState (IDLE or IN_FLIGHT).
    """

    def __init__(
        self,
        case_creator: CaseCreationProtocol,
        notices: NoticePublisherProtocol,
        identity: CallerIdentity,
        time_authority: TimeAuthorityProtocol | None = None,
        notice_duration_ms: int = DEFAULT_NOTICE_DURATION_MS,
        metrics: RegistrationMetricsProtocol | None = None,
        on_state_change: SubmissionStateListener | None = None,
    ) -> None:
        """Initialize the submission controller.

        Args:
            case_creator: Collaborator exposing add_case.
            notices: Where outcome notices are published.
            identity: Caller on whose behalf cases are registered.
            time_authority: Clock for notice timestamps and durations.
            notice_duration_ms: Lifetime of outcome notices.
            metrics: Optional metrics sink.
            on_state_change: Called after every IDLE/IN_FLIGHT transition.
        """
        self._case_creator = case_creator
        self._notices = notices
        self._identity = identity
        self._time = time_authority or TimeAuthorityService()
        self._notice_duration_ms = notice_duration_ms
        self._metrics = metrics
        self._on_state_change = on_state_change
        self._state = SubmissionState.IDLE
        self._init_logger(component="registration", user_id=identity.user_id)

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_in_flight(self) -> bool:
        return self._state is SubmissionState.IN_FLIGHT

    async def submit(self, draft: CaseDraft) -> SubmissionOutcome | None:
        """Submit the draft unless a submission is already in flight.

        The draft is expected to have passed validation already.

        Args:
            draft: The session's draft. Cleared on success only.

        Returns:
            The outcome, or None when the call was ignored because another
            submission is in flight.
        """
        log = self._log_operation("submit")

        if self.is_in_flight:
            log.info("submission_rejected_in_flight")
            return None

        values = draft.snapshot()
        self._set_state(SubmissionState.IN_FLIGHT)
        started = self._time.monotonic()
        try:
            outcome = await self._send(values, log)
            duration = self._time.monotonic() - started
            self._notices.publish(self._notice_for(outcome))
            if outcome.status:
                draft.clear()
                log.info("draft_cleared")
            if self._metrics is not None:
                self._metrics.record_submission(
                    _METRIC_OUTCOMES[outcome.failure], duration
                )
        finally:
            self._set_state(SubmissionState.IDLE)

        return outcome

    async def _send(
        self, values: CaseDraftValues, log: structlog.BoundLogger
    ) -> SubmissionOutcome:
        log.info("submission_started", court_id=values.court_id)
        try:
            result = await self._case_creator.add_case(
                self._identity, **values.as_dict()
            )
        except Exception as exc:
            message = str(exc) or GENERIC_ERROR_MESSAGE
            log.warning(
                "submission_failed",
                error=message,
                error_type=type(exc).__name__,
            )
            return SubmissionOutcome.failed(message)

        if result.status:
            log.info("submission_succeeded", new_case_id=result.new_case_id)
            return SubmissionOutcome.succeeded(result.new_case_id)

        error = result.error or GENERIC_ERROR_MESSAGE
        log.info("submission_rejected", error=error)
        return SubmissionOutcome.rejected(error)

    def _notice_for(self, outcome: SubmissionOutcome) -> Notice:
        now = self._time.now()
        if outcome.status:
            return submission_success_notice(
                outcome.new_case_id, now, self._notice_duration_ms
            )
        if outcome.failure is FailureKind.SUBMISSION_TRANSPORT:
            return transport_failure_notice(outcome.error, now, self._notice_duration_ms)
        return application_failure_notice(outcome.error, now, self._notice_duration_ms)

    def _set_state(self, state: SubmissionState) -> None:
        self._state = state
        if self._on_state_change is not None:
            self._on_state_change(state)
