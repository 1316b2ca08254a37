"""Case registration view (orchestration).

Composes AccessGate, FieldValidator and SubmissionController into the
observable registration lifecycle:

    LOADING -> DENIED
    LOADING -> GRANTED_IDLE <-> GRANTED_IN_FLIGHT

The view holds no markup. render() produces a presentation-neutral
RegistrationSnapshot; a form (and the submit trigger) only ever appears
in the GRANTED states.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from uuid import UUID

from case_registry.application.ports.case_creation import CaseCreationProtocol
from case_registry.application.ports.notice_publisher import NoticePublisherProtocol
from case_registry.application.ports.registration_metrics import (
    RegistrationMetricsProtocol,
)
from case_registry.application.ports.role_checker import RoleCheckerProtocol
from case_registry.application.ports.time_authority import TimeAuthorityProtocol
from case_registry.application.services.access_gate import AccessGate
from case_registry.application.services.base import LoggingMixin
from case_registry.application.services.field_validator import FieldValidator
from case_registry.application.services.notice_board import NoticeBoard
from case_registry.application.services.submission_controller import (
    SubmissionController,
)
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from case_registry.domain.errors.registration import (
    FailureKind,
    WorkflowNotReadyError,
)
from case_registry.domain.models.access_state import (
    ACCESS_DENIED_FALLBACK_MESSAGE,
    AccessState,
)
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.case_draft import CaseDraft, CaseDraftValues
from case_registry.domain.models.notice import (
    DEFAULT_NOTICE_DURATION_MS,
    VALIDATION_FAILURE_TITLE,
    Notice,
    validation_failure_notice,
)
from case_registry.domain.models.registration_lifecycle import (
    RegistrationEvent,
    RegistrationLifecycle,
    RegistrationViewState,
)
from case_registry.domain.models.submission import SubmissionOutcome, SubmissionState


@dataclass(frozen=True)
class RegistrationSnapshot:
    """What a presentation layer should show for a session right now.

    Attributes:
        state: Current lifecycle state.
        show_loading_indicator: True only while access is unresolved.
        page_notice: Blocking notice shown instead of the form (DENIED only).
        form: Current draft values, or None outside the GRANTED states.
        can_submit: Whether the submit trigger is actionable.
        notices: Visible transient notices, oldest first.
        access_failure: ACCESS_CHECK when DENIED because the role check
            raised, otherwise None.
    """

    state: RegistrationViewState
    show_loading_indicator: bool
    page_notice: str | None
    form: CaseDraftValues | None
    can_submit: bool
    notices: tuple[Notice, ...]
    access_failure: FailureKind | None = None


class CaseRegistrationView(LoggingMixin):
    """One caller's case registration session.

    Example:
        >>> view = CaseRegistrationView(role_checker, case_creator, identity)
        >>> view.mount()
        >>> await view.wait_until_ready()
        >>> view.edit(court_id="CRT1", description="Theft case", ...)
        >>> outcome = await view.submit()
    """

    def __init__(
        self,
        role_checker: RoleCheckerProtocol,
        case_creator: CaseCreationProtocol,
        identity: CallerIdentity,
        notices: NoticePublisherProtocol | None = None,
        time_authority: TimeAuthorityProtocol | None = None,
        notice_duration_ms: int = DEFAULT_NOTICE_DURATION_MS,
        metrics: RegistrationMetricsProtocol | None = None,
        validator: FieldValidator | None = None,
    ) -> None:
        self._identity = identity
        self._time = time_authority or TimeAuthorityService()
        self._notices = notices or NoticeBoard(self._time)
        self._notice_duration_ms = notice_duration_ms
        self._metrics = metrics
        self._validator = validator or FieldValidator()
        self._lifecycle = RegistrationLifecycle()
        self._draft = CaseDraft()
        self._gate = AccessGate(
            role_checker,
            identity,
            metrics=metrics,
            on_settled=self._on_access_settled,
        )
        self._controller = SubmissionController(
            case_creator,
            self._notices,
            identity,
            time_authority=self._time,
            notice_duration_ms=notice_duration_ms,
            metrics=metrics,
            on_state_change=self._on_submission_state,
        )
        self._init_logger(component="registration", user_id=identity.user_id)

    @property
    def identity(self) -> CallerIdentity:
        return self._identity

    @property
    def state(self) -> RegistrationViewState:
        return self._lifecycle.state

    @property
    def access_state(self) -> AccessState:
        return self._gate.state

    @property
    def submission_state(self) -> SubmissionState:
        return self._controller.state

    def mount(self) -> asyncio.Task[AccessState]:
        """Start the access check. Safe to call more than once."""
        return self._gate.start()

    async def wait_until_ready(
        self, timeout: float | None = None
    ) -> RegistrationViewState:
        """Wait until the access check settles.

        Raises:
            asyncio.TimeoutError: If it has not settled within timeout.
        """
        await self._gate.wait_until_settled(timeout)
        return self.state

    def edit(self, **fields: str) -> CaseDraftValues:
        """Apply user input to the draft.

        Returns:
            The draft values after the edit.

        Raises:
            WorkflowNotReadyError: If the session is not GRANTED.
            UnknownDraftFieldError: If a field name is not a draft field.
            InvalidDraftValueError: If case_type or status is not one of its
                choices. The draft is left unchanged.
        """
        if not self.state.is_granted():
            raise WorkflowNotReadyError(self.state.value)
        self._draft.update(**fields)
        return self._draft.snapshot()

    async def submit(self) -> SubmissionOutcome | None:
        """Handle the submit trigger.

        Ignored (returns None) unless the session is GRANTED_IDLE. An
        invalid draft raises the validation notice and never reaches the
        case-creation collaborator.
        """
        log = self._log_operation("submit")

        if not self.state.can_submit():
            log.info("submit_ignored", state=self.state.value)
            return None

        missing = self._validator.missing_fields(self._draft)
        if missing:
            log.info("validation_failed", missing_fields=list(missing))
            self._notices.publish(
                validation_failure_notice(self._time.now(), self._notice_duration_ms)
            )
            if self._metrics is not None:
                self._metrics.record_validation_failure()
            return SubmissionOutcome.invalid(VALIDATION_FAILURE_TITLE)

        return await self._controller.submit(self._draft)

    def dismiss_notice(self, notice_id: UUID) -> bool:
        return self._notices.dismiss(notice_id)

    def render(self) -> RegistrationSnapshot:
        state = self.state
        page_notice = None
        if state is RegistrationViewState.DENIED:
            page_notice = self._gate.state.reason or ACCESS_DENIED_FALLBACK_MESSAGE

        return RegistrationSnapshot(
            state=state,
            show_loading_indicator=state is RegistrationViewState.LOADING,
            page_notice=page_notice,
            form=self._draft.snapshot() if state.is_granted() else None,
            can_submit=state.can_submit(),
            notices=tuple(self._notices.active()),
            access_failure=self._gate.state.failure,
        )

    def _on_access_settled(self, access: AccessState) -> None:
        event = (
            RegistrationEvent.ACCESS_GRANTED
            if access.is_granted
            else RegistrationEvent.ACCESS_DENIED
        )
        new_state = self._lifecycle.apply(event)
        self._log_operation("mount").info(
            "registration_view_ready", state=new_state.value
        )

    def _on_submission_state(self, state: SubmissionState) -> None:
        if state is SubmissionState.IN_FLIGHT:
            self._lifecycle.apply(RegistrationEvent.SUBMISSION_STARTED)
        else:
            self._lifecycle.apply(RegistrationEvent.SUBMISSION_SETTLED)
