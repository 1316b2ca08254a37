"""Case registration workflow errors.

Failure taxonomy:
- ACCESS_CHECK: role-check collaborator raised; recovered into DENIED
- VALIDATION: a required field is empty; never reaches the collaborator
- SUBMISSION_APPLICATION: collaborator answered with status=False
- SUBMISSION_TRANSPORT: collaborator call itself raised

All four are recovered locally and surfaced as notices. The exceptions
below cover API misuse such as acting on a session that is not ready or
writing something the draft cannot hold.
"""

from __future__ import annotations

from enum import Enum

from case_registry.domain.exceptions import CaseRegistryError


class FailureKind(Enum):
    """Classification of recovered workflow failures."""

    ACCESS_CHECK = "ACCESS_CHECK"
    VALIDATION = "VALIDATION"
    SUBMISSION_APPLICATION = "SUBMISSION_APPLICATION"
    SUBMISSION_TRANSPORT = "SUBMISSION_TRANSPORT"


class WorkflowNotReadyError(CaseRegistryError):
    """Raised when form input is offered while access is not GRANTED.

    Attributes:
        view_state: The state value the session was in.
    """

    def __init__(self, view_state: str) -> None:
        self.view_state = view_state
        super().__init__(
            f"Case registration form is not available in state {view_state}"
        )


class UnknownDraftFieldError(CaseRegistryError):
    """Raised when an update names a field the case draft does not have."""

    def __init__(self, field_names: list[str]) -> None:
        self.field_names = field_names
        super().__init__(f"Unknown case draft field(s): {', '.join(field_names)}")


class SessionNotFoundError(CaseRegistryError):
    """Raised when a registration session id is unknown to the caller."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Registration session {session_id} not found")


class InvalidDraftValueError(CaseRegistryError):
    """Raised when a selection field is given a value outside its choices.

    Attributes:
        field_name: The selection field that was written.
        value: The rejected value.
        choices: The values the field accepts besides "".
    """

    def __init__(self, field_name: str, value: str, choices: list[str]) -> None:
        self.field_name = field_name
        self.value = value
        self.choices = choices
        super().__init__(
            f"Invalid {field_name} {value!r}; expected one of: {', '.join(choices)}"
        )
