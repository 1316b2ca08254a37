"""Domain errors for Case Registry.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from CaseRegistryError.
"""

from case_registry.domain.errors.registration import (
    FailureKind,
    InvalidDraftValueError,
    SessionNotFoundError,
    UnknownDraftFieldError,
    WorkflowNotReadyError,
)
from case_registry.domain.errors.state_transition import InvalidStateTransitionError

__all__: list[str] = [
    "FailureKind",
    "InvalidDraftValueError",
    "InvalidStateTransitionError",
    "SessionNotFoundError",
    "UnknownDraftFieldError",
    "WorkflowNotReadyError",
]
