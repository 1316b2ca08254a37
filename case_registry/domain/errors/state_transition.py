"""State transition errors for the registration state machines.

Raised when code attempts a transition the transition matrix does not
permit, e.g. settling an access check twice or starting a submission
from the DENIED state.
"""

from __future__ import annotations

from enum import Enum

from case_registry.domain.exceptions import CaseRegistryError


class InvalidStateTransitionError(CaseRegistryError):
    """Raised when an invalid state transition is attempted.

    Attributes:
        from_state: Current state of the machine.
        to_state: Attempted target state or triggering event.
        allowed_transitions: Valid targets from the current state.
    """

    def __init__(
        self,
        from_state: Enum,
        to_state: Enum,
        allowed_transitions: list[Enum] | None = None,
    ) -> None:
        """Initialize invalid state transition error.

        Args:
            from_state: Current state.
            to_state: Attempted invalid target state or event.
            allowed_transitions: Valid states or events from current state (optional).
        """
        self.from_state = from_state
        self.to_state = to_state
        self.allowed_transitions = allowed_transitions or []

        allowed_str = (
            f" Valid transitions: {[s.value for s in self.allowed_transitions]}"
            if self.allowed_transitions
            else ""
        )
        super().__init__(
            f"Invalid state transition: {from_state.value} -> {to_state.value}.{allowed_str}"
        )
