"""Registration view lifecycle state machine.

The view's observable state is the product of the access state and the
submission state, collapsed into four legal states.

State Machine:
    LOADING -> DENIED             (ACCESS_DENIED)
    LOADING -> GRANTED_IDLE       (ACCESS_GRANTED)
    GRANTED_IDLE -> GRANTED_IN_FLIGHT  (SUBMISSION_STARTED)
    GRANTED_IN_FLIGHT -> GRANTED_IDLE  (SUBMISSION_SETTLED, any outcome)

DENIED is terminal for the session. The submit trigger is actionable
only in GRANTED_IDLE.
"""

from __future__ import annotations

from enum import Enum

from case_registry.domain.errors.state_transition import InvalidStateTransitionError


class RegistrationViewState(Enum):
    """Observable state of a registration session."""

    LOADING = "LOADING"
    DENIED = "DENIED"
    GRANTED_IDLE = "GRANTED_IDLE"
    GRANTED_IN_FLIGHT = "GRANTED_IN_FLIGHT"

    def is_granted(self) -> bool:
        """Check whether the form may be shown in this state."""
        return self in GRANTED_STATES

    def can_submit(self) -> bool:
        """Check whether the submit trigger is actionable in this state."""
        return self is RegistrationViewState.GRANTED_IDLE


class RegistrationEvent(Enum):
    """Events that drive the lifecycle."""

    ACCESS_GRANTED = "ACCESS_GRANTED"
    ACCESS_DENIED = "ACCESS_DENIED"
    SUBMISSION_STARTED = "SUBMISSION_STARTED"
    SUBMISSION_SETTLED = "SUBMISSION_SETTLED"


GRANTED_STATES: frozenset[RegistrationViewState] = frozenset(
    {
        RegistrationViewState.GRANTED_IDLE,
        RegistrationViewState.GRANTED_IN_FLIGHT,
    }
)

# (state, event) -> next state; anything absent is illegal
TRANSITION_TABLE: dict[
    tuple[RegistrationViewState, RegistrationEvent], RegistrationViewState
] = {
    (
        RegistrationViewState.LOADING,
        RegistrationEvent.ACCESS_GRANTED,
    ): RegistrationViewState.GRANTED_IDLE,
    (
        RegistrationViewState.LOADING,
        RegistrationEvent.ACCESS_DENIED,
    ): RegistrationViewState.DENIED,
    (
        RegistrationViewState.GRANTED_IDLE,
        RegistrationEvent.SUBMISSION_STARTED,
    ): RegistrationViewState.GRANTED_IN_FLIGHT,
    (
        RegistrationViewState.GRANTED_IN_FLIGHT,
        RegistrationEvent.SUBMISSION_SETTLED,
    ): RegistrationViewState.GRANTED_IDLE,
}


def allowed_events(state: RegistrationViewState) -> list[RegistrationEvent]:
    """List the events accepted in the given state."""
    return [event for (source, event) in TRANSITION_TABLE if source is state]


def next_state(
    state: RegistrationViewState, event: RegistrationEvent
) -> RegistrationViewState:
    """Pure transition function.

    Args:
        state: Current lifecycle state.
        event: Event to apply.

    Returns:
        The state after applying the event.

    Raises:
        InvalidStateTransitionError: If the event is not legal in the state.
    """
    try:
        return TRANSITION_TABLE[(state, event)]
    except KeyError:
        raise InvalidStateTransitionError(
            from_state=state,
            to_state=event,
            allowed_transitions=list(allowed_events(state)),
        ) from None


class RegistrationLifecycle:
    """Holds the current lifecycle state and applies events to it.

    Attributes:
        state: Current RegistrationViewState (starts at LOADING).
    """

    def __init__(
        self, initial: RegistrationViewState = RegistrationViewState.LOADING
    ) -> None:
        self._state = initial

    @property
    def state(self) -> RegistrationViewState:
        return self._state

    def apply(self, event: RegistrationEvent) -> RegistrationViewState:
        """Apply an event and return the new state.

        Raises:
            InvalidStateTransitionError: If the event is illegal; the
                state is left unchanged.
        """
        self._state = next_state(self._state, event)
        return self._state
