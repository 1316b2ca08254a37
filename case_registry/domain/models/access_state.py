"""Access state for the registration workflow.

State Machine:
    LOADING -> GRANTED (role check returned True)
    LOADING -> DENIED  (role check returned False or raised)

GRANTED and DENIED are terminal for the session: the state is settled
exactly once and never reverts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from case_registry.domain.errors.registration import FailureKind
from case_registry.domain.errors.state_transition import InvalidStateTransitionError

# Reason recorded when the role check answers False
ACCESS_DENIED_MESSAGE = "You do not have permission to register a case."

# Page notice shown when a DENIED state carries no reason
ACCESS_DENIED_FALLBACK_MESSAGE = "You do not have permission to view this page."


class AccessStatus(Enum):
    """Resolution status of the caller's access.

    States:
        LOADING: Role check has not settled yet
        DENIED: Caller may not register cases
        GRANTED: Caller is a collector or admin
    """

    LOADING = "LOADING"
    DENIED = "DENIED"
    GRANTED = "GRANTED"


@dataclass(frozen=True)
class AccessState:
    """Settled-once access state.

    Attributes:
        status: Current access status.
        reason: Human-readable reason, set only when DENIED.
        failure: FailureKind.ACCESS_CHECK when the role check itself
            raised, None when it answered.
    """

    status: AccessStatus = AccessStatus.LOADING
    reason: str | None = None
    failure: FailureKind | None = None

    @classmethod
    def loading(cls) -> AccessState:
        return cls(status=AccessStatus.LOADING)

    @classmethod
    def granted(cls) -> AccessState:
        return cls(status=AccessStatus.GRANTED)

    @classmethod
    def denied(cls, reason: str) -> AccessState:
        return cls(status=AccessStatus.DENIED, reason=reason)

    @classmethod
    def check_failed(cls, reason: str) -> AccessState:
        """DENIED because the role check raised rather than answered."""
        return cls(
            status=AccessStatus.DENIED,
            reason=reason,
            failure=FailureKind.ACCESS_CHECK,
        )

    @property
    def is_settled(self) -> bool:
        """True once the role check has produced a result."""
        return self.status is not AccessStatus.LOADING

    @property
    def is_granted(self) -> bool:
        return self.status is AccessStatus.GRANTED

    def settle(self, target: AccessState) -> AccessState:
        """Return the settled state, enforcing the one-shot transition.

        Args:
            target: The GRANTED or DENIED state to move to.

        Returns:
            The target state.

        Raises:
            InvalidStateTransitionError: If already settled, or if the
                target is LOADING.
        """
        if self.is_settled or not target.is_settled:
            allowed = (
                [AccessStatus.GRANTED, AccessStatus.DENIED]
                if not self.is_settled
                else []
            )
            raise InvalidStateTransitionError(
                from_state=self.status,
                to_state=target.status,
                allowed_transitions=allowed,
            )
        return target
