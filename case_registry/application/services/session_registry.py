"""Registration session registry.

Keeps the live CaseRegistrationView for each open session so a remote
presentation layer can drive the workflow across requests. Sessions are
owned by the caller that opened them; any other caller gets the same
answer as for an unknown id. Abandoned sessions are not closed by anyone,
so the registry expires them by age and caps how many it holds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from case_registry.application.ports.time_authority import TimeAuthorityProtocol
from case_registry.application.services.base import LoggingMixin
from case_registry.application.services.case_registration_view import (
    CaseRegistrationView,
)
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from case_registry.domain.errors.registration import SessionNotFoundError
from case_registry.domain.models.caller_identity import CallerIdentity

ViewFactory = Callable[[CallerIdentity], CaseRegistrationView]

DEFAULT_SESSION_TTL_SECONDS = 3600.0
DEFAULT_MAX_SESSIONS = 10000


@dataclass(frozen=True)
class RegistrationSession:
    """An open registration session.

    Attributes:
        session_id: Identifier handed to the client.
        view: The session's workflow view.
        opened_at: When the session was opened.
    """

    session_id: UUID
    view: CaseRegistrationView
    opened_at: datetime

    @property
    def owner_id(self) -> str:
        return self.view.identity.user_id


class RegistrationSessionRegistry(LoggingMixin):
    """In-memory map of open registration sessions.

    Sessions older than session_ttl_seconds (measured from opened_at on
    the injected time authority) are dropped whenever a session is opened
    or looked up. When max_sessions would be exceeded, the oldest session
    is dropped to make room.
    """

    def __init__(
        self,
        view_factory: ViewFactory,
        time_authority: TimeAuthorityProtocol | None = None,
        session_ttl_seconds: float = DEFAULT_SESSION_TTL_SECONDS,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        """Initialize the registry.

        Args:
            view_factory: Builds a fresh view for a caller.
            time_authority: Clock for session timestamps and expiry.
            session_ttl_seconds: Age after which a session is forgotten.
            max_sessions: Most sessions held at once.

        Raises:
            ValueError: If session_ttl_seconds or max_sessions is not positive.
        """
        if session_ttl_seconds <= 0:
            raise ValueError(
                f"session_ttl_seconds must be positive, got {session_ttl_seconds}"
            )
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self._view_factory = view_factory
        self._time = time_authority or TimeAuthorityService()
        self._ttl = timedelta(seconds=session_ttl_seconds)
        self._max_sessions = max_sessions
        # Insertion order is opened_at order
        self._sessions: dict[UUID, RegistrationSession] = {}
        self._init_logger(component="registration")

    def open(self, identity: CallerIdentity) -> RegistrationSession:
        """Create a session for the caller and start its access check.

        Must be called from a running event loop.
        """
        self._prune_expired()
        while len(self._sessions) >= self._max_sessions:
            oldest = next(iter(self._sessions))
            self._forget(oldest, reason="capacity")

        view = self._view_factory(identity)
        session = RegistrationSession(
            session_id=uuid4(),
            view=view,
            opened_at=self._time.now(),
        )
        self._sessions[session.session_id] = session
        view.mount()

        self._log_operation(
            "open_session",
            session_id=str(session.session_id),
            user_id=identity.user_id,
        ).info("registration_session_opened")
        return session

    def get(self, session_id: UUID, identity: CallerIdentity) -> RegistrationSession:
        """Look up a session owned by the caller.

        Raises:
            SessionNotFoundError: If the id is unknown, expired or owned by
                another caller.
        """
        self._prune_expired()
        session = self._sessions.get(session_id)
        if session is None or session.owner_id != identity.user_id:
            raise SessionNotFoundError(str(session_id))
        return session

    def close(self, session_id: UUID, identity: CallerIdentity) -> None:
        """Forget a session owned by the caller.

        Raises:
            SessionNotFoundError: If the id is unknown or owned by
                another caller.
        """
        self.get(session_id, identity)
        del self._sessions[session_id]
        self._log_operation(
            "close_session",
            session_id=str(session_id),
            user_id=identity.user_id,
        ).info("registration_session_closed")

    def _prune_expired(self) -> None:
        cutoff = self._time.now() - self._ttl
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.opened_at <= cutoff
        ]
        for session_id in expired:
            self._forget(session_id, reason="expired")

    def _forget(self, session_id: UUID, reason: str) -> None:
        session = self._sessions.pop(session_id)
        self._log_operation(
            "drop_session",
            session_id=str(session_id),
            user_id=session.owner_id,
        ).info("registration_session_dropped", reason=reason)

    def __len__(self) -> int:
        return len(self._sessions)
