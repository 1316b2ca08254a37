"""Access gate service.

Resolves, once per session, whether the caller may use the case
registration workflow. The role check runs asynchronously; until it
settles the session stays LOADING and no form is offered.

Outcomes:
- collaborator returns True  -> GRANTED
- collaborator returns False -> DENIED("You do not have permission to register a case.")
- collaborator raises        -> DENIED(error message, or the generic message)

There is no retry: a DENIED session stays DENIED.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from case_registry.application.ports.registration_metrics import (
    RegistrationMetricsProtocol,
)
from case_registry.application.ports.role_checker import RoleCheckerProtocol
from case_registry.application.services.base import LoggingMixin
from case_registry.domain.models.access_state import ACCESS_DENIED_MESSAGE, AccessState
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.notice import GENERIC_ERROR_MESSAGE

AccessListener = Callable[[AccessState], None]


class AccessGate(LoggingMixin):
    """Owns the LOADING / DENIED / GRANTED tri-state for one caller.

    Example:
        >>> gate = AccessGate(role_checker, identity)
        >>> gate.start()            # initial render proceeds in LOADING
        >>> state = await gate.wait_until_settled()
        >>> state.is_granted
        True
    """

    def __init__(
        self,
        role_checker: RoleCheckerProtocol,
        identity: CallerIdentity,
        metrics: RegistrationMetricsProtocol | None = None,
        on_settled: AccessListener | None = None,
    ) -> None:
        """Initialize the access gate.

        Args:
            role_checker: Collaborator answering is_collector_or_admin.
            identity: The caller whose access is resolved.
            metrics: Optional metrics sink.
            on_settled: Optional callback invoked once with the settled state.
        """
        self._role_checker = role_checker
        self._identity = identity
        self._metrics = metrics
        self._on_settled = on_settled
        self._state = AccessState.loading()
        self._task: asyncio.Task[AccessState] | None = None
        self._init_logger(component="registration", user_id=identity.user_id)

    @property
    def state(self) -> AccessState:
        return self._state

    def start(self) -> asyncio.Task[AccessState]:
        """Schedule the role check without waiting for it.

        Calling start() again returns the same task; the collaborator is
        invoked at most once per gate.

        Returns:
            The task resolving to the settled AccessState.
        """
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._check())
        return self._task

    async def resolve(self) -> AccessState:
        """Run (or join) the role check and return the settled state."""
        return await asyncio.shield(self.start())

    async def wait_until_settled(self, timeout: float | None = None) -> AccessState:
        """Wait for the role check to settle.

        Args:
            timeout: Seconds to wait, or None to wait indefinitely.

        Returns:
            The settled AccessState.

        Raises:
            asyncio.TimeoutError: If the check has not settled in time.
                The check itself keeps running.
        """
        if self._state.is_settled:
            return self._state
        return await asyncio.wait_for(asyncio.shield(self.start()), timeout)

    async def _check(self) -> AccessState:
        log = self._log_operation("resolve_access")
        log.info("access_check_started")

        try:
            allowed = await self._role_checker.is_collector_or_admin(self._identity)
        except Exception as exc:
            reason = str(exc) or GENERIC_ERROR_MESSAGE
            log.warning(
                "access_check_failed",
                error=reason,
                error_type=type(exc).__name__,
            )
            target = AccessState.check_failed(reason)
        else:
            if allowed:
                target = AccessState.granted()
            else:
                target = AccessState.denied(ACCESS_DENIED_MESSAGE)

        self._state = self._state.settle(target)
        result = self._state.status.value.lower()
        log.info("access_check_settled", result=result, reason=self._state.reason)

        if self._metrics is not None:
            self._metrics.record_access_check(result)
        if self._on_settled is not None:
            self._on_settled(self._state)
        return self._state
