"""Role checker stub for development and testing.

Provides a configurable in-memory implementation of RoleCheckerProtocol.
Every caller is a collector by default; individual callers can be
denied, a failure can be injected, and calls can be held in flight to
exercise the LOADING state.
"""

from __future__ import annotations

import asyncio

from case_registry.domain.models.caller_identity import CallerIdentity


class RoleCheckerStub:
    """Stub implementation of RoleCheckerProtocol.

    Attributes:
        calls: Identities passed to is_collector_or_admin, in call order.
    """

    def __init__(self, allowed: bool = True, error: Exception | None = None) -> None:
        """Initialize the stub.

        Args:
            allowed: Answer given to callers without a per-user override.
            error: If set, raised by every call instead of answering.
        """
        self._allowed = allowed
        self._error = error
        self._per_user: dict[str, bool] = {}
        self._release: asyncio.Event | None = None
        self.calls: list[CallerIdentity] = []

    async def is_collector_or_admin(self, identity: CallerIdentity) -> bool:
        self.calls.append(identity)
        if self._release is not None:
            await self._release.wait()
        if self._error is not None:
            raise self._error
        return self._per_user.get(identity.user_id, self._allowed)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def set_allowed(self, allowed: bool) -> None:
        self._allowed = allowed

    def set_user_allowed(self, user_id: str, allowed: bool) -> None:
        """Override the answer for one caller."""
        self._per_user[user_id] = allowed

    def set_error(self, error: Exception | None) -> None:
        self._error = error

    def hold(self) -> None:
        """Make subsequent calls wait until release() is called."""
        self._release = asyncio.Event()

    def release(self) -> None:
        """Let held calls (and future calls) proceed."""
        if self._release is not None:
            self._release.set()
            self._release = None

    def clear(self) -> None:
        """Reset recorded calls and configuration to defaults."""
        self.release()
        self._allowed = True
        self._error = None
        self._per_user.clear()
        self.calls.clear()
