"""Case creation stub for development and testing.

Provides a configurable in-memory implementation of CaseCreationProtocol.
By default every case is accepted and assigned a sequential id. A fixed
result or an error can be configured, and calls can be held in flight to
exercise single-flight behavior.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from case_registry.application.ports.case_creation import CaseCreationResult
from case_registry.domain.models.caller_identity import CallerIdentity


@dataclass(frozen=True)
class RecordedCase:
    """One add_case invocation as the stub received it."""

    identity: CallerIdentity
    court_id: str
    description: str
    case_type: str
    petitioner: str
    respondent: str
    start_date: str
    status: str


class CaseCreationStub:
    """Stub implementation of CaseCreationProtocol.

    Attributes:
        calls: Recorded add_case invocations, in call order.
    """

    def __init__(
        self,
        result: CaseCreationResult | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            result: Fixed result to return. None assigns sequential ids.
            error: If set, raised by every call instead of returning.
        """
        self._result = result
        self._error = error
        self._next_id = 1
        self._release: asyncio.Event | None = None
        self._entered = asyncio.Event()
        self.calls: list[RecordedCase] = []

    async def add_case(
        self,
        identity: CallerIdentity,
        court_id: str,
        description: str,
        case_type: str,
        petitioner: str,
        respondent: str,
        start_date: str,
        status: str,
    ) -> CaseCreationResult:
        self.calls.append(
            RecordedCase(
                identity=identity,
                court_id=court_id,
                description=description,
                case_type=case_type,
                petitioner=petitioner,
                respondent=respondent,
                start_date=start_date,
                status=status,
            )
        )
        self._entered.set()
        if self._release is not None:
            await self._release.wait()
        if self._error is not None:
            raise self._error
        if self._result is not None:
            return self._result

        new_case_id = f"CASE-{self._next_id:05d}"
        self._next_id += 1
        return CaseCreationResult(status=True, new_case_id=new_case_id)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def set_result(self, result: CaseCreationResult | None) -> None:
        self._result = result

    def set_error(self, error: Exception | None) -> None:
        self._error = error

    def hold(self) -> None:
        """Make subsequent calls wait until release() is called."""
        self._release = asyncio.Event()
        self._entered = asyncio.Event()

    def release(self) -> None:
        """Let held calls (and future calls) proceed."""
        if self._release is not None:
            self._release.set()
            self._release = None

    async def wait_until_called(self, timeout: float = 1.0) -> None:
        """Wait until add_case has been entered since the last hold()."""
        await asyncio.wait_for(self._entered.wait(), timeout)

    def clear(self) -> None:
        """Reset recorded calls and configuration to defaults."""
        self.release()
        self._result = None
        self._error = None
        self._next_id = 1
        self._entered = asyncio.Event()
        self.calls.clear()
