"""Registration Metrics Port.

Operational counters emitted by the registration workflow. Services
accept an optional implementation; None disables metric emission.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RegistrationMetricsProtocol(Protocol):
    """Protocol for recording registration workflow metrics."""

    def record_access_check(self, result: str) -> None:
        """Count a settled access check ("granted" or "denied")."""
        ...

    def record_validation_failure(self) -> None:
        """Count a submission blocked by field validation."""
        ...

    def record_submission(self, outcome: str, duration_seconds: float) -> None:
        """Count a settled submission and observe its duration.

        Args:
            outcome: "success", "rejected" or "error".
            duration_seconds: Time spent awaiting the collaborator.
        """
        ...
