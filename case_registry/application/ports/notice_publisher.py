"""Notice Publisher Port.

Defines the contract for delivering user-facing notices. The workflow
decides what a notice says and when it is raised; the publisher owns
lifetime and dismissal.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from case_registry.domain.models.notice import Notice


@runtime_checkable
class NoticePublisherProtocol(Protocol):
    """Protocol for publishing and dismissing notices."""

    def publish(self, notice: Notice) -> None:
        """Make a notice visible until it expires or is dismissed."""
        ...

    def dismiss(self, notice_id: UUID) -> bool:
        """Dismiss a notice early.

        Returns:
            True if a visible, dismissible notice was removed.
        """
        ...

    def active(self) -> list[Notice]:
        """Return notices that are currently visible, oldest first."""
        ...
