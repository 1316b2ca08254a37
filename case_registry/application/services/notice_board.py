"""In-memory notice board.

Holds the notices raised for one registration session. Notices disappear
once their lifetime has elapsed (measured against the injected time
authority) or when the user dismisses them.
"""

from __future__ import annotations

from uuid import UUID

from case_registry.application.ports.time_authority import TimeAuthorityProtocol
from case_registry.application.services.base import LoggingMixin
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)
from case_registry.domain.models.notice import Notice


class NoticeBoard(LoggingMixin):
    """NoticePublisherProtocol implementation backed by a dict.

    Attributes:
        _time: Time authority used to expire notices.
        _notices: Visible notices keyed by id, in publication order.
    """

    def __init__(self, time_authority: TimeAuthorityProtocol | None = None) -> None:
        self._time = time_authority or TimeAuthorityService()
        self._notices: dict[UUID, Notice] = {}
        self._init_logger(component="registration")

    def publish(self, notice: Notice) -> None:
        self._prune()
        self._notices[notice.id] = notice
        self._log_operation("publish", notice_id=str(notice.id)).info(
            "notice_published",
            kind=notice.kind.value,
            title=notice.title,
            duration_ms=notice.duration_ms,
        )

    def dismiss(self, notice_id: UUID) -> bool:
        self._prune()
        notice = self._notices.get(notice_id)
        if notice is None or not notice.dismissible:
            return False
        del self._notices[notice_id]
        self._log_operation("dismiss", notice_id=str(notice_id)).info(
            "notice_dismissed"
        )
        return True

    def active(self) -> list[Notice]:
        self._prune()
        return list(self._notices.values())

    def _prune(self) -> None:
        now = self._time.now()
        expired = [nid for nid, n in self._notices.items() if n.is_expired(now)]
        for notice_id in expired:
            del self._notices[notice_id]
