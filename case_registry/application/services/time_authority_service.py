"""Time Authority Service - production TimeAuthorityProtocol implementation."""

import time
from datetime import datetime, timezone

from case_registry.application.ports.time_authority import TimeAuthorityProtocol


class TimeAuthorityService(TimeAuthorityProtocol):
    """Wall clock in UTC plus the process monotonic clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
