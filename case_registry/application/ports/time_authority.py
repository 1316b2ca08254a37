"""Time Authority Protocol - interface for timestamp provisioning.

Services that stamp notices or measure elapsed time inject a
TimeAuthorityProtocol instead of calling datetime.now() directly, so
tests can drive time with FakeTimeAuthority.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use TimeAuthorityService from case_registry.application.services

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value in seconds.

        Only differences between values are meaningful.
        """
        ...
