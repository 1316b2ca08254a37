"""Test helpers for Case Registry tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority"]
