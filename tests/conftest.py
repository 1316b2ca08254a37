"""
Pytest configuration and shared fixtures for Case Registry tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Collaborators are the in-memory stubs from case_registry.infrastructure.stubs
- Time is driven by FakeTimeAuthority, never by sleeping
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from case_registry.application.services.notice_board import NoticeBoard
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.infrastructure.stubs.case_creation_stub import CaseCreationStub
from case_registry.infrastructure.stubs.role_checker_stub import RoleCheckerStub
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from case_registry import __version__

    return __version__


@pytest.fixture
def identity() -> CallerIdentity:
    """A caller with a bearer token."""
    return CallerIdentity(user_id="collector-1", access_token="token-abc")


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Frozen clock at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def role_checker() -> RoleCheckerStub:
    """Role checker that grants every caller."""
    return RoleCheckerStub()


@pytest.fixture
def case_creator() -> CaseCreationStub:
    """Case creator that accepts every case with sequential ids."""
    return CaseCreationStub()


@pytest.fixture
def notice_board(fake_time_authority: FakeTimeAuthority) -> NoticeBoard:
    """Notice board on the fake clock."""
    return NoticeBoard(time_authority=fake_time_authority)


@pytest.fixture
def complete_fields() -> dict[str, str]:
    """Every draft field filled in with valid values."""
    return {
        "court_id": "CRT1",
        "description": "Theft case",
        "case_type": "Criminal",
        "petitioner": "State",
        "respondent": "J. Doe",
        "start_date": "2024-01-01",
        "status": "Open",
    }
