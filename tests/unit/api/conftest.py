"""Fixtures for API route tests.

Routes run against the real application with stub collaborators wired
through the bootstrap setters, on an in-process ASGI transport so that
held collaborator calls share the test's event loop.
"""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from case_registry.api.main import create_app
from case_registry.bootstrap.case_registration import (
    reset_case_registration_dependencies,
    set_case_backend_config,
    set_case_creator,
    set_registration_config,
    set_role_checker,
    set_time_authority,
)
from case_registry.config.registration_config import (
    DEFAULT_CASE_BACKEND_CONFIG,
    TEST_REGISTRATION_CONFIG,
)
from case_registry.infrastructure.monitoring.metrics import reset_registration_metrics
from case_registry.infrastructure.stubs.case_creation_stub import CaseCreationStub
from case_registry.infrastructure.stubs.role_checker_stub import RoleCheckerStub
from tests.helpers import FakeTimeAuthority

AUTH_HEADERS = {"X-User-ID": "collector-1", "Authorization": "Bearer token-abc"}


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return dict(AUTH_HEADERS)


@pytest.fixture(autouse=True)
def wired_dependencies(
    role_checker: RoleCheckerStub,
    case_creator: CaseCreationStub,
    fake_time_authority: FakeTimeAuthority,
):
    reset_case_registration_dependencies()
    reset_registration_metrics()
    set_case_backend_config(DEFAULT_CASE_BACKEND_CONFIG)
    set_registration_config(TEST_REGISTRATION_CONFIG)
    set_role_checker(role_checker)
    set_case_creator(case_creator)
    set_time_authority(fake_time_authority)
    yield
    reset_case_registration_dependencies()
    reset_registration_metrics()


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
