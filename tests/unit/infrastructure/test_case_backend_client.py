"""Unit tests for CaseBackendClient using httpx.MockTransport."""

import json

import httpx
import pytest

from case_registry.config.registration_config import CaseBackendConfig
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.infrastructure.adapters.case_backend_client import (
    CaseBackendClient,
    CaseBackendError,
    CaseBackendTransportError,
)

BASE_URL = "http://backend.test"


def _client(handler) -> CaseBackendClient:
    config = CaseBackendConfig(base_url=BASE_URL, timeout_seconds=2.0)
    return CaseBackendClient(config, transport=httpx.MockTransport(handler))


@pytest.fixture
def case_fields(complete_fields: dict[str, str]) -> dict[str, str]:
    return complete_fields


class TestClientConstruction:
    def test_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="base_url"):
            CaseBackendClient(CaseBackendConfig())


class TestRoleCheck:
    """Tests for is_collector_or_admin."""

    @pytest.mark.parametrize(
        ("roles", "expected"),
        [
            (["collector"], True),
            (["viewer", "admin"], True),
            (["Admin"], True),
            (["viewer"], False),
            ([], False),
        ],
    )
    async def test_role_membership(
        self, identity: CallerIdentity, roles: list[str], expected: bool
    ) -> None:
        client = _client(lambda request: httpx.Response(200, json={"roles": roles}))

        assert await client.is_collector_or_admin(identity) is expected

    async def test_sends_identity_headers(self, identity: CallerIdentity) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"roles": ["collector"]})

        await _client(handler).is_collector_or_admin(identity)

        [request] = seen
        assert request.method == "GET"
        assert request.url == f"{BASE_URL}/v1/me/roles"
        assert request.headers["X-User-ID"] == "collector-1"
        assert request.headers["Authorization"] == "Bearer token-abc"

    async def test_omits_authorization_without_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"roles": []})

        await _client(handler).is_collector_or_admin(CallerIdentity(user_id="u-1"))

        assert "Authorization" not in seen[0].headers

    async def test_error_status_raises_with_backend_message(
        self, identity: CallerIdentity
    ) -> None:
        client = _client(
            lambda request: httpx.Response(401, json={"error": "Session expired"})
        )

        with pytest.raises(CaseBackendError, match="Session expired") as exc_info:
            await client.is_collector_or_admin(identity)
        assert exc_info.value.status_code == 401

    async def test_error_status_without_message(self, identity: CallerIdentity) -> None:
        client = _client(lambda request: httpx.Response(503, text=""))

        with pytest.raises(CaseBackendError, match="Role check failed: 503"):
            await client.is_collector_or_admin(identity)

    @pytest.mark.parametrize(
        "body",
        [{"groups": []}, {"roles": None}, {"roles": "admin"}, [], ["admin"]],
    )
    async def test_malformed_body_raises(
        self, identity: CallerIdentity, body: object
    ) -> None:
        client = _client(lambda request: httpx.Response(200, json=body))

        with pytest.raises(CaseBackendError, match="Malformed roles response") as e:
            await client.is_collector_or_admin(identity)
        assert e.value.status_code == 200


class TestAddCase:
    """Tests for add_case."""

    async def test_posts_camel_case_payload(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"status": True, "newCaseId": "C-123"})

        result = await _client(handler).add_case(identity, **case_fields)

        assert result.status
        assert result.new_case_id == "C-123"
        [request] = seen
        assert request.method == "POST"
        assert request.url == f"{BASE_URL}/v1/cases"
        assert json.loads(request.content) == {
            "courtId": "CRT1",
            "description": "Theft case",
            "caseType": "Criminal",
            "petitioner": "State",
            "respondent": "J. Doe",
            "startDate": "2024-01-01",
            "status": "Open",
        }

    async def test_numeric_case_id_becomes_string(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        client = _client(
            lambda request: httpx.Response(200, json={"status": True, "newCaseId": 55})
        )

        result = await client.add_case(identity, **case_fields)

        assert result.new_case_id == "55"

    async def test_application_rejection_in_2xx_body(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        client = _client(
            lambda request: httpx.Response(
                200, json={"status": False, "error": "Duplicate court ID"}
            )
        )

        result = await client.add_case(identity, **case_fields)

        assert not result.status
        assert result.error == "Duplicate court ID"

    @pytest.mark.parametrize("body", [[], ["C-1"], "C-1", None])
    async def test_non_object_2xx_body_raises(
        self, identity: CallerIdentity, case_fields: dict[str, str], body: object
    ) -> None:
        client = _client(lambda request: httpx.Response(201, json=body))

        with pytest.raises(CaseBackendError, match="Malformed case creation response"):
            await client.add_case(identity, **case_fields)

    async def test_client_error_becomes_rejection(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        client = _client(
            lambda request: httpx.Response(409, json={"detail": "Duplicate court ID"})
        )

        result = await client.add_case(identity, **case_fields)

        assert not result.status
        assert result.error == "Duplicate court ID"

    async def test_client_error_without_body(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        client = _client(lambda request: httpx.Response(422, text=""))

        result = await client.add_case(identity, **case_fields)

        assert result.error == "Client error: 422"

    async def test_server_error_raises(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        client = _client(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(CaseBackendError, match="Server error: 500"):
            await client.add_case(identity, **case_fields)

    async def test_timeout_raises_transport_error(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(CaseBackendTransportError, match="timeout after 2.0s"):
            await _client(handler).add_case(identity, **case_fields)

    async def test_connection_error_raises_transport_error(
        self, identity: CallerIdentity, case_fields: dict[str, str]
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(CaseBackendTransportError, match="Request failed"):
            await _client(handler).add_case(identity, **case_fields)


class TestHealthCheck:
    async def test_healthy_backend(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"status": "ok"}))
        assert await client.health_check() is True

    async def test_unhealthy_backend(self) -> None:
        client = _client(lambda request: httpx.Response(503))
        assert await client.health_check() is False

    async def test_unreachable_backend(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        assert await _client(handler).health_check() is False
