"""HTTP client for the case-management backend.

Implements both collaborator ports the registration workflow consumes:
RoleCheckerProtocol (GET roles endpoint) and CaseCreationProtocol
(POST cases endpoint). The caller's identity travels as X-User-ID plus a
bearer token when one is present.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from case_registry.application.ports.case_creation import CaseCreationResult
from case_registry.config.registration_config import CaseBackendConfig
from case_registry.domain.models.caller_identity import CallerIdentity

logger = structlog.get_logger()

PERMITTED_ROLES = frozenset({"collector", "admin"})

# Draft field name -> backend payload key
PAYLOAD_KEYS: dict[str, str] = {
    "court_id": "courtId",
    "description": "description",
    "case_type": "caseType",
    "petitioner": "petitioner",
    "respondent": "respondent",
    "start_date": "startDate",
    "status": "status",
}


class CaseBackendError(Exception):
    """Backend answered with an unusable response."""

    def __init__(
        self, message: str, status_code: int | None = None, detail: Any = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class CaseBackendTransportError(CaseBackendError):
    """Backend could not be reached (timeout, connection failure)."""

    pass


def _malformed(message: str, response: httpx.Response) -> CaseBackendError:
    return CaseBackendError(
        message, status_code=response.status_code, detail=response.text
    )


def _error_message(detail: Any) -> str | None:
    """Pull a human-readable message out of an error body."""
    if isinstance(detail, dict):
        for key in ("error", "detail", "message"):
            value = detail.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    if isinstance(detail, str) and detail:
        return detail
    return None


class CaseBackendClient:
    """Client for the case-management backend API."""

    def __init__(
        self,
        config: CaseBackendConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the backend client.

        Args:
            config: Backend configuration. base_url must be set.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        if config.base_url is None:
            raise ValueError("CaseBackendClient requires config.base_url")
        self.config = config
        self._base_url = config.base_url.rstrip("/")
        self._timeout = config.timeout_seconds
        self._transport = transport

    async def is_collector_or_admin(self, identity: CallerIdentity) -> bool:
        """Check whether the caller holds the collector or admin role.

        Raises:
            CaseBackendError: For non-2xx or malformed responses.
            CaseBackendTransportError: For timeouts and connection errors.
        """
        url = f"{self._base_url}{self.config.roles_endpoint}"
        response = await self._request("GET", url, identity)

        if not response.is_success:
            detail = self._parse_detail(response)
            raise CaseBackendError(
                _error_message(detail) or f"Role check failed: {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        try:
            roles = response.json()["roles"]
        except (ValueError, KeyError, TypeError) as e:
            raise _malformed("Malformed roles response", response) from e
        if not isinstance(roles, list):
            raise _malformed("Malformed roles response", response)

        allowed = any(
            isinstance(role, str) and role.lower() in PERMITTED_ROLES for role in roles
        )
        logger.debug(
            "backend_roles_resolved",
            user_id=identity.user_id,
            role_count=len(roles),
            allowed=allowed,
        )
        return allowed

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
        """Register a case with the backend.

        Returns:
            CaseCreationResult. 2xx bodies map directly; 4xx bodies become
            a status=False result carrying the backend's error text.

        Raises:
            CaseBackendError: For 5xx and other unexpected responses.
            CaseBackendTransportError: For timeouts and connection errors.
        """
        fields = {
            "court_id": court_id,
            "description": description,
            "case_type": case_type,
            "petitioner": petitioner,
            "respondent": respondent,
            "start_date": start_date,
            "status": status,
        }
        payload = {PAYLOAD_KEYS[name]: value for name, value in fields.items()}
        url = f"{self._base_url}{self.config.cases_endpoint}"

        response = await self._request("POST", url, identity, json=payload)
        return self._handle_case_response(response)

    async def health_check(self) -> bool:
        """Check whether the backend is reachable.

        Returns:
            True if the backend health endpoint answers 200.
        """
        url = f"{self._base_url}/v1/health"
        async with httpx.AsyncClient(timeout=5, transport=self._transport) as client:
            try:
                response = await client.get(url)
            except httpx.RequestError:
                return False
        return response.status_code == 200

    async def _request(
        self,
        method: str,
        url: str,
        identity: CallerIdentity,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {"X-User-ID": identity.user_id}
        if identity.access_token:
            headers["Authorization"] = f"Bearer {identity.access_token}"

        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.request(method, url, json=json, headers=headers)
            except httpx.TimeoutException as e:
                raise CaseBackendTransportError(
                    f"Request timeout after {self._timeout}s",
                    status_code=0,
                ) from e
            except httpx.RequestError as e:
                raise CaseBackendTransportError(
                    f"Request failed: {e}",
                    status_code=0,
                ) from e

        logger.debug(
            "backend_response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response

    def _handle_case_response(self, response: httpx.Response) -> CaseCreationResult:
        status = response.status_code

        if 200 <= status < 300:
            try:
                data = response.json()
            except ValueError as e:
                raise _malformed("Malformed case creation response", response) from e
            if not isinstance(data, dict):
                raise _malformed("Malformed case creation response", response)
            new_case_id = data.get("newCaseId")
            return CaseCreationResult(
                status=bool(data.get("status")),
                new_case_id=str(new_case_id) if new_case_id is not None else None,
                error=data.get("error"),
            )

        detail = self._parse_detail(response)

        if 400 <= status < 500:
            return CaseCreationResult(
                status=False,
                error=_error_message(detail) or f"Client error: {status}",
            )

        if 500 <= status < 600:
            raise CaseBackendError(
                f"Server error: {status}",
                status_code=status,
                detail=detail,
            )

        raise CaseBackendError(
            f"Unexpected status code: {status}",
            status_code=status,
            detail=detail,
        )

    @staticmethod
    def _parse_detail(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
