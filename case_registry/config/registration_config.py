"""Case registration configuration.

Frozen configuration objects with environment variable overrides.

Environment Variables (Backend):
- CASE_BACKEND_URL: Base URL of the case-management backend. When unset,
  in-memory stubs stand in for the backend (development and tests).
- CASE_BACKEND_TIMEOUT_SECONDS: Per-request timeout (default: 10.0)
- CASE_BACKEND_ROLES_ENDPOINT: Role lookup path (default: /v1/me/roles)
- CASE_BACKEND_CASES_ENDPOINT: Case creation path (default: /v1/cases)

Environment Variables (Workflow):
- CASE_NOTICE_DURATION_MS: Lifetime of transient notices (default: 5000)
- CASE_ACCESS_WAIT_SECONDS: Cap for long-polling a session (default: 30)
- CASE_SESSION_TTL_SECONDS: Age at which an open session is dropped
  (default: 3600)
- CASE_MAX_SESSIONS: Open sessions kept before the oldest is dropped
  (default: 10000)
- ENVIRONMENT: production or development (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS = frozenset({"production", "development", "test"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class CaseBackendConfig:
    """Connection settings for the case-management backend.

    Attributes:
        base_url: Backend base URL, or None to use in-memory stubs.
        timeout_seconds: Per-request timeout for backend calls.
        roles_endpoint: Path returning the caller's roles.
        cases_endpoint: Path accepting new cases.
    """

    base_url: str | None = None
    timeout_seconds: float = 10.0
    roles_endpoint: str = "/v1/me/roles"
    cases_endpoint: str = "/v1/cases"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.base_url is not None and not self.base_url.startswith(
            ("http://", "https://")
        ):
            raise ValueError(
                f"base_url must start with http:// or https://, got {self.base_url!r}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )
        for name in ("roles_endpoint", "cases_endpoint"):
            value = getattr(self, name)
            if not value.startswith("/"):
                raise ValueError(f"{name} must start with '/', got {value!r}")

    @property
    def uses_stubs(self) -> bool:
        """True when no backend URL is configured."""
        return self.base_url is None

    @classmethod
    def from_environment(cls) -> CaseBackendConfig:
        """Create config from environment variables with defaults."""
        return cls(
            base_url=os.environ.get("CASE_BACKEND_URL") or None,
            timeout_seconds=_get_float_env("CASE_BACKEND_TIMEOUT_SECONDS", 10.0),
            roles_endpoint=os.environ.get(
                "CASE_BACKEND_ROLES_ENDPOINT", "/v1/me/roles"
            ),
            cases_endpoint=os.environ.get("CASE_BACKEND_CASES_ENDPOINT", "/v1/cases"),
        )


@dataclass(frozen=True)
class RegistrationConfig:
    """Workflow settings for case registration sessions.

    Attributes:
        notice_duration_ms: Lifetime of transient notices.
        access_wait_seconds: Longest a long-poll waits for the access check.
        session_ttl_seconds: Age, measured from opened_at, after which a
            session is forgotten.
        max_sessions: Upper bound on sessions held at once.
        environment: Deployment environment (selects log format).
    """

    notice_duration_ms: int = 5000
    access_wait_seconds: float = 30.0
    session_ttl_seconds: float = 3600.0
    max_sessions: int = 10000
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.notice_duration_ms < 1:
            raise ValueError(
                f"notice_duration_ms must be positive, got {self.notice_duration_ms}"
            )
        if self.access_wait_seconds <= 0:
            raise ValueError(
                f"access_wait_seconds must be positive, got {self.access_wait_seconds}"
            )
        if self.session_ttl_seconds <= 0:
            raise ValueError(
                f"session_ttl_seconds must be positive, got {self.session_ttl_seconds}"
            )
        if self.max_sessions < 1:
            raise ValueError(f"max_sessions must be positive, got {self.max_sessions}")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> RegistrationConfig:
        """Create config from environment variables with defaults."""
        return cls(
            notice_duration_ms=_get_int_env("CASE_NOTICE_DURATION_MS", 5000),
            access_wait_seconds=_get_float_env("CASE_ACCESS_WAIT_SECONDS", 30.0),
            session_ttl_seconds=_get_float_env("CASE_SESSION_TTL_SECONDS", 3600.0),
            max_sessions=_get_int_env("CASE_MAX_SESSIONS", 10000),
            environment=os.environ.get("ENVIRONMENT", "development").lower(),
        )


# Default configuration (no backend URL: stubs)
DEFAULT_CASE_BACKEND_CONFIG = CaseBackendConfig()
DEFAULT_REGISTRATION_CONFIG = RegistrationConfig()

# Testing configuration with short waits
TEST_REGISTRATION_CONFIG = RegistrationConfig(
    notice_duration_ms=5000,
    access_wait_seconds=1.0,
    environment="test",
)
