"""Unit tests for registration configuration."""

import pytest

from case_registry.config.registration_config import (
    DEFAULT_CASE_BACKEND_CONFIG,
    TEST_REGISTRATION_CONFIG,
    CaseBackendConfig,
    RegistrationConfig,
)


class TestCaseBackendConfig:
    def test_defaults_use_stubs(self) -> None:
        assert DEFAULT_CASE_BACKEND_CONFIG.uses_stubs
        assert DEFAULT_CASE_BACKEND_CONFIG.timeout_seconds == 10.0

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(ValueError, match="base_url"):
            CaseBackendConfig(base_url="ftp://backend")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout_seconds"):
            CaseBackendConfig(timeout_seconds=0)

    def test_rejects_relative_endpoint(self) -> None:
        with pytest.raises(ValueError, match="cases_endpoint"):
            CaseBackendConfig(cases_endpoint="v1/cases")

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASE_BACKEND_URL", "https://cases.example")
        monkeypatch.setenv("CASE_BACKEND_TIMEOUT_SECONDS", "3.5")
        monkeypatch.setenv("CASE_BACKEND_CASES_ENDPOINT", "/api/cases")

        config = CaseBackendConfig.from_environment()

        assert config.base_url == "https://cases.example"
        assert config.timeout_seconds == 3.5
        assert config.cases_endpoint == "/api/cases"
        assert not config.uses_stubs

    def test_empty_url_means_stubs(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASE_BACKEND_URL", "")
        assert CaseBackendConfig.from_environment().uses_stubs


class TestRegistrationConfig:
    def test_defaults(self) -> None:
        config = RegistrationConfig()

        assert config.notice_duration_ms == 5000
        assert config.environment == "development"

    def test_test_preset_waits_briefly(self) -> None:
        assert TEST_REGISTRATION_CONFIG.access_wait_seconds == 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"notice_duration_ms": 0},
            {"access_wait_seconds": 0},
            {"session_ttl_seconds": 0},
            {"max_sessions": 0},
            {"environment": "staging"},
        ],
    )
    def test_rejects_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            RegistrationConfig(**kwargs)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASE_NOTICE_DURATION_MS", "2500")
        monkeypatch.setenv("CASE_ACCESS_WAIT_SECONDS", "5")
        monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")

        config = RegistrationConfig.from_environment()

        assert config.notice_duration_ms == 2500
        assert config.access_wait_seconds == 5.0
        assert config.environment == "production"

    def test_invalid_numbers_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASE_NOTICE_DURATION_MS", "soon")
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        assert RegistrationConfig.from_environment().notice_duration_ms == 5000

    def test_session_limits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert RegistrationConfig().session_ttl_seconds == 3600.0
        assert RegistrationConfig().max_sessions == 10000
        monkeypatch.setenv("CASE_SESSION_TTL_SECONDS", "90")
        monkeypatch.setenv("CASE_MAX_SESSIONS", "25")

        config = RegistrationConfig.from_environment()

        assert config.session_ttl_seconds == 90.0
        assert config.max_sessions == 25
