"""Unit tests for LoggingMixin."""

from structlog.testing import capture_logs

from case_registry.application.services.base import LoggingMixin
from case_registry.infrastructure.observability.correlation import correlation_scope


class _Service(LoggingMixin):
    def __init__(self, user_id: str) -> None:
        self._init_logger(component="registration", user_id=user_id)


class TestLoggingMixin:
    def test_binds_service_component_and_fixed_context(self) -> None:
        with capture_logs() as logs:
            service = _Service("collector-1")
            service._log_operation("submit", court_id="CRT1").info("submit_started")

        [entry] = logs
        assert entry["event"] == "submit_started"
        assert entry["service"] == "_Service"
        assert entry["component"] == "registration"
        assert entry["user_id"] == "collector-1"
        assert entry["operation"] == "submit"
        assert entry["court_id"] == "CRT1"
        assert "correlation_id" not in entry

    def test_operation_keeps_id_current_when_it_started(self) -> None:
        with capture_logs() as logs:
            service = _Service("collector-1")
            with correlation_scope("req-7"):
                log = service._log_operation("resolve_access")
            log.info("access_check_settled")

        [entry] = logs
        assert entry["correlation_id"] == "req-7"
