"""Structured-logging mixin shared by the registration services."""

import structlog

from case_registry.infrastructure.observability.correlation import (
    current_correlation_id,
)


class LoggingMixin:
    """Gives a service a bound logger and per-operation child loggers.

    Services call _init_logger() once in __init__, binding whatever stays
    fixed for the instance's lifetime (the caller's user_id for a
    per-session service). Each operation then logs through
    _log_operation(), which adds the operation name and the correlation ID
    current at the time the operation starts.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "registration", **bound: object) -> None:
        self._log = structlog.get_logger(type(self).__module__).bind(
            service=type(self).__name__,
            component=component,
            **bound,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        log = self._log.bind(operation=operation, **context)
        # Pin the ID so events logged after the scope ends still carry it
        correlation_id = current_correlation_id()
        if correlation_id is not None:
            log = log.bind(correlation_id=correlation_id)
        return log
