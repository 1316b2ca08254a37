"""Observability: structured logging and correlation IDs.

Usage:
    from case_registry.infrastructure.observability import (
        configure_structlog,
        correlation_scope,
    )

    configure_structlog(environment="production")
    with correlation_scope() as correlation_id:
        ...
"""

from case_registry.infrastructure.observability.correlation import (
    CORRELATION_HEADER,
    accept_correlation_id,
    add_correlation_id,
    correlation_scope,
    current_correlation_id,
    new_correlation_id,
)
from case_registry.infrastructure.observability.logging import (
    configure_structlog,
    resolve_log_level,
)

__all__: list[str] = [
    "CORRELATION_HEADER",
    "accept_correlation_id",
    "add_correlation_id",
    "configure_structlog",
    "correlation_scope",
    "current_correlation_id",
    "new_correlation_id",
    "resolve_log_level",
]
