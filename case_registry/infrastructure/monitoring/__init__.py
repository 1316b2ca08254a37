"""Operational metrics for Case Registry."""

from case_registry.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    RegistrationMetrics,
    generate_metrics,
    get_registration_metrics,
    reset_registration_metrics,
)

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "RegistrationMetrics",
    "generate_metrics",
    "get_registration_metrics",
    "reset_registration_metrics",
]
