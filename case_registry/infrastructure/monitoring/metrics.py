"""Prometheus metrics for the case registration workflow.

Operational counters only: how often access checks settle each way,
how submissions end, and how long the backend takes to answer.

Labels: environment on every series, plus result/outcome where noted.
"""

import os
import threading

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

_metrics_lock = threading.Lock()

# Submission latency buckets (10ms to 10s)
DEFAULT_HISTOGRAM_BUCKETS = (0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class RegistrationMetrics:
    """RegistrationMetricsProtocol implementation on prometheus_client.

    Attributes:
        access_checks_total: Counter of settled access checks by result.
        submissions_total: Counter of settled submissions by outcome.
        validation_failures_total: Counter of submits blocked by validation.
        submission_duration_seconds: Histogram of backend call duration.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize registration metrics.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")

        self.access_checks_total = Counter(
            name="case_registration_access_checks_total",
            documentation="Settled access checks by result (granted, denied)",
            labelnames=["environment", "result"],
            registry=self._registry,
        )

        self.submissions_total = Counter(
            name="case_registration_submissions_total",
            documentation="Settled case submissions by outcome",
            labelnames=["environment", "outcome"],
            registry=self._registry,
        )

        self.validation_failures_total = Counter(
            name="case_registration_validation_failures_total",
            documentation="Submit attempts blocked by field validation",
            labelnames=["environment"],
            registry=self._registry,
        )

        self.submission_duration_seconds = Histogram(
            name="case_registration_submission_duration_seconds",
            documentation="Time spent awaiting the case-creation backend",
            labelnames=["environment"],
            buckets=DEFAULT_HISTOGRAM_BUCKETS,
            registry=self._registry,
        )

    def record_access_check(self, result: str) -> None:
        self.access_checks_total.labels(
            environment=self._environment, result=result
        ).inc()

    def record_validation_failure(self) -> None:
        self.validation_failures_total.labels(environment=self._environment).inc()

    def record_submission(self, outcome: str, duration_seconds: float) -> None:
        self.submissions_total.labels(
            environment=self._environment, outcome=outcome
        ).inc()
        self.submission_duration_seconds.labels(
            environment=self._environment
        ).observe(duration_seconds)

    def get_registry(self) -> CollectorRegistry:
        return self._registry


_registration_metrics: RegistrationMetrics | None = None


def get_registration_metrics() -> RegistrationMetrics:
    """Get the singleton RegistrationMetrics instance (thread-safe)."""
    global _registration_metrics
    if _registration_metrics is None:
        with _metrics_lock:
            if _registration_metrics is None:
                _registration_metrics = RegistrationMetrics()
    return _registration_metrics


def generate_metrics() -> bytes:
    """Generate Prometheus metrics in exposition format."""
    return generate_latest(get_registration_metrics().get_registry())


def reset_registration_metrics() -> None:
    """Reset the singleton (for testing only)."""
    global _registration_metrics
    with _metrics_lock:
        _registration_metrics = None
