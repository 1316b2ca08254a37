"""Adapters connecting the workflow to external systems."""

from case_registry.infrastructure.adapters.case_backend_client import (
    CaseBackendClient,
    CaseBackendError,
    CaseBackendTransportError,
)

__all__: list[str] = [
    "CaseBackendClient",
    "CaseBackendError",
    "CaseBackendTransportError",
]
