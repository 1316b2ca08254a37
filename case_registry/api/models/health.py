"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health status of the API.

    Attributes:
        status: "healthy" when the API is serving.
        environment: Deployment environment.
        backend: "http" when a case backend is configured, "stub" otherwise.
        backend_reachable: Result of the backend probe, None for stubs.
    """

    status: str
    environment: str
    backend: str
    backend_reachable: bool | None = None
