"""Health check endpoint for the Case Registry API."""

from fastapi import APIRouter, Depends, Query

from case_registry.api.dependencies.case_registration import get_registration_config
from case_registry.api.models.health import HealthResponse
from case_registry.bootstrap.case_registration import get_backend_client
from case_registry.config.registration_config import RegistrationConfig

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    deep: bool = Query(default=False, description="Also probe the case backend"),
    config: RegistrationConfig = Depends(get_registration_config),
) -> HealthResponse:
    """Return health status.

    The API stays healthy when the backend is down: registration sessions
    surface backend failures as notices instead.
    """
    client = get_backend_client()
    reachable = None
    if deep and client is not None:
        reachable = await client.health_check()

    return HealthResponse(
        status="healthy",
        environment=config.environment,
        backend="stub" if client is None else "http",
        backend_reachable=reachable,
    )
