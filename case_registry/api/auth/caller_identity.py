"""Caller identity extraction.

The API does not authenticate callers itself. It forwards who the caller
claims to be (X-User-ID) and their bearer token to the role-check
collaborator, which decides whether they may register cases.
"""

from typing import Annotated

import structlog
from fastapi import Header, HTTPException, Request, status

from case_registry.domain.models.caller_identity import CallerIdentity

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "bearer "


def get_caller_identity(
    request: Request,
    x_user_id: Annotated[
        str | None,
        Header(description="Identifier of the calling user. Required."),
    ] = None,
    authorization: Annotated[
        str | None,
        Header(description="Bearer token forwarded to the case backend."),
    ] = None,
) -> CallerIdentity:
    """Build the caller identity from request headers.

    Raises:
        HTTPException 401: If X-User-ID is missing or the Authorization
            header is not a bearer token.
    """
    log = logger.bind(component="caller_auth")
    request_ip = request.client.host if request.client else "unknown"

    if not x_user_id:
        log.warning("auth_failed", reason="missing_user_id", request_ip=request_ip)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "type": "urn:case-registry:auth:missing-user-id",
                "title": "Caller identity required",
                "status": 401,
                "detail": "X-User-ID header is required",
                "instance": request.url.path,
            },
        )

    token = None
    if authorization:
        if not authorization.lower().startswith(BEARER_PREFIX):
            log.warning(
                "auth_failed",
                reason="unsupported_authorization_scheme",
                user_id=x_user_id,
                request_ip=request_ip,
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "type": "urn:case-registry:auth:invalid-authorization",
                    "title": "Unsupported authorization scheme",
                    "status": 401,
                    "detail": "Authorization header must be a Bearer token",
                    "instance": request.url.path,
                },
            )
        token = authorization[len(BEARER_PREFIX) :].strip() or None

    return CallerIdentity(user_id=x_user_id, access_token=token)
