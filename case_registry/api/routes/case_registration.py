"""Case registration API routes.

Session-oriented endpoints that let a presentation layer drive the
authorization-gated registration workflow:

- POST   /v1/case-registration/sessions                     open (202, LOADING)
- GET    /v1/case-registration/sessions/{id}[?wait=true]    snapshot / long-poll
- PATCH  /v1/case-registration/sessions/{id}/draft          user input
- POST   /v1/case-registration/sessions/{id}/submit         submit trigger
- DELETE /v1/case-registration/sessions/{id}/notices/{nid}  dismiss a notice
- DELETE /v1/case-registration/sessions/{id}                close the session

Recovered workflow failures (validation, backend rejection, transport
errors) are not HTTP errors: they come back as a 200 with the notice in
the snapshot and the outcome alongside.
"""

import asyncio
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import Response

from case_registry.api.auth.caller_identity import get_caller_identity
from case_registry.api.dependencies.case_registration import (
    get_registration_config,
    get_session_registry,
)
from case_registry.api.models.case_registration import (
    CaseRegistrationErrorResponse,
    RegistrationSessionResponse,
    SubmissionOutcomeModel,
    SubmitCaseResponse,
    UpdateDraftRequest,
)
from case_registry.application.services.session_registry import (
    RegistrationSession,
    RegistrationSessionRegistry,
)
from case_registry.config.registration_config import RegistrationConfig
from case_registry.domain.errors.registration import (
    InvalidDraftValueError,
    SessionNotFoundError,
    UnknownDraftFieldError,
    WorkflowNotReadyError,
)
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.registration_lifecycle import RegistrationViewState

router = APIRouter(prefix="/v1/case-registration", tags=["case-registration"])

_NOT_FOUND = {"model": CaseRegistrationErrorResponse, "description": "Session not found"}
_UNAUTHORIZED = {
    "model": CaseRegistrationErrorResponse,
    "description": "Caller identity missing",
}
_FORBIDDEN = {
    "model": CaseRegistrationErrorResponse,
    "description": "Session is not granted access",
}


def _problem(
    request: Request, status_code: int, type_suffix: str, title: str, detail: str
) -> dict[str, Any]:
    return {
        "type": f"urn:case-registry:registration:{type_suffix}",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": str(request.url.path),
    }


def _load_session(
    request: Request,
    registry: RegistrationSessionRegistry,
    session_id: UUID,
    identity: CallerIdentity,
) -> RegistrationSession:
    try:
        return registry.get(session_id, identity)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_problem(request, 404, "session-not-found", "Session Not Found", str(e)),
        ) from None


def _not_ready(request: Request, e: WorkflowNotReadyError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=_problem(request, 403, "not-granted", "Registration Not Available", str(e)),
    )


@router.post(
    "/sessions",
    response_model=RegistrationSessionResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={401: _UNAUTHORIZED},
    summary="Open a case registration session",
    description=(
        "Opens a session and starts the caller's access check. The session "
        "is returned in LOADING; poll it (optionally with wait=true) until "
        "it settles into DENIED or GRANTED_IDLE."
    ),
)
async def open_session(
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
) -> RegistrationSessionResponse:
    session = registry.open(identity)
    return RegistrationSessionResponse.from_snapshot(
        session.session_id, session.view.render()
    )


@router.get(
    "/sessions/{session_id}",
    response_model=RegistrationSessionResponse,
    responses={401: _UNAUTHORIZED, 404: _NOT_FOUND},
    summary="Get a registration session snapshot",
)
async def get_session(
    session_id: UUID,
    request: Request,
    wait: bool = Query(
        default=False,
        description="Long-poll until the access check settles (capped by config)",
    ),
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
    config: RegistrationConfig = Depends(get_registration_config),
) -> RegistrationSessionResponse:
    """Return the session snapshot.

    With wait=true the request is held until the access check settles or
    access_wait_seconds elapses, whichever comes first. A timed-out wait
    returns the LOADING snapshot rather than an error.
    """
    session = _load_session(request, registry, session_id, identity)
    view = session.view

    if wait and view.state is RegistrationViewState.LOADING:
        try:
            await view.wait_until_ready(timeout=config.access_wait_seconds)
        except asyncio.TimeoutError:
            pass

    return RegistrationSessionResponse.from_snapshot(session_id, view.render())


@router.patch(
    "/sessions/{session_id}/draft",
    response_model=RegistrationSessionResponse,
    responses={401: _UNAUTHORIZED, 403: _FORBIDDEN, 404: _NOT_FOUND},
    summary="Update form fields",
)
async def update_draft(
    session_id: UUID,
    request_data: UpdateDraftRequest,
    request: Request,
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
) -> RegistrationSessionResponse:
    session = _load_session(request, registry, session_id, identity)

    try:
        session.view.edit(**request_data.changes())
    except WorkflowNotReadyError as e:
        raise _not_ready(request, e) from None
    except UnknownDraftFieldError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_problem(request, 400, "unknown-field", "Unknown Field", str(e)),
        ) from None
    except InvalidDraftValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_problem(request, 400, "invalid-choice", "Invalid Choice", str(e)),
        ) from None

    return RegistrationSessionResponse.from_snapshot(session_id, session.view.render())


@router.post(
    "/sessions/{session_id}/submit",
    response_model=SubmitCaseResponse,
    responses={
        401: _UNAUTHORIZED,
        403: _FORBIDDEN,
        404: _NOT_FOUND,
        409: {
            "model": CaseRegistrationErrorResponse,
            "description": "A submission is already in flight",
        },
    },
    summary="Submit the case draft",
    description=(
        "Validates the draft and, if every field is filled in, sends it to "
        "the case backend. Validation and backend failures return 200 with "
        "a failure outcome and the corresponding notice."
    ),
)
async def submit_case(
    session_id: UUID,
    request: Request,
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
) -> SubmitCaseResponse:
    session = _load_session(request, registry, session_id, identity)
    view = session.view

    if not view.state.is_granted():
        raise _not_ready(request, WorkflowNotReadyError(view.state.value))
    if view.state is RegistrationViewState.GRANTED_IN_FLIGHT:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=_problem(
                request,
                409,
                "submission-in-flight",
                "Submission In Flight",
                "A submission for this session is already in progress",
            ),
        )

    outcome = await view.submit()

    return SubmitCaseResponse(
        session=RegistrationSessionResponse.from_snapshot(session_id, view.render()),
        outcome=(
            SubmissionOutcomeModel.from_outcome(outcome) if outcome is not None else None
        ),
    )


@router.delete(
    "/sessions/{session_id}/notices/{notice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={401: _UNAUTHORIZED, 404: _NOT_FOUND},
    summary="Dismiss a notice",
)
async def dismiss_notice(
    session_id: UUID,
    notice_id: UUID,
    request: Request,
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
) -> Response:
    session = _load_session(request, registry, session_id, identity)

    if not session.view.dismiss_notice(notice_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_problem(
                request,
                404,
                "notice-not-found",
                "Notice Not Found",
                f"Notice {notice_id} is not visible",
            ),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={401: _UNAUTHORIZED, 404: _NOT_FOUND},
    summary="Close a registration session",
)
async def close_session(
    session_id: UUID,
    request: Request,
    identity: CallerIdentity = Depends(get_caller_identity),
    registry: RegistrationSessionRegistry = Depends(get_session_registry),
) -> Response:
    _load_session(request, registry, session_id, identity)
    registry.close(session_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
