"""Command-line case registration.

Runs the same workflow a form would: resolve access, validate the fields,
submit once, and print the resulting notices.

Exit codes:
    0: Case registered
    1: Validation, backend or access-check timeout failure
    2: Caller may not register cases
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence

from case_registry.application.services.case_registration_view import (
    CaseRegistrationView,
)
from case_registry.bootstrap.case_registration import (
    build_registration_view,
    get_registration_config,
)
from case_registry.bootstrap.logging import configure_structlog, correlation_scope
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.case_draft import DRAFT_FIELDS, CaseStatus, CaseType
from case_registry.domain.models.notice import NoticeKind
from case_registry.domain.models.registration_lifecycle import RegistrationViewState

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ACCESS_DENIED = 2

ViewFactory = Callable[[CallerIdentity], CaseRegistrationView]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="register-case",
        description="Register a new legal case with the case-management backend",
    )
    parser.add_argument("--user-id", required=True, help="Identifier of the caller")
    parser.add_argument("--token", default=None, help="Bearer token for the backend")
    parser.add_argument("--court-id", default="", help="Court identifier")
    parser.add_argument("--description", default="", help="Case description")
    parser.add_argument(
        "--case-type",
        default="",
        choices=["", *(t.value for t in CaseType)],
        metavar="CASE_TYPE",
        help=f"One of: {', '.join(t.value for t in CaseType)}",
    )
    parser.add_argument("--petitioner", default="", help="Petitioner name")
    parser.add_argument("--respondent", default="", help="Respondent name")
    parser.add_argument("--start-date", default="", help="Start date (YYYY-MM-DD)")
    parser.add_argument(
        "--status",
        default="",
        choices=["", *(s.value for s in CaseStatus)],
        metavar="STATUS",
        help=f"One of: {', '.join(s.value for s in CaseStatus)}",
    )
    return parser


async def run(
    args: argparse.Namespace,
    view_factory: ViewFactory = build_registration_view,
    access_wait_seconds: float | None = None,
) -> int:
    """Drive one registration attempt and return the exit code.

    The attempt logs under a single fresh correlation ID.
    """
    with correlation_scope():
        return await _register(args, view_factory, access_wait_seconds)


async def _register(
    args: argparse.Namespace,
    view_factory: ViewFactory,
    access_wait_seconds: float | None,
) -> int:
    identity = CallerIdentity(user_id=args.user_id, access_token=args.token)
    view = view_factory(identity)
    view.mount()

    try:
        state = await view.wait_until_ready(timeout=access_wait_seconds)
    except asyncio.TimeoutError:
        print("Timed out waiting for the access check.", file=sys.stderr)
        return EXIT_FAILURE

    if state is RegistrationViewState.DENIED:
        print(view.render().page_notice, file=sys.stderr)
        return EXIT_ACCESS_DENIED

    view.edit(**{name: getattr(args, name) for name in DRAFT_FIELDS})
    outcome = await view.submit()

    for notice in view.render().notices:
        stream = sys.stdout if notice.kind is NoticeKind.SUCCESS else sys.stderr
        print(f"[{notice.kind.value}] {notice.text}", file=stream)

    if outcome is not None and outcome.status:
        return EXIT_SUCCESS
    return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_registration_config()
    configure_structlog(config.environment)
    return asyncio.run(run(args, access_wait_seconds=config.access_wait_seconds))


if __name__ == "__main__":
    sys.exit(main())
