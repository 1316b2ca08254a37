"""Application services for Case Registry."""

from case_registry.application.services.access_gate import AccessGate
from case_registry.application.services.base import LoggingMixin
from case_registry.application.services.case_registration_view import (
    CaseRegistrationView,
    RegistrationSnapshot,
)
from case_registry.application.services.field_validator import (
    FieldValidator,
    missing_fields,
    validate_case_draft,
)
from case_registry.application.services.notice_board import NoticeBoard
from case_registry.application.services.session_registry import (
    RegistrationSession,
    RegistrationSessionRegistry,
)
from case_registry.application.services.submission_controller import (
    SubmissionController,
)
from case_registry.application.services.time_authority_service import (
    TimeAuthorityService,
)

__all__: list[str] = [
    "AccessGate",
    "CaseRegistrationView",
    "FieldValidator",
    "LoggingMixin",
    "NoticeBoard",
    "RegistrationSession",
    "RegistrationSessionRegistry",
    "RegistrationSnapshot",
    "SubmissionController",
    "TimeAuthorityService",
    "missing_fields",
    "validate_case_draft",
]
