"""Domain models for Case Registry."""

from case_registry.domain.models.access_state import (
    ACCESS_DENIED_FALLBACK_MESSAGE,
    ACCESS_DENIED_MESSAGE,
    AccessState,
    AccessStatus,
)
from case_registry.domain.models.caller_identity import CallerIdentity
from case_registry.domain.models.case_draft import (
    CASE_STATUS_VALUES,
    CASE_TYPE_VALUES,
    DRAFT_FIELDS,
    CaseDraft,
    CaseDraftValues,
    CaseStatus,
    CaseType,
)
from case_registry.domain.models.notice import (
    DEFAULT_NOTICE_DURATION_MS,
    GENERIC_ERROR_MESSAGE,
    Notice,
    NoticeKind,
)
from case_registry.domain.models.registration_lifecycle import (
    RegistrationEvent,
    RegistrationLifecycle,
    RegistrationViewState,
)
from case_registry.domain.models.submission import SubmissionOutcome, SubmissionState

__all__: list[str] = [
    "ACCESS_DENIED_FALLBACK_MESSAGE",
    "ACCESS_DENIED_MESSAGE",
    "AccessState",
    "AccessStatus",
    "CallerIdentity",
    "CASE_STATUS_VALUES",
    "CASE_TYPE_VALUES",
    "CaseDraft",
    "CaseDraftValues",
    "CaseStatus",
    "CaseType",
    "DEFAULT_NOTICE_DURATION_MS",
    "DRAFT_FIELDS",
    "GENERIC_ERROR_MESSAGE",
    "Notice",
    "NoticeKind",
    "RegistrationEvent",
    "RegistrationLifecycle",
    "RegistrationViewState",
    "SubmissionOutcome",
    "SubmissionState",
]
