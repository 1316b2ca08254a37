"""Application ports (collaborator interfaces) for Case Registry."""

from case_registry.application.ports.case_creation import (
    CaseCreationProtocol,
    CaseCreationResult,
)
from case_registry.application.ports.notice_publisher import NoticePublisherProtocol
from case_registry.application.ports.registration_metrics import (
    RegistrationMetricsProtocol,
)
from case_registry.application.ports.role_checker import RoleCheckerProtocol
from case_registry.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "CaseCreationProtocol",
    "CaseCreationResult",
    "NoticePublisherProtocol",
    "RegistrationMetricsProtocol",
    "RoleCheckerProtocol",
    "TimeAuthorityProtocol",
]
