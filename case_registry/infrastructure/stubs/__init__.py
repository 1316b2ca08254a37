"""In-memory stand-ins for the external collaborators."""

from case_registry.infrastructure.stubs.case_creation_stub import (
    CaseCreationStub,
    RecordedCase,
)
from case_registry.infrastructure.stubs.role_checker_stub import RoleCheckerStub

__all__: list[str] = [
    "CaseCreationStub",
    "RecordedCase",
    "RoleCheckerStub",
]
