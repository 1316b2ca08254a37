"""Case Creation Port.

Defines the contract for the external case-creation collaborator and
the shape of its result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from case_registry.domain.models.caller_identity import CallerIdentity


@dataclass(frozen=True)
class CaseCreationResult:
    """Result returned by the case-creation collaborator.

    Attributes:
        status: True when the case was registered.
        new_case_id: Identifier assigned to the new case (on success).
        error: Application-level error text (on failure).
    """

    status: bool
    new_case_id: str | None = None
    error: str | None = None


@runtime_checkable
class CaseCreationProtocol(Protocol):
    """Protocol for registering a new case with the backend.

    An application-level rejection is reported through a result with
    status=False. Transport failures are raised.
    """

    async def add_case(
        self,
        identity: CallerIdentity,
        court_id: str,
        description: str,
        case_type: str,
        petitioner: str,
        respondent: str,
        start_date: str,
        status: str,
    ) -> CaseCreationResult:
        """Register a case.

        Args:
            identity: The caller registering the case.
            court_id: Court identifier.
            description: Free-text description of the case.
            case_type: One of Civil, Criminal, Family.
            petitioner: Petitioner name.
            respondent: Respondent name.
            start_date: ISO calendar date (YYYY-MM-DD).
            status: One of Open, Under Investigation, Closed.

        Returns:
            CaseCreationResult describing the backend's answer.
        """
        ...
