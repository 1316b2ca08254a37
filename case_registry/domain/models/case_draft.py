"""Case draft domain model.

The draft is the in-memory form state for one registration session. It is
owned by the view: user input writes it, and the submission controller
clears it after a successful registration. Both writes are all-or-nothing
so a partially-cleared form can never mislead the user about what would be
resubmitted.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from case_registry.domain.errors.registration import (
    InvalidDraftValueError,
    UnknownDraftFieldError,
)


class CaseType(Enum):
    """Kind of legal case.

    Types:
        CIVIL: Dispute between private parties
        CRIMINAL: Prosecution of an offence
        FAMILY: Matrimonial, custody and related matters
    """

    CIVIL = "Civil"
    CRIMINAL = "Criminal"
    FAMILY = "Family"


class CaseStatus(Enum):
    """Initial status recorded for a registered case."""

    OPEN = "Open"
    UNDER_INVESTIGATION = "Under Investigation"
    CLOSED = "Closed"


# Field order matches the case-creation collaborator's argument order
DRAFT_FIELDS: tuple[str, ...] = (
    "court_id",
    "description",
    "case_type",
    "petitioner",
    "respondent",
    "start_date",
    "status",
)

CASE_TYPE_VALUES: frozenset[str] = frozenset(t.value for t in CaseType)
CASE_STATUS_VALUES: frozenset[str] = frozenset(s.value for s in CaseStatus)

# Selection fields accept "" (nothing selected) or one of their choices
SELECTION_CHOICES: dict[str, tuple[str, ...]] = {
    "case_type": tuple(t.value for t in CaseType),
    "status": tuple(s.value for s in CaseStatus),
}


def check_selections(values: dict[str, str]) -> None:
    """Reject selection values a select widget could not produce.

    Raises:
        InvalidDraftValueError: For the first offending selection field.
    """
    for name, choices in SELECTION_CHOICES.items():
        value = values.get(name, "")
        if value != "" and value not in choices:
            raise InvalidDraftValueError(name, value, list(choices))


@dataclass(frozen=True)
class CaseDraftValues:
    """Immutable copy of the draft fields at one point in time.

    Attributes:
        court_id: Court identifier.
        description: Free-text case description.
        case_type: One of CaseType values, or "" when nothing is selected.
        petitioner: Petitioner name.
        respondent: Respondent name.
        start_date: ISO calendar date (YYYY-MM-DD), or "".
        status: One of CaseStatus values, or "" when nothing is selected.
    """

    court_id: str = ""
    description: str = ""
    case_type: str = ""
    petitioner: str = ""
    respondent: str = ""
    start_date: str = ""
    status: str = ""

    def as_dict(self) -> dict[str, str]:
        """Return the fields as a plain dict in collaborator order."""
        return asdict(self)

    def is_empty(self) -> bool:
        """Check whether every field is empty."""
        return all(value == "" for value in self.as_dict().values())


@dataclass
class CaseDraft:
    """Mutable form state for a single registration session.

    All fields are plain strings as a form widget would hold them. The
    selection fields only ever hold "" or one of their choices; whether
    the draft is complete is left to the validator.

    Attributes:
        court_id: Court identifier.
        description: Free-text case description.
        case_type: Selected case type value.
        petitioner: Petitioner name.
        respondent: Respondent name.
        start_date: ISO calendar date string.
        status: Selected case status value.
    """

    court_id: str = ""
    description: str = ""
    case_type: str = ""
    petitioner: str = ""
    respondent: str = ""
    start_date: str = ""
    status: str = ""

    def __post_init__(self) -> None:
        check_selections(self.snapshot().as_dict())

    def snapshot(self) -> CaseDraftValues:
        """Return an immutable copy of the current field values."""
        return CaseDraftValues(**{name: getattr(self, name) for name in DRAFT_FIELDS})

    def update(self, **fields: str) -> None:
        """Apply user input to one or more fields, all-or-nothing.

        Args:
            **fields: Field name to new value.

        Raises:
            UnknownDraftFieldError: If any name is not a draft field.
                                    No field is changed in that case.
            InvalidDraftValueError: If case_type or status is not one of
                                    its choices. No field is changed.
        """
        unknown = sorted(set(fields) - set(DRAFT_FIELDS))
        if unknown:
            raise UnknownDraftFieldError(unknown)
        check_selections(fields)
        self._apply(fields)

    def clear(self) -> None:
        """Reset every field to empty, all-or-nothing.

        If any assignment fails, the previous values are restored before
        the error propagates, so the draft is either fully cleared or
        unchanged.
        """
        self._apply({name: "" for name in DRAFT_FIELDS})

    def _apply(self, values: dict[str, str]) -> None:
        previous = self.snapshot()
        try:
            for name, value in values.items():
                setattr(self, name, value)
        except Exception:
            for name, value in previous.as_dict().items():
                object.__setattr__(self, name, value)
            raise
