"""Field validator for case drafts.

A draft is submittable when every field is a non-empty string. Values are
not trimmed or otherwise normalized: a single space counts as filled in.
Selection values are restricted when the draft is edited, so only presence
is checked here.
"""

from __future__ import annotations

from case_registry.domain.models.case_draft import CaseDraft, CaseDraftValues


def missing_fields(draft: CaseDraft | CaseDraftValues) -> tuple[str, ...]:
    """Return the names of empty fields, in form order."""
    values = draft.snapshot() if isinstance(draft, CaseDraft) else draft
    return tuple(
        name
        for name, value in values.as_dict().items()
        if not isinstance(value, str) or len(value) == 0
    )


def validate_case_draft(draft: CaseDraft | CaseDraftValues) -> bool:
    """Check whether every required field is filled in."""
    return not missing_fields(draft)


class FieldValidator:
    """Injectable wrapper around validate_case_draft.

    Holds no state; exists so the view can take a validator collaborator.
    """

    def validate(self, draft: CaseDraft | CaseDraftValues) -> bool:
        return validate_case_draft(draft)

    def missing_fields(self, draft: CaseDraft | CaseDraftValues) -> tuple[str, ...]:
        return missing_fields(draft)
