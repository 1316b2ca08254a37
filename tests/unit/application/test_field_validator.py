"""Unit tests for case draft field validation."""

import pytest

from case_registry.application.services.field_validator import (
    FieldValidator,
    missing_fields,
    validate_case_draft,
)
from case_registry.domain.models.case_draft import (
    DRAFT_FIELDS,
    CaseDraft,
    CaseDraftValues,
)


class TestValidateCaseDraft:
    """Tests for the presence predicate."""

    def test_complete_draft_is_valid(self, complete_fields: dict[str, str]) -> None:
        assert validate_case_draft(CaseDraft(**complete_fields))

    def test_empty_draft_is_invalid(self) -> None:
        assert not validate_case_draft(CaseDraft())
        assert missing_fields(CaseDraft()) == DRAFT_FIELDS

    @pytest.mark.parametrize("field_name", DRAFT_FIELDS)
    def test_any_single_empty_field_is_invalid(
        self, complete_fields: dict[str, str], field_name: str
    ) -> None:
        draft = CaseDraft(**{**complete_fields, field_name: ""})

        assert not validate_case_draft(draft)
        assert missing_fields(draft) == (field_name,)

    def test_whitespace_counts_as_filled_in(
        self, complete_fields: dict[str, str]
    ) -> None:
        draft = CaseDraft(**{**complete_fields, "description": " "})
        assert validate_case_draft(draft)

    def test_selection_values_are_not_checked(
        self, complete_fields: dict[str, str]
    ) -> None:
        values = CaseDraftValues(**{**complete_fields, "case_type": "Administrative"})
        assert validate_case_draft(values)

    def test_accepts_snapshots(self, complete_fields: dict[str, str]) -> None:
        assert validate_case_draft(CaseDraft(**complete_fields).snapshot())

    def test_does_not_modify_draft(self, complete_fields: dict[str, str]) -> None:
        draft = CaseDraft(**{**complete_fields, "court_id": ""})
        before = draft.snapshot()

        validate_case_draft(draft)

        assert draft.snapshot() == before


class TestFieldValidator:
    def test_delegates_to_module_functions(
        self, complete_fields: dict[str, str]
    ) -> None:
        validator = FieldValidator()
        assert validator.validate(CaseDraft(**complete_fields))
        assert validator.missing_fields(CaseDraft(petitioner="x")) == (
            "court_id",
            "description",
            "case_type",
            "respondent",
            "start_date",
            "status",
        )
