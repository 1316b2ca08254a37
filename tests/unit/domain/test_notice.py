"""Unit tests for notice models and factories."""

from datetime import datetime, timedelta, timezone

import pytest

from case_registry.domain.models.notice import (
    GENERIC_ERROR_MESSAGE,
    Notice,
    NoticeKind,
    application_failure_notice,
    submission_success_notice,
    transport_failure_notice,
    validation_failure_notice,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestNoticeFactories:
    """Tests for the four workflow notices."""

    def test_validation_failure(self) -> None:
        notice = validation_failure_notice(NOW, 5000)
        assert notice.kind is NoticeKind.ERROR
        assert notice.title == "All fields are required."
        assert notice.description is None

    def test_submission_success_names_case_id(self) -> None:
        notice = submission_success_notice("C-123", NOW, 5000)
        assert notice.kind is NoticeKind.SUCCESS
        assert notice.title == "Case registered successfully with Case ID: C-123"

    def test_application_failure_uses_collaborator_error(self) -> None:
        notice = application_failure_notice("Duplicate court ID", NOW, 5000)
        assert notice.kind is NoticeKind.ERROR
        assert notice.title == "Failed to register case."
        assert notice.description == "Duplicate court ID"

    @pytest.mark.parametrize("error", [None, ""])
    def test_failures_fall_back_to_generic_message(self, error: str | None) -> None:
        assert application_failure_notice(error, NOW, 5000).description == (
            GENERIC_ERROR_MESSAGE
        )
        assert transport_failure_notice(error, NOW, 5000).description == (
            "An unknown error occurred."
        )

    def test_transport_failure_title(self) -> None:
        notice = transport_failure_notice("network down", NOW, 5000)
        assert notice.title == "Error"
        assert notice.text == "Error network down"


class TestNoticeLifetime:
    """Tests for expiry arithmetic."""

    def test_expires_after_duration(self) -> None:
        notice = validation_failure_notice(NOW, 5000)
        assert notice.expires_at == NOW + timedelta(seconds=5)
        assert not notice.is_expired(NOW + timedelta(milliseconds=4999))
        assert notice.is_expired(NOW + timedelta(seconds=5))

    def test_dismissible_by_default(self) -> None:
        assert validation_failure_notice(NOW, 5000).dismissible

    def test_rejects_non_positive_duration(self) -> None:
        with pytest.raises(ValueError, match="duration_ms"):
            Notice(kind=NoticeKind.ERROR, title="x", created_at=NOW, duration_ms=0)

    def test_each_notice_has_unique_id(self) -> None:
        first = validation_failure_notice(NOW, 5000)
        second = validation_failure_notice(NOW, 5000)
        assert first.id != second.id
