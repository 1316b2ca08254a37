"""Unit tests for AccessState."""

import pytest

from case_registry.domain.errors.registration import FailureKind
from case_registry.domain.errors.state_transition import InvalidStateTransitionError
from case_registry.domain.models.access_state import (
    ACCESS_DENIED_MESSAGE,
    AccessState,
    AccessStatus,
)


class TestAccessState:
    """Tests for the settled-once access state."""

    def test_starts_loading(self) -> None:
        state = AccessState()
        assert state.status is AccessStatus.LOADING
        assert not state.is_settled
        assert not state.is_granted

    def test_settles_to_granted(self) -> None:
        state = AccessState.loading().settle(AccessState.granted())
        assert state.is_granted
        assert state.reason is None

    def test_settles_to_denied_with_reason(self) -> None:
        state = AccessState.loading().settle(AccessState.denied(ACCESS_DENIED_MESSAGE))
        assert state.status is AccessStatus.DENIED
        assert state.reason == "You do not have permission to register a case."

    def test_check_failed_is_denied_with_access_check_failure(self) -> None:
        state = AccessState.loading().settle(AccessState.check_failed("boom"))
        assert state.status is AccessStatus.DENIED
        assert state.reason == "boom"
        assert state.failure is FailureKind.ACCESS_CHECK
        assert AccessState.denied("no").failure is None

    @pytest.mark.parametrize(
        "settled",
        [AccessState.granted(), AccessState.denied("no")],
    )
    def test_settled_state_never_reverts(self, settled: AccessState) -> None:
        with pytest.raises(InvalidStateTransitionError):
            settled.settle(AccessState.granted())
        with pytest.raises(InvalidStateTransitionError):
            settled.settle(AccessState.loading())

    def test_cannot_settle_into_loading(self) -> None:
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            AccessState.loading().settle(AccessState.loading())
        assert exc_info.value.from_state is AccessStatus.LOADING
