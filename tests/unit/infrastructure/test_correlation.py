"""Unit tests for correlation ID scopes."""

import asyncio

import pytest

from case_registry.infrastructure.observability.correlation import (
    accept_correlation_id,
    add_correlation_id,
    correlation_scope,
    current_correlation_id,
    new_correlation_id,
)


class TestAcceptCorrelationId:
    def test_plain_token_is_kept(self) -> None:
        assert accept_correlation_id("req-1.a:b_c") == "req-1.a:b_c"

    @pytest.mark.parametrize(
        "candidate", [None, "", "has space", "x" * 129, "trailing\n"]
    )
    def test_unusable_id_is_replaced(self, candidate: str | None) -> None:
        replacement = accept_correlation_id(candidate)

        assert replacement != candidate
        assert len(replacement) == 36

    def test_generated_ids_are_unique(self) -> None:
        assert new_correlation_id() != new_correlation_id()


class TestCorrelationScope:
    def test_no_id_outside_a_scope(self) -> None:
        assert current_correlation_id() is None

    def test_scope_sets_and_restores(self) -> None:
        with correlation_scope("outer") as outer:
            with correlation_scope("inner"):
                assert current_correlation_id() == "inner"
            assert current_correlation_id() == outer == "outer"

        assert current_correlation_id() is None

    def test_scope_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with correlation_scope("req-err"):
                raise RuntimeError("boom")

        assert current_correlation_id() is None

    async def test_task_started_in_scope_outlives_it(self) -> None:
        release = asyncio.Event()

        async def access_check() -> str | None:
            await release.wait()
            return current_correlation_id()

        with correlation_scope("req-2"):
            task = asyncio.create_task(access_check())
        release.set()

        assert await task == "req-2"
        assert current_correlation_id() is None


class TestAddCorrelationId:
    def test_stamps_scope_id(self) -> None:
        with correlation_scope("req-1"):
            event = add_correlation_id(None, "info", {"event": "x"})

        assert event["correlation_id"] == "req-1"

    def test_bound_id_wins(self) -> None:
        with correlation_scope("req-1"):
            event = add_correlation_id(
                None, "info", {"event": "x", "correlation_id": "explicit"}
            )

        assert event["correlation_id"] == "explicit"

    def test_outside_scope_adds_nothing(self) -> None:
        assert add_correlation_id(None, "info", {"event": "x"}) == {"event": "x"}
