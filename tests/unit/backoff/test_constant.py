r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from afanout.backoff import BaseBackoffStrategy, ConstantBackoff


def test_constant_backoff_default_is_immediate() -> None:
    """Test that the default constant delay is zero."""
    backoff = ConstantBackoff()
    assert backoff.delay == 0.0
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(7) == 0.0


@pytest.mark.parametrize("attempt", [0, 1, 2])
def test_constant_backoff_ignores_attempt(attempt: int) -> None:
    assert ConstantBackoff(delay=2.5).calculate(attempt) == 2.5


def test_constant_backoff_invalid_delay() -> None:
    """Test that negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-0.1)


def test_constant_backoff_is_backoff_strategy() -> None:
    assert isinstance(ConstantBackoff(), BaseBackoffStrategy)


def test_base_backoff_strategy_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseBackoffStrategy()  # type: ignore[abstract]
