r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from afanout.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=0.5)
    assert backoff.calculate(0) == 0.5  # 0.5 * 2^0
    assert backoff.calculate(1) == 1.0  # 0.5 * 2^1
    assert backoff.calculate(2) == 2.0  # 0.5 * 2^2
    assert backoff.calculate(3) == 4.0  # 0.5 * 2^3


def test_exponential_backoff_default_values() -> None:
    """Test that the default base delay is 100ms."""
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.1
    assert backoff.calculate(0) == 0.1
    assert backoff.calculate(1) == 0.2
    assert backoff.calculate(2) == 0.4


def test_exponential_backoff_is_uncapped() -> None:
    assert ExponentialBackoff(base_delay=1.0).calculate(10) == 1024.0


def test_exponential_backoff_zero_base_delay() -> None:
    """Test exponential backoff with zero base_delay."""
    backoff = ExponentialBackoff(base_delay=0.0)
    assert backoff.calculate(0) == 0.0
    assert backoff.calculate(5) == 0.0


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-1.0)


def test_exponential_backoff_only_accepts_base_delay() -> None:
    with pytest.raises(TypeError):
        ExponentialBackoff(base_delay=1.0, max_delay=5.0)  # type: ignore[call-arg]


def test_exponential_backoff_repr() -> None:
    assert repr(ExponentialBackoff(base_delay=0.2)) == "ExponentialBackoff(base_delay=0.2)"
