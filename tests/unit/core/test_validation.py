r"""Unit tests for retry parameter validation."""

from __future__ import annotations

import pytest

from afanout.core import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_RETRIES,
    RATE_LIMIT_TOKEN,
    validate_retry_params,
)


def test_defaults() -> None:
    assert DEFAULT_MAX_RETRIES == 3
    assert DEFAULT_BASE_DELAY == 0.1
    assert RATE_LIMIT_TOKEN == "429"


@pytest.mark.parametrize(("max_retries", "base_delay"), [(0, 0.0), (3, 0.1), (10, 1.5)])
def test_validate_retry_params_valid(max_retries: int, base_delay: float) -> None:
    """Test that valid parameters pass validation."""
    validate_retry_params(max_retries=max_retries, base_delay=base_delay)


def test_validate_retry_params_negative_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0, got -1"):
        validate_retry_params(max_retries=-1, base_delay=0.1)


@pytest.mark.parametrize("max_retries", [1.5, "3", True])
def test_validate_retry_params_non_integer_max_retries(max_retries: object) -> None:
    with pytest.raises(ValueError, match=r"max_retries must be an integer"):
        validate_retry_params(max_retries=max_retries, base_delay=0.1)  # type: ignore[arg-type]


def test_validate_retry_params_negative_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be >= 0, got -0.5"):
        validate_retry_params(max_retries=3, base_delay=-0.5)
