from __future__ import annotations

import json
import logging
from io import StringIO
from typing import TYPE_CHECKING

import pytest

from afanout.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def structured_logger() -> Generator[tuple[logging.Logger, StringIO], None, None]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("afanout.tests.structured")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger, stream
    logger.removeHandler(handler)
    clear_correlation_id()


##############################################
#     Tests for correlation ID management    #
##############################################


def test_get_correlation_id_initially_none() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("load-123")
    assert get_correlation_id() == "load-123"
    clear_correlation_id()
    assert get_correlation_id() is None


##############################################
#     Tests for StructuredFormatter          #
##############################################


def test_structured_formatter_basic_log(
    structured_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = structured_logger
    logger.info("Test message")

    log_data = json.loads(stream.getvalue())
    assert log_data["message"] == "Test message"
    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "afanout.tests.structured"
    assert log_data["timestamp"].endswith("Z")
    assert "correlation_id" not in log_data


def test_structured_formatter_with_correlation_id(
    structured_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = structured_logger
    set_correlation_id("dashboard-42")
    logger.info("Loaded")

    assert json.loads(stream.getvalue())["correlation_id"] == "dashboard-42"


def test_structured_formatter_with_exception(
    structured_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = structured_logger
    try:
        msg = "429 Too Many Requests"
        raise RuntimeError(msg)
    except RuntimeError:
        logger.exception("Fetch failed")

    log_data = json.loads(stream.getvalue())
    assert "RuntimeError: 429 Too Many Requests" in log_data["exception"]


def test_structured_formatter_unserializable_extra(
    structured_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = structured_logger
    logger.info("Loaded", extra={"error": RuntimeError("500")})

    assert json.loads(stream.getvalue())["error"] == "500"


def test_log_structured_extra_fields(
    structured_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = structured_logger
    log_structured(logger, logging.DEBUG, "Loaded 3 operations", slots=["a", "b", "c"], time_taken_ms=12.5)

    log_data = json.loads(stream.getvalue())
    assert log_data["slots"] == ["a", "b", "c"]
    assert log_data["time_taken_ms"] == 12.5
    assert "args" not in log_data
    assert "msg" not in log_data
