from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_operation() -> AsyncMock:
    """Create an async operation that succeeds on the first call."""
    return AsyncMock(return_value="success")


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
