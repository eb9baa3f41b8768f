from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.config import RetryOptions
from aretry.interval import ConstantRetryInterval

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def no_wait_options() -> RetryOptions:
    """Create retry options without delay between attempts and 3 max
    attempts."""
    return RetryOptions(retry_interval=ConstantRetryInterval(0.0), max_try_count=3)


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing hooks.

    Returns:
        A Mock object that can be used as a hook.
    """
    return Mock()
