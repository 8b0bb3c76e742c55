"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without real waits or external services.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def mock_reporter():
    """Mock ErrorReporter recording reported exceptions."""
    mock = MagicMock()
    mock.report = MagicMock(return_value=None)
    return mock


@pytest.fixture
def mock_pause():
    """Replace the engine's pause with an AsyncMock (no real waiting).

    Waited durations are available as:
        [c.args[0] for c in mock_pause.await_args_list]
    """
    with patch("auto_retry.retry.engine.pause", new=AsyncMock(return_value=None)) as mock:
        yield mock


@pytest.fixture
def waited():
    """Helper returning the list of durations passed to a mocked pause."""
    def _waited(mock_pause) -> list[float]:
        return [c.args[0] for c in mock_pause.await_args_list]

    return _waited
