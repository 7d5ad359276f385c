from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from avoca.context import Context
from avoca.executor import BaseExecutor


@pytest.fixture
def context() -> Context:
    """Create a context that is not cancelled."""
    return Context()


@pytest.fixture
def cancelled_context() -> Context:
    """Create a context that is already cancelled."""
    ctx = Context()
    ctx.cancel()
    return ctx


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_executor(mock_response: httpx.Response) -> Mock:
    """Create a mock executor returning ``mock_response``."""
    return Mock(spec=BaseExecutor, send=Mock(return_value=mock_response))
