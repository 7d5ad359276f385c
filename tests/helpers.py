r"""Shared test helpers for the client and the HTTP method functions."""

from __future__ import annotations

__all__ = [
    "DUMMY_HEADERS",
    "DUMMY_REQUEST_BODY",
    "TEST_URL",
    "RecordingExecutor",
    "create_mock_response",
]

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx

from avoca.executor import BaseExecutor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from avoca.request import Request

TEST_URL = "https://api.example.com/data"
DUMMY_REQUEST_BODY = b'{ "id": "me" }'
DUMMY_HEADERS = {"content-type": "application/json"}


def create_mock_response(status_code: int = 200) -> Mock:
    """Create a mock httpx.Response with the given status code."""
    return Mock(spec=httpx.Response, status_code=status_code)


class RecordingExecutor(BaseExecutor):
    """Executor replaying a scripted sequence of results.

    Each item of ``results`` is either a status code, producing a mock
    response, or an exception instance, which is raised. The last item
    is reused once the sequence is exhausted. The body and the request
    seen by every attempt are recorded.

    Args:
        results: The scripted results, in attempt order.
    """

    def __init__(self, results: Iterable[int | Exception]) -> None:
        self.results = list(results)
        self.bodies: list[bytes | None] = []
        self.requests: list[Request] = []
        self.views: list[object] = []
        self.responses: list[Mock] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.bodies)

    def send(self, request: Request) -> httpx.Response:
        self.requests.append(request)
        self.views.append(request.body)
        self.bodies.append(request.body.read() if request.body is not None else None)
        result = self.results[min(len(self.bodies), len(self.results)) - 1]
        if isinstance(result, Exception):
            raise result
        response = create_mock_response(status_code=result)
        self.responses.append(response)
        return response

    def close(self) -> None:
        self.closed = True
