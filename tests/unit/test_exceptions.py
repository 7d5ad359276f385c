from __future__ import annotations

import pytest

from avoca.exceptions import (
    AvocaError,
    BodyCaptureError,
    ContextCancelledError,
    DeadlineExceededError,
    RequestCreationError,
    TransportError,
)


def test_request_creation_error() -> None:
    cause = ValueError("an error message")
    error = RequestCreationError(cause)
    assert str(error) == "request creation failed: an error message"
    assert error.cause is cause


def test_body_capture_error() -> None:
    cause = OSError("broken pipe")
    error = BodyCaptureError(cause)
    assert str(error) == "body capture failed: broken pipe"
    assert error.cause is cause


def test_transport_error() -> None:
    cause = OSError("connection refused")
    error = TransportError(method="POST", url="https://example.com", cause=cause)
    assert str(error) == "POST request to https://example.com failed: connection refused"
    assert error.method == "POST"
    assert error.url == "https://example.com"
    assert error.cause is cause


def test_context_cancelled_error() -> None:
    assert str(ContextCancelledError()) == "context cancelled"


def test_deadline_exceeded_error() -> None:
    error = DeadlineExceededError()
    assert str(error) == "context deadline exceeded"
    assert isinstance(error, ContextCancelledError)


@pytest.mark.parametrize(
    "error",
    [
        RequestCreationError(ValueError()),
        BodyCaptureError(OSError()),
        TransportError("GET", "https://example.com", OSError()),
        ContextCancelledError(),
        DeadlineExceededError(),
    ],
)
def test_errors_inherit_avoca_error(error: Exception) -> None:
    assert isinstance(error, AvocaError)
