r"""Define the exceptions raised by avoca.

All the public exceptions inherit from ``AvocaError`` so callers can
catch every failure of this package with a single ``except`` clause.
"""

from __future__ import annotations

__all__ = [
    "AvocaError",
    "BodyCaptureError",
    "ContextCancelledError",
    "DeadlineExceededError",
    "RequestCreationError",
    "TransportError",
]


class AvocaError(Exception):
    r"""Base class of all the exceptions raised by avoca."""


class RequestCreationError(AvocaError):
    r"""Raised when a request cannot be built.

    The request is never sent and never retried. The underlying error is
    available in ``cause``.

    Args:
        cause: The error that prevented the request creation.

    Example:
        ```pycon
        >>> from avoca.exceptions import RequestCreationError
        >>> error = RequestCreationError(ValueError("an error message"))
        >>> str(error)
        'request creation failed: an error message'

        ```
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"request creation failed: {cause}")
        self.cause = cause


class BodyCaptureError(AvocaError):
    r"""Raised when the body of a request cannot be read or closed.

    Retrying without a replayable copy of the body is unsafe, so this
    error aborts the call before the first attempt.

    Args:
        cause: The error raised while reading or closing the body.

    Example:
        ```pycon
        >>> from avoca.exceptions import BodyCaptureError
        >>> str(BodyCaptureError(OSError("broken pipe")))
        'body capture failed: broken pipe'

        ```
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"body capture failed: {cause}")
        self.cause = cause


class TransportError(AvocaError):
    r"""Raised when the last attempt of a request failed at the transport
    level.

    Args:
        method: The HTTP method of the request.
        url: The URL of the request.
        cause: The error raised by the request executor.

    Example:
        ```pycon
        >>> from avoca.exceptions import TransportError
        >>> error = TransportError("GET", "https://example.com", OSError("refused"))
        >>> str(error)
        'GET request to https://example.com failed: refused'
        >>> error.method
        'GET'

        ```
    """

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        super().__init__(f"{method} request to {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class ContextCancelledError(AvocaError):
    r"""Reported by a context that was cancelled."""

    def __init__(self, message: str = "context cancelled") -> None:
        super().__init__(message)


class DeadlineExceededError(ContextCancelledError):
    r"""Reported by a context whose deadline has passed."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)
