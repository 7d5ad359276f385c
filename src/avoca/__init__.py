r"""avoca - HTTP client with configurable retries.

This package wraps an HTTP transport (httpx by default) and re-sends a
request across transient failures. The body of a request is captured
once and replayed byte-for-byte on every attempt, so requests with a
streamed body can be retried safely.

Key Features:
    - Pluggable retrier controlling the number of attempts and the waiting
      between them
    - Pluggable retry policy deciding which status codes are retried
    - Pluggable executor performing each attempt
    - Cancellation and deadlines through a request ``Context``
    - Helpers for GET, POST, PUT, PATCH and DELETE

A response whose status code is retryable is returned to the caller when
the retrier gives up; only transport failures are raised.

Example:
    ```pycon
    >>> from avoca import Client, Context
    >>> from avoca.config import ClientConfig
    >>> from avoca.policy import retry_on_server_errors
    >>> from avoca.retrier import MaxAttemptsRetrier
    >>> with Client(
    ...     config=ClientConfig(
    ...         retrier=MaxAttemptsRetrier(max_attempts=4),
    ...         retry_policy=retry_on_server_errors,
    ...     )
    ... ) as client:  # doctest: +SKIP
    ...     response = client.post(Context(), "https://api.example.com/data", body=b"{}")
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AvocaError",
    "BodyCaptureError",
    "Client",
    "ClientConfig",
    "Context",
    "ContextCancelledError",
    "DeadlineExceededError",
    "Request",
    "RequestCreationError",
    "TransportError",
    "__version__",
    "delete",
    "get",
    "new_request",
    "patch",
    "post",
    "put",
]

from importlib.metadata import PackageNotFoundError, version

from avoca.client import Client
from avoca.config import ClientConfig
from avoca.context import Context
from avoca.delete import delete
from avoca.exceptions import (
    AvocaError,
    BodyCaptureError,
    ContextCancelledError,
    DeadlineExceededError,
    RequestCreationError,
    TransportError,
)
from avoca.get import get
from avoca.patch import patch
from avoca.post import post
from avoca.put import put
from avoca.request import Request, new_request

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
