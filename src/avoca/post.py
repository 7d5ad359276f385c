r"""Contains HTTP POST request with retry logic."""

from __future__ import annotations

__all__ = ["post"]

from typing import TYPE_CHECKING

from avoca.http_logic import execute_http_method

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from avoca.body import Body
    from avoca.client import Client
    from avoca.config import ClientConfig
    from avoca.context import Context
    from avoca.executor import BaseExecutor


def post(
    context: Context | None,
    url: str | httpx.URL,
    *,
    body: Body | None = None,
    headers: Mapping[str, str] | httpx.Headers | None = None,
    client: Client | None = None,
    config: ClientConfig | None = None,
    executor: BaseExecutor | None = None,
) -> httpx.Response:
    r"""Send an HTTP POST request with retry logic.

    Args:
        context: The context of the request. A missing or cancelled
            context makes the call fail before any attempt.
        url: The URL to send the POST request to.
        body: Optional request body: bytes, a string, a binary file-like
            object or an iterable of byte chunks. It is read once and
            replayed on every attempt.
        headers: Optional request headers.
        client: An optional ``Client`` used to send the request.
            If None, a new client will be created and closed after use.
        config: An optional ``ClientConfig`` for the temporary client.
            If None, default ``ClientConfig`` values are used.
        executor: An optional executor for the temporary client.

    Returns:
        An httpx.Response object containing the server's HTTP response.

    Raises:
        RequestCreationError: If the request cannot be built.
        BodyCaptureError: If the body cannot be read or closed.
        TransportError: If the last attempt failed at the transport level.

    Example:
        ```pycon
        >>> from avoca import Context, post
        >>> from avoca.config import ClientConfig
        >>> from avoca.policy import retry_on_server_errors
        >>> from avoca.retrier import MaxAttemptsRetrier
        >>> response = post(
        ...     Context(timeout=30.0),
        ...     "https://api.example.com/data",
        ...     body=b'{"id": "me"}',
        ...     headers={"content-type": "application/json"},
        ...     config=ClientConfig(
        ...         retrier=MaxAttemptsRetrier(max_attempts=3),
        ...         retry_policy=retry_on_server_errors,
        ...     ),
        ... )  # doctest: +SKIP

        ```
    """
    return execute_http_method(
        context,
        url,
        "POST",
        body=body,
        headers=headers,
        client=client,
        config=config,
        executor=executor,
    )
