r"""Implement the HTTP client that retries requests.

The ``Client`` runs one logical request through its retrier. The body of
the request is captured once and replayed on every attempt, and each
attempt is classified as a transport failure, a retryable status or a
final response. Only transport failures are reported as errors: when
the retrier gives up on a retryable status, the last response is
returned as-is and the caller inspects its status code.
"""

from __future__ import annotations

__all__ = ["Client"]

import logging
from typing import TYPE_CHECKING, NoReturn

import httpx

from avoca.body import capture_body, replay_body
from avoca.config import ClientConfig
from avoca.exceptions import ContextCancelledError, RequestCreationError, TransportError
from avoca.executor import HttpxExecutor
from avoca.outcome import FinalResponse, RetryableStatus, TransportFailure
from avoca.request import new_request

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from avoca.body import Body
    from avoca.context import Context
    from avoca.executor import BaseExecutor
    from avoca.outcome import Outcome
    from avoca.request import Request

logger: logging.Logger = logging.getLogger(__name__)


class Client:
    r"""HTTP client with configurable retries.

    By default, the client uses:

    - an ``httpx.Client`` with a timeout of 60 seconds,
    - a retrier that does not retry,
    - a retry policy that returns ``False`` for all status codes.

    Args:
        config: Optional ``ClientConfig`` with the retrier, the retry
            policy and the timeout of the default executor. If ``None``,
            a default ``ClientConfig`` is used.
        executor: Optional executor performing the request attempts.
            If ``None``, an ``HttpxExecutor`` is created and closed when
            the client is closed. An executor passed by the caller is
            never closed by the client.

    Example:
        ```pycon
        >>> from avoca import Client, Context
        >>> from avoca.config import ClientConfig
        >>> from avoca.policy import retry_on_server_errors
        >>> from avoca.retrier import MaxAttemptsRetrier
        >>> config = ClientConfig(
        ...     retrier=MaxAttemptsRetrier(max_attempts=3),
        ...     retry_policy=retry_on_server_errors,
        ... )
        >>> with Client(config=config) as client:  # doctest: +SKIP
        ...     response = client.get(Context(), "https://api.example.com/data")
        ...

        ```
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        executor: BaseExecutor | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._owns_executor = executor is None
        self._executor: BaseExecutor = executor or HttpxExecutor(timeout=self._config.timeout)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config}, executor={self._executor})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def executor(self) -> BaseExecutor:
        return self._executor

    def close(self) -> None:
        r"""Close the executor if it was created by this client."""
        if self._owns_executor:
            self._executor.close()

    def execute(self, request: Request) -> httpx.Response:
        r"""Send a request, retrying it according to the configuration.

        The body of the request is read and closed before the first
        attempt, then ``request.body`` is replaced by a fresh copy before
        every attempt.

        Args:
            request: The request to send.

        Returns:
            The response of the last attempt. If every attempt returned
            a retryable status code, the last of these responses is
            returned; it is not treated as an error. The caller owns the
            response and should close it.

        Raises:
            RequestCreationError: If the context of the request is
                missing or already cancelled.
            BodyCaptureError: If the body cannot be read or closed.
            TransportError: If the last attempt failed at the transport
                level.
            ContextCancelledError: If the retrier stopped because the
                context was cancelled.
        """
        if request.context is None:
            raise RequestCreationError(ValueError("context must not be None"))
        error = request.context.error()
        if error is not None:
            raise RequestCreationError(error)

        data = capture_body(request.body)
        retained: list[httpx.Response] = []

        def attempt(context: Context) -> Outcome:  # noqa: ARG001
            request.body = replay_body(data)
            try:
                response = self._executor.send(request)
            except Exception as exc:
                logger.debug(
                    f"{request.method} request to {request.url} encountered "
                    f"{type(exc).__name__}: {exc}"
                )
                return TransportFailure(exc)
            # Only the latest response stays open
            while retained:
                retained.pop().close()
            retained.append(response)
            if self._config.retry_policy(response.status_code):
                logger.debug(
                    f"{request.method} request to {request.url} returned "
                    f"retryable status {response.status_code}"
                )
                return RetryableStatus(response)
            return FinalResponse(response)

        outcome = self._config.retrier.do(request.context, attempt)
        if isinstance(outcome, TransportFailure):
            while retained:
                retained.pop().close()
            self._raise_failure(request, outcome.error)
        return outcome.response

    do = execute

    def request(
        self,
        context: Context | None,
        method: str,
        url: str | httpx.URL,
        body: Body | None = None,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Build a request and send it with ``execute``.

        Args:
            context: The context of the request.
            method: The HTTP method.
            url: The target URL.
            body: Optional request body.
            headers: Optional request headers.

        Returns:
            The response of the last attempt.

        Raises:
            RequestCreationError: If the request cannot be built. No
                attempt is made.
        """
        return self.execute(new_request(context, method, url, body=body, headers=headers))

    def get(
        self,
        context: Context | None,
        url: str | httpx.URL,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP GET request.

        Example:
            ```pycon
            >>> from avoca import Client, Context
            >>> with Client() as client:  # doctest: +SKIP
            ...     response = client.get(Context(), "https://api.example.com/data")
            ...

            ```
        """
        return self.request(context, "GET", url, headers=headers)

    def post(
        self,
        context: Context | None,
        url: str | httpx.URL,
        body: Body | None = None,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP POST request.

        Example:
            ```pycon
            >>> from avoca import Client, Context
            >>> with Client() as client:  # doctest: +SKIP
            ...     response = client.post(
            ...         Context(),
            ...         "https://api.example.com/data",
            ...         body=b'{"id": "me"}',
            ...         headers={"content-type": "application/json"},
            ...     )
            ...

            ```
        """
        return self.request(context, "POST", url, body=body, headers=headers)

    def put(
        self,
        context: Context | None,
        url: str | httpx.URL,
        body: Body | None = None,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP PUT request."""
        return self.request(context, "PUT", url, body=body, headers=headers)

    def patch(
        self,
        context: Context | None,
        url: str | httpx.URL,
        body: Body | None = None,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP PATCH request."""
        return self.request(context, "PATCH", url, body=body, headers=headers)

    def delete(
        self,
        context: Context | None,
        url: str | httpx.URL,
        headers: Mapping[str, str] | httpx.Headers | None = None,
    ) -> httpx.Response:
        r"""Send an HTTP DELETE request."""
        return self.request(context, "DELETE", url, headers=headers)

    def _raise_failure(self, request: Request, error: Exception) -> NoReturn:
        if isinstance(error, ContextCancelledError):
            logger.debug(f"{request.method} request to {request.url} cancelled: {error}")
            raise error
        logger.debug(f"{request.method} request to {request.url} failed: {error}")
        raise TransportError(method=request.method, url=str(request.url), cause=error) from error
