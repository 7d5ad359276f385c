r"""Contain the request executors performing one request attempt.

An executor sends a single request and returns the response. Any
exception raised by an executor is reported to the retrier as a transport
failure, eligible for retry.
"""

from __future__ import annotations

__all__ = ["DEFAULT_TIMEOUT", "BaseExecutor", "HttpxExecutor", "cap_timeout"]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from avoca.request import Request

logger: logging.Logger = logging.getLogger(__name__)

# Default timeout in seconds of the default transport
DEFAULT_TIMEOUT = 60.0


class BaseExecutor(ABC):
    """Abstract base class for request executors.

    Executors must not mutate the request, and must not keep a
    reference to its body once ``send`` returns.
    """

    @abstractmethod
    def send(self, request: Request) -> httpx.Response:
        """Perform one attempt of the request.

        Args:
            request: The request to send.

        Returns:
            The response of the server.

        Raises:
            Exception: If the request could not be performed. Any
                exception is treated as a transport failure.
        """

    def close(self) -> None:
        """Release the resources of the executor.

        The default implementation does nothing.
        """


class HttpxExecutor(BaseExecutor):
    r"""Executor sending requests with an ``httpx.Client``.

    Args:
        client: Optional ``httpx.Client`` used to send the requests.
            If ``None``, a new client is created with ``timeout`` and
            closed by ``close``. A client passed by the caller is never
            closed by the executor.
        timeout: Maximum seconds to wait for the server response. Only
            used if ``client`` is ``None``.

    Example:
        ```pycon
        >>> import httpx
        >>> from avoca.context import Context
        >>> from avoca.executor import HttpxExecutor
        >>> from avoca.request import new_request
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(204))
        >>> with HttpxExecutor(client=httpx.Client(transport=transport)) as executor:
        ...     response = executor.send(new_request(Context(), "GET", "https://example.com"))
        ...
        >>> response.status_code
        204

        ```
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(owns_client={self._owns_client})"

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
    def client(self) -> httpx.Client:
        r"""The underlying ``httpx.Client``."""
        return self._client

    def send(self, request: Request) -> httpx.Response:
        body = request.body
        content = body.read() if hasattr(body, "read") else body
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        remaining = request.context.remaining()
        if remaining is not None:
            timeout = cap_timeout(self._client.timeout, remaining)
        http_request = self._client.build_request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=content,
            timeout=timeout,
        )
        logger.debug(f"Sending {request.method} request to {request.url}")
        return self._client.send(http_request)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


def cap_timeout(timeout: httpx.Timeout, limit: float) -> httpx.Timeout:
    r"""Cap every phase of a timeout to a limit.

    Args:
        timeout: The timeout to cap. Phases without timeout are set to
            ``limit``.
        limit: The maximum number of seconds of each phase.

    Returns:
        The capped timeout.

    Example:
        ```pycon
        >>> import httpx
        >>> from avoca.executor import cap_timeout
        >>> cap_timeout(httpx.Timeout(60.0, connect=1.0), 5.0)
        Timeout(connect=1.0, read=5.0, write=5.0, pool=5.0)

        ```
    """
    return httpx.Timeout(
        connect=_cap(timeout.connect, limit),
        read=_cap(timeout.read, limit),
        write=_cap(timeout.write, limit),
        pool=_cap(timeout.pool, limit),
    )


def _cap(value: float | None, limit: float) -> float:
    return limit if value is None else min(value, limit)
