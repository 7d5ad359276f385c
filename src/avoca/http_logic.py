r"""Shared logic of the module-level HTTP method functions."""

from __future__ import annotations

__all__ = ["execute_http_method"]

from typing import TYPE_CHECKING

from avoca.client import Client

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from avoca.body import Body
    from avoca.config import ClientConfig
    from avoca.context import Context
    from avoca.executor import BaseExecutor


def execute_http_method(
    context: Context | None,
    url: str | httpx.URL,
    method: str,
    *,
    body: Body | None = None,
    headers: Mapping[str, str] | httpx.Headers | None = None,
    client: Client | None = None,
    config: ClientConfig | None = None,
    executor: BaseExecutor | None = None,
) -> httpx.Response:
    """Send a request with a given client or with a temporary one.

    Args:
        context: The context of the request.
        url: The URL to send the request to.
        method: The HTTP method (GET, POST, PUT, PATCH, DELETE).
        body: Optional request body.
        headers: Optional request headers.
        client: An optional ``Client`` used to send the request. If
            ``None``, a new client is created from ``config`` and
            ``executor``, then closed after use.
        config: Optional ``ClientConfig`` of the temporary client.
            Ignored if ``client`` is provided.
        executor: Optional executor of the temporary client. Ignored
            if ``client`` is provided.

    Returns:
        The response of the last attempt.

    Raises:
        ValueError: If ``client`` is combined with ``config`` or
            ``executor``.
    """
    if client is not None and (config is not None or executor is not None):
        msg = "config and executor cannot be used together with client"
        raise ValueError(msg)

    owns_client = client is None
    client = client or Client(config=config, executor=executor)
    try:
        return client.request(context, method, url, body=body, headers=headers)
    finally:
        if owns_client:
            client.close()
