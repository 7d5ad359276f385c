r"""Contain the request type sent through the retry client."""

from __future__ import annotations

__all__ = ["Request", "new_request"]

import re
from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING

import httpx

from avoca.context import Context
from avoca.exceptions import RequestCreationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from avoca.body import Body

# RFC 9110 token characters
_METHOD_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


@dataclass
class Request:
    r"""Describe one logical HTTP request.

    The request may be modified until it is passed to the client. While
    it is executed, the client replaces ``body`` before every attempt.

    Attributes:
        method: The HTTP method, in upper case.
        url: The target URL.
        headers: The request headers.
        body: The request body, or ``None``.
        context: The context carrying cancellation and deadline.
    """

    method: str
    url: httpx.URL
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Body | IO[bytes] | None = None
    context: Context = field(default_factory=Context.background)


def new_request(
    context: Context | None,
    method: str,
    url: str | httpx.URL,
    body: Body | None = None,
    headers: Mapping[str, str] | httpx.Headers | None = None,
) -> Request:
    r"""Build a request after validating its inputs.

    Args:
        context: The context of the request. Must not be ``None`` nor
            cancelled.
        method: The HTTP method (e.g. ``"GET"``).
        url: The target URL.
        body: Optional request body.
        headers: Optional request headers.

    Returns:
        The new request.

    Raises:
        RequestCreationError: If the context is missing or cancelled,
            the method is not a valid token, the URL is malformed or
            the headers are invalid.

    Example:
        ```pycon
        >>> from avoca.context import Context
        >>> from avoca.request import new_request
        >>> request = new_request(Context(), "get", "https://example.com/data")
        >>> request.method
        'GET'
        >>> request.url
        URL('https://example.com/data')

        ```
    """
    if context is None:
        raise RequestCreationError(ValueError("context must not be None"))
    error = context.error()
    if error is not None:
        raise RequestCreationError(error)
    if not isinstance(method, str) or not _METHOD_PATTERN.fullmatch(method):
        raise RequestCreationError(ValueError(f"invalid method {method!r}"))
    try:
        parsed_url = httpx.URL(url)
        parsed_headers = httpx.Headers(headers)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestCreationError(exc) from exc
    return Request(
        method=method.upper(),
        url=parsed_url,
        headers=parsed_headers,
        body=body,
        context=context,
    )
