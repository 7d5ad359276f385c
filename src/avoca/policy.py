r"""Contain the retry policies based on HTTP status codes.

A retry policy is a plain function that receives the status code of a
response and returns ``True`` if the request should be sent again.
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "RetryPolicy",
    "never_retry",
    "retry_on_server_errors",
    "retry_on_status",
]

from collections.abc import Callable

RetryPolicy = Callable[[int], bool]

# HTTP status codes commonly worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def never_retry(status_code: int) -> bool:  # noqa: ARG001
    r"""Return ``False`` for every status code.

    This is the default policy: only transport failures can trigger a
    new attempt.

    Args:
        status_code: The HTTP status code of the response.

    Returns:
        Always ``False``.

    Example:
        ```pycon
        >>> from avoca.policy import never_retry
        >>> never_retry(503)
        False

        ```
    """
    return False


def retry_on_server_errors(status_code: int) -> bool:
    r"""Return ``True`` for server errors (status code >= 500).

    Args:
        status_code: The HTTP status code of the response.

    Returns:
        ``True`` if the status code is a server error.

    Example:
        ```pycon
        >>> from avoca.policy import retry_on_server_errors
        >>> retry_on_server_errors(500)
        True
        >>> retry_on_server_errors(429)
        False

        ```
    """
    return status_code >= 500


def retry_on_status(*status_codes: int) -> RetryPolicy:
    r"""Create a policy that retries the given status codes.

    Args:
        *status_codes: The retryable status codes. If none is given,
            ``RETRY_STATUS_CODES`` is used.

    Returns:
        The retry policy.

    Example:
        ```pycon
        >>> from avoca.policy import retry_on_status
        >>> policy = retry_on_status()
        >>> policy(429), policy(404)
        (True, False)
        >>> policy = retry_on_status(409)
        >>> policy(409), policy(500)
        (True, False)

        ```
    """
    retryable = frozenset(status_codes or RETRY_STATUS_CODES)

    def policy(status_code: int) -> bool:
        return status_code in retryable

    return policy
