r"""Contain the result types of a single request attempt.

An attempt ends in exactly one of three ways: the transport failed, the
server answered with a status code the retry policy wants to retry, or
the server answered with a final response. Retriers only look at
``should_retry``; the client converts the last outcome into a returned
response or a raised error.
"""

from __future__ import annotations

__all__ = ["FinalResponse", "Outcome", "RetryableStatus", "TransportFailure"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class FinalResponse:
    r"""The attempt returned a response that must not be retried.

    Attributes:
        response: The response returned by the executor.
    """

    response: httpx.Response

    @property
    def should_retry(self) -> bool:
        return False


@dataclass(frozen=True)
class RetryableStatus:
    r"""The attempt returned a response whose status code is retryable.

    The response is kept because it is returned to the caller when no
    attempt is left.

    Attributes:
        response: The response returned by the executor.
    """

    response: httpx.Response

    @property
    def should_retry(self) -> bool:
        return True


@dataclass(frozen=True)
class TransportFailure:
    r"""The executor failed to perform the attempt.

    Attributes:
        error: The error raised by the executor.
    """

    error: Exception

    @property
    def should_retry(self) -> bool:
        return True


Outcome = Union[FinalResponse, RetryableStatus, TransportFailure]
