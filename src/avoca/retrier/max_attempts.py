r"""Retrier with a fixed maximum number of attempts."""

from __future__ import annotations

__all__ = ["MaxAttemptsRetrier"]

import logging
from typing import TYPE_CHECKING

from avoca.outcome import TransportFailure
from avoca.retrier.base import BaseRetrier

if TYPE_CHECKING:
    from collections.abc import Callable

    from avoca.context import Context
    from avoca.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class MaxAttemptsRetrier(BaseRetrier):
    """Retrier that runs up to ``max_attempts`` attempts back to back.

    There is no delay between attempts. The context is checked before
    every retry and the retrier stops as soon as it is cancelled.

    Args:
        max_attempts: The maximum number of attempts, including the
            first one. Must be >= 1.

    Raises:
        ValueError: If ``max_attempts`` is lower than 1.

    Example:
        ```pycon
        >>> import httpx
        >>> from avoca.context import Context
        >>> from avoca.outcome import FinalResponse, RetryableStatus
        >>> from avoca.retrier import MaxAttemptsRetrier
        >>> statuses = iter([500, 500, 200])
        >>> def attempt(ctx):
        ...     status = next(statuses)
        ...     response = httpx.Response(status)
        ...     return RetryableStatus(response) if status >= 500 else FinalResponse(response)
        ...
        >>> outcome = MaxAttemptsRetrier(max_attempts=4).do(Context(), attempt)
        >>> outcome.response.status_code
        200

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxAttemptsRetrier):
            return False
        return self.max_attempts == other.max_attempts

    def __hash__(self) -> int:
        return hash((self.__class__, self.max_attempts))

    def do(self, context: Context, fn: Callable[[Context], Outcome]) -> Outcome:
        outcome = fn(context)
        for attempt in range(1, self.max_attempts):
            if not outcome.should_retry:
                return outcome
            error = context.error()
            if error is not None:
                logger.debug(f"Stopping after {attempt} attempt(s): {error}")
                return TransportFailure(error)
            logger.debug(f"Starting attempt {attempt + 1}/{self.max_attempts}")
            outcome = fn(context)
        return outcome
