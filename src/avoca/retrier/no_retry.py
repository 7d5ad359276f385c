r"""Retrier that never retries."""

from __future__ import annotations

__all__ = ["NoRetry"]

from typing import TYPE_CHECKING

from avoca.retrier.base import BaseRetrier

if TYPE_CHECKING:
    from collections.abc import Callable

    from avoca.context import Context
    from avoca.outcome import Outcome


class NoRetry(BaseRetrier):
    """Retrier that invokes the attempt function exactly once.

    This is the default retrier of ``ClientConfig``.

    Example:
        ```pycon
        >>> import httpx
        >>> from avoca.context import Context
        >>> from avoca.outcome import RetryableStatus
        >>> from avoca.retrier import NoRetry
        >>> outcome = NoRetry().do(Context(), lambda ctx: RetryableStatus(httpx.Response(500)))
        >>> outcome.response.status_code
        500

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoRetry)

    def __hash__(self) -> int:
        return hash(self.__class__)

    def do(self, context: Context, fn: Callable[[Context], Outcome]) -> Outcome:
        return fn(context)
