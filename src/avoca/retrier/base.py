r"""Abstract base class for retry strategies."""

from __future__ import annotations

__all__ = ["BaseRetrier"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from avoca.context import Context
    from avoca.outcome import Outcome


class BaseRetrier(ABC):
    """Abstract base class for retry strategies.

    A retrier invokes an attempt function one or more times according
    to its own attempt and timing policy. It must invoke the function
    at least once, and it must stop as soon as an outcome does not ask
    for a retry.

    Implementations are responsible for their own thread-safety.
    """

    @abstractmethod
    def do(self, context: Context, fn: Callable[[Context], Outcome]) -> Outcome:
        """Run ``fn`` until it succeeds or the strategy gives up.

        Args:
            context: The context of the request. Implementations should
                stop early when it is cancelled.
            fn: The attempt function. It receives the context and
                returns the outcome of the attempt.

        Returns:
            The outcome of the last invocation of ``fn``, or a
            ``TransportFailure`` describing why the strategy stopped.
        """
