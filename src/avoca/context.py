r"""Implement a cancellation context for requests.

A ``Context`` is attached to every request. It can be cancelled
explicitly or expire after a timeout. Request construction refuses a
cancelled context, and retriers check it between attempts.
"""

from __future__ import annotations

__all__ = ["Context"]

import threading
import time
from typing import TYPE_CHECKING

from avoca.exceptions import ContextCancelledError, DeadlineExceededError

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self


class Context:
    r"""Carry the cancellation state and deadline of a request.

    Args:
        timeout: Optional number of seconds after which the context
            expires. Must be > 0 if provided.

    Raises:
        ValueError: If ``timeout`` is not positive.

    Example:
        ```pycon
        >>> from avoca.context import Context
        >>> ctx = Context()
        >>> ctx.cancelled
        False
        >>> ctx.cancel()
        >>> ctx.cancelled
        True
        >>> ctx.error()
        ContextCancelledError('context cancelled')

        ```
    """

    def __init__(self, timeout: float | None = None) -> None:
        if timeout is not None and timeout <= 0:
            msg = f"timeout must be > 0, got {timeout}"
            raise ValueError(msg)
        self._event = threading.Event()
        self._deadline: float | None = None if timeout is None else time.monotonic() + timeout

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.cancelled})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.cancel()

    @classmethod
    def background(cls) -> Context:
        r"""Return a new context that is never cancelled unless
        ``cancel`` is called.

        Returns:
            A context without deadline.
        """
        return cls()

    @property
    def deadline(self) -> float | None:
        r"""The ``time.monotonic`` value at which the context expires,
        or ``None`` if it has no deadline."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        r"""``True`` if the context was cancelled or its deadline has
        passed."""
        return self.error() is not None

    def cancel(self) -> None:
        r"""Cancel the context.

        Calling this method more than once has no additional effect.
        """
        self._event.set()

    def error(self) -> ContextCancelledError | None:
        r"""Return the reason why the context is done.

        Returns:
            ``ContextCancelledError`` if the context was cancelled,
            ``DeadlineExceededError`` if its deadline has passed,
            otherwise ``None``.
        """
        if self._event.is_set():
            return ContextCancelledError()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError()
        return None

    def remaining(self) -> float | None:
        r"""Return the number of seconds left before the deadline.

        Returns:
            The remaining time, ``0.0`` if the deadline has passed, or
            ``None`` if the context has no deadline.
        """
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())
