r"""Configuration dataclass and defaults for the retry client.

This module provides a dataclass-based configuration object for the
``Client`` class and the module-level request functions. Every field has
a default, so ``ClientConfig()`` describes a client that sends each
request exactly once.
"""

from __future__ import annotations

__all__ = ["DEFAULT_TIMEOUT", "ClientConfig"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from avoca.executor import DEFAULT_TIMEOUT
from avoca.policy import never_retry
from avoca.retrier import BaseRetrier, NoRetry

if TYPE_CHECKING:
    import httpx

    from avoca.policy import RetryPolicy


@dataclass
class ClientConfig:
    """Configuration for the retry behavior of a ``Client``.

    Note:
        The executor is NOT included in this config because it owns
        resources (connections) whose lifecycle is managed by the
        client. ``timeout`` is only used to create the default executor.

    Args:
        retrier: The retry strategy. It controls the number of attempts
            and the delay between them. Defaults to ``NoRetry()``.
        retry_policy: Function receiving a status code and returning
            ``True`` if the request should be retried. Defaults to
            ``never_retry``.
        timeout: Maximum seconds to wait for the server response when
            the default executor is used. Must be > 0.

    Example:
        ```pycon
        >>> from avoca.config import ClientConfig
        >>> from avoca.retrier import MaxAttemptsRetrier
        >>> config = ClientConfig()  # Use defaults
        >>> config.retrier
        NoRetry()
        >>> config.timeout
        60.0
        >>> merged = config.merge(retrier=MaxAttemptsRetrier(max_attempts=3))
        >>> merged.retrier
        MaxAttemptsRetrier(max_attempts=3)
        >>> config.retrier  # Original unchanged
        NoRetry()

        ```
    """

    retrier: BaseRetrier = field(default_factory=NoRetry)
    retry_policy: RetryPolicy = never_retry
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If the retrier or the retry policy have the
                wrong type.
            ValueError: If the timeout is not positive.
        """
        if not isinstance(self.retrier, BaseRetrier):
            msg = f"retrier must be a BaseRetrier, got {type(self.retrier).__qualname__}"
            raise TypeError(msg)
        if not callable(self.retry_policy):
            msg = f"retry_policy must be callable, got {type(self.retry_policy).__qualname__}"
            raise TypeError(msg)
        if isinstance(self.timeout, (int, float)) and self.timeout <= 0:
            msg = f"timeout must be > 0, got {self.timeout}"
            raise ValueError(msg)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from avoca.config import ClientConfig
            >>> config = ClientConfig(timeout=10.0)
            >>> config.merge(timeout=None).timeout
            10.0
            >>> config.merge(timeout=5.0).timeout
            5.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
