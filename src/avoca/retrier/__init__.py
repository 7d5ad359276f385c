r"""Retry strategies deciding how many times a request attempt runs.

This package provides the retrier contract and the implementations
shipped with avoca. A retrier controls the number of attempts and the
waiting between them; it never decides whether a response is
retryable.
"""

from __future__ import annotations

__all__ = ["BaseRetrier", "MaxAttemptsRetrier", "NoRetry"]

from avoca.retrier.base import BaseRetrier
from avoca.retrier.max_attempts import MaxAttemptsRetrier
from avoca.retrier.no_retry import NoRetry
