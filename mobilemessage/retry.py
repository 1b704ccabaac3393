"""Bounded exponential backoff around a single API call.

Only `RateLimitError` and `ServerError` are retried. Every other error,
including `NetworkError`, propagates on first occurrence. The backoff sleep
blocks the calling thread.
"""

from __future__ import annotations

import logging
import random as _random
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Tuple, Type, TypeVar

from mobilemessage.errors import RateLimitError, ServerError

if TYPE_CHECKING:
    from mobilemessage.config import Configuration

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_ERRORS: Tuple[Type[Exception], ...] = (RateLimitError, ServerError)

DEFAULT_BASE_DELAY = 2.0
DEFAULT_JITTER_FACTOR = 0.3
DEFAULT_MAX_DELAY = 60.0


@dataclass(frozen=True)
class RetryPolicy:
    """Retry ceiling and backoff shape."""

    max_attempts: int = 3
    base_delay: float = DEFAULT_BASE_DELAY
    jitter_factor: float = DEFAULT_JITTER_FACTOR
    max_delay: float = DEFAULT_MAX_DELAY

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @classmethod
    def from_config(cls, config: "Configuration") -> "RetryPolicy":
        return cls(
            max_attempts=config.max_attempts,
            base_delay=config.retry_delay,
            jitter_factor=config.retry_jitter,
            max_delay=config.max_retry_delay,
        )

    def delay_for(self, attempt: int, jitter: float) -> float:
        """Delay after failed `attempt` (1-based), with `jitter` in [0, jitter_factor)."""
        delay = self.base_delay * (2 ** (attempt - 1)) * (1 + jitter)
        return min(delay, self.max_delay)


class RetryExecutor:
    """Run a zero-argument callable under a `RetryPolicy`.

    `sleep` and `random` are injectable so callers (and tests) can observe
    or skip the wait.

    Example:
        >>> executor = RetryExecutor(RetryPolicy(max_attempts=3))
        >>> executor.run(lambda: transport.get("account"))
    """

    def __init__(
        self,
        policy: RetryPolicy,
        *,
        sleep: Callable[[float], None] = time.sleep,
        random: Callable[[], float] = _random.random,
    ) -> None:
        self.policy = policy
        self._sleep = sleep
        self._random = random

    def run(self, operation: Callable[[], T]) -> T:
        attempt = 0
        while True:
            attempt += 1
            try:
                return operation()
            except RETRYABLE_ERRORS as exc:
                if attempt >= self.policy.max_attempts:
                    if self.policy.max_attempts > 1:
                        logger.warning(
                            "retries exhausted",
                            extra={"attempts": attempt, "error": type(exc).__name__},
                        )
                    raise
                delay = self.policy.delay_for(attempt, self._random() * self.policy.jitter_factor)
                logger.warning(
                    "retrying after %s",
                    type(exc).__name__,
                    extra={
                        "attempt": attempt,
                        "max_attempts": self.policy.max_attempts,
                        "delay_seconds": round(delay, 3),
                    },
                )
                self._sleep(delay)
