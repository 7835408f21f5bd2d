"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Retry policy for the execution pipeline.

Decides which outcomes are retried and how long to back off between
attempts. The loop itself lives in the pipeline so it can observe the
caller's context at every step.
"""

from dataclasses import dataclass
from typing import Optional

from urllib3.exceptions import InvalidHeader
from urllib3.util.retry import Retry

from vmwaas.exceptions import InvalidConfigurationError

DEFAULT_MAX_RETRIES = 4
DEFAULT_MAX_INTERVAL = 30.0
BASE_DELAY = 1.0

# 501 Not Implemented will not change on retry
_NON_RETRYABLE_SERVER_STATUSES = frozenset({501})

_retry_after_parser = Retry(total=0)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Exponential backoff retry policy.

    Attributes:
        max_retries: Retries after the first attempt
        max_interval: Upper bound on any single backoff, in seconds
        base_delay: Backoff before the first retry, doubled per attempt
    """
    max_retries: int = DEFAULT_MAX_RETRIES
    max_interval: float = DEFAULT_MAX_INTERVAL
    base_delay: float = BASE_DELAY

    @classmethod
    def create(cls, max_retries: int = 0, max_retry_interval: float = 0) -> "RetryPolicy":
        """
        Build a policy from caller settings; zero selects the default.

        Raises:
            InvalidConfigurationError: If either value is negative
        """
        if max_retries < 0 or max_retry_interval < 0:
            raise InvalidConfigurationError(
                f"retry settings must not be negative: max_retries={max_retries}, "
                f"max_retry_interval={max_retry_interval}"
            )
        return cls(
            max_retries=max_retries or DEFAULT_MAX_RETRIES,
            max_interval=float(max_retry_interval or DEFAULT_MAX_INTERVAL),
        )

    def is_retryable_status(self, status_code: int) -> bool:
        """429 and 5xx (except 501) are transient."""
        if status_code == 429:
            return True
        return 500 <= status_code < 600 and status_code not in _NON_RETRYABLE_SERVER_STATUSES

    def backoff(self, attempt: int, retry_after: Optional[str] = None) -> float:
        """
        Delay before the retry following ``attempt`` (0-based).

        A Retry-After header, in seconds or as an HTTP date, replaces the
        computed delay. Both are capped at ``max_interval``.
        """
        delay = self.base_delay * (2 ** attempt)
        if retry_after:
            try:
                delay = _retry_after_parser.parse_retry_after(retry_after)
            except InvalidHeader:
                pass
        return max(0.0, min(self.max_interval, delay))
