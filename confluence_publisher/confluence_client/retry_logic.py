"""Transport-level retry for Confluence rate limiting.

Only HTTP 429 responses are retried, with exponential backoff (1s, 2s, 4s).
Everything else propagates on the first failure. The publisher itself never
retries; this policy lives entirely inside the REST store.
"""

import logging
import time
from typing import Callable, TypeVar

from .errors import APIAccessError

logger = logging.getLogger(__name__)

T = TypeVar('T')

MAX_RETRIES = 3

_RATE_LIMIT_PATTERNS = (
    '429',
    'too many requests',
    'rate limit exceeded',
    'rate limited',
)


def retry_on_rate_limit(func: Callable[[], T], operation: str = "request") -> T:
    """Run func, retrying while Confluence answers with a rate limit.

    Args:
        func: Zero-argument callable performing one remote request
        operation: Operation description used in logs and the final error

    Returns:
        Whatever func returns

    Raises:
        APIAccessError: If the rate limit persists after MAX_RETRIES retries
        Other exceptions: Re-raised immediately

    Example:
        >>> page = retry_on_rate_limit(lambda: client.get_page_by_id("123"), "get_page_snapshot(123)")
    """
    attempt = 0
    while True:
        try:
            return func()
        except Exception as e:
            if not is_rate_limit_error(e):
                raise

            if attempt >= MAX_RETRIES:
                logger.error(
                    f"Rate limit persisted for {operation} after {MAX_RETRIES} retries"
                )
                raise APIAccessError(
                    f"Confluence API failure during {operation} (after {MAX_RETRIES} retries)",
                    operation=operation,
                ) from e

            wait_time = 2 ** attempt
            attempt += 1
            logger.info(
                f"Rate limited during {operation}, retrying in {wait_time}s "
                f"(retry {attempt}/{MAX_RETRIES})"
            )
            time.sleep(wait_time)


def is_rate_limit_error(exception: Exception) -> bool:
    """Check whether an exception represents an HTTP 429 response.

    Looks at the status_code attribute, the requests-style
    response.status_code, and finally the message text.
    """
    status_code = getattr(exception, 'status_code', None)
    if status_code is None:
        response = getattr(exception, 'response', None)
        status_code = getattr(response, 'status_code', None)
    if status_code is not None:
        return status_code == 429

    error_msg = str(exception).lower()
    return any(pattern in error_msg for pattern in _RATE_LIMIT_PATTERNS)
