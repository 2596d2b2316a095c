"""
Exponential backoff for flaky calls.

with_backoff() runs an operation up to max_retries times, sleeping
base_delay * 2**attempt seconds between attempts (1s, 2s, 4s, ...).
When every attempt fails the caller gets a generic
ServiceUnavailableError; the last underlying error is only logged.
"""
import logging
import time
from typing import Callable, Optional, TypeVar

from infohub.config.settings import config, get_settings
from infohub.utils.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def backoff_delay(attempt: int, base_delay: Optional[float] = None) -> float:
    """Seconds to wait after the given 0-indexed failed attempt."""
    if base_delay is None:
        base_delay = config.BACKOFF_BASE_SECONDS
    return base_delay * (2 ** attempt)


def with_backoff(
    operation: Callable[[], T],
    max_retries: Optional[int] = None,
    base_delay: Optional[float] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """Call operation, retrying with exponential backoff on failure.

    Args:
        operation: Zero-argument callable to execute
        max_retries: Total attempts allowed (default API_RETRY_COUNT setting, 3)
        base_delay: Delay unit in seconds (default from config, 1.0)
        sleep: Delay function (default time.sleep)

    Returns:
        The first successful result of operation

    Raises:
        ServiceUnavailableError: If every attempt raised
        ValueError: If max_retries is less than 1
    """
    if max_retries is None:
        max_retries = get_settings().API_RETRY_COUNT
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")
    if sleep is None:
        sleep = time.sleep

    for attempt in range(max_retries):
        try:
            return operation()
        except Exception as e:
            if attempt == max_retries - 1:
                logger.error(f"Call failed after {max_retries} attempts: {e}")
                raise ServiceUnavailableError() from None

            delay = backoff_delay(attempt, base_delay)
            logger.warning(
                f"Attempt {attempt + 1}/{max_retries} failed: {e}. Retrying in {delay:.1f}s"
            )
            sleep(delay)
