"""Bounded fixed-delay retry for transient provider failures.

Usage::

    from src.services.retry import with_retry

    text = await with_retry(lambda: gateway.transcribe(audio), max_attempts=3, delay=1.0)
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from src.core.exceptions import ConnectivityError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Text markers for failures that arrive as plain exceptions (socket resets
# surfaced by lower layers) rather than as ConnectivityError.
TRANSIENT_MARKERS = ("ECONNRESET", "Connection error")


def is_transient(exc: BaseException) -> bool:
    """Return True if *exc* is worth retrying (connection reset / connection error)."""
    if isinstance(exc, ConnectivityError):
        return True
    message = str(exc)
    return any(marker in message for marker in TRANSIENT_MARKERS)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    delay: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Await *operation*, retrying transient failures with a constant delay.

    Args:
        operation: Zero-argument async callable; invoked once per attempt.
        max_attempts: Total attempts including the first one.
        delay: Seconds to wait between attempts (no backoff).
        sleep: Async sleep function, injectable for tests.

    Returns:
        Whatever *operation* returns on its first successful attempt.

    Raises:
        Exception: The original failure, unchanged, when it is not transient
            or when all attempts are exhausted.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Retrying operation after transient failure (%s). Attempts left: %d",
            exc,
            max_attempts - retry_state.attempt_number,
        )

    # tenacity only awaits coroutine functions; a lambda returning a coroutine
    # would otherwise be called synchronously and never awaited.
    async def _attempt() -> T:
        return await operation()

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(delay),
        retry=retry_if_exception(is_transient),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True,
    )
    return await retrying(_attempt)
