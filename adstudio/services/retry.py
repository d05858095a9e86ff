"""Bounded retry around a single provider call."""

import logging
from typing import Awaitable, Callable, TypeVar

from ..config import MAX_RETRIES
from ..errors import InvalidRequestError, handle_provider_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_retries(
    operation: Callable[[], Awaitable[T]],
    context: str,
    max_retries: int = MAX_RETRIES,
) -> T:
    """Await ``operation`` up to ``max_retries`` times, sequentially.

    Every provider failure is retried immediately, without backoff, including
    quota and policy failures. After the last attempt the failure is classified
    and raised as a GenerationError. InvalidRequestError is raised at once.

    Args:
        operation: Zero-argument coroutine function performing one provider call.
        context: Operation description for logging.
        max_retries: Total attempts (default MAX_RETRIES).

    Returns:
        The result of the first successful attempt.
    """
    if max_retries < 1:
        raise InvalidRequestError(f"max_retries must be at least 1, got {max_retries}")

    for attempt in range(max_retries):
        try:
            return await operation()
        except InvalidRequestError:
            raise
        except Exception as e:
            logger.error("Attempt %d/%d failed for %s: %s", attempt + 1, max_retries, context, e)
            if attempt == max_retries - 1:
                handle_provider_error(e, context)

    # handle_provider_error always raises
    raise RuntimeError(f"Operation failed for {context} after {max_retries} attempts.")
