import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from .errors import PlannerError, UnknownError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    max_retries: int = 3
    base_delay: float = 1.0

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        return self.base_delay * (2 ** attempt)


def is_retryable(error: BaseException) -> bool:
    if isinstance(error, PlannerError):
        return error.is_retryable
    return True


async def retry_with_backoff(
    attempt_fn: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run `attempt_fn` until it succeeds, a non-retryable error surfaces or
    the attempts run out. Unclassified failures end up as `UnknownError`."""
    for attempt in range(policy.max_attempts):
        try:
            return await attempt_fn()
        except Exception as e:
            last_attempt = attempt == policy.max_retries
            if not is_retryable(e) or last_attempt:
                logger.error(f"Planning failed after {attempt + 1} attempt(s): {e}")
                if isinstance(e, PlannerError):
                    raise
                raise UnknownError() from e

            delay = policy.delay_for(attempt)
            logger.warning(f"Planning attempt {attempt + 1} failed: {e}; retrying in {delay:g}s")
            await sleep(delay)

    raise UnknownError("Failed to plan tasks after multiple attempts")
