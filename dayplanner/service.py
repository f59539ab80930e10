import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Optional, Protocol, Union

from pydantic import ValidationError

from .errors import InvalidFormatError, NoTasksError
from .llm.client import ScheduleModel
from .llm.prompts import build_prompt
from .llm.schemas import ScheduledTask, Task, TaskList
from .llm.validator import parse_schedule_response
from .logging import redact_text
from .rate_limit import RateLimiter
from .retry import RetryPolicy, retry_with_backoff
from .settings import Settings

logger = logging.getLogger(__name__)


class TextModel(Protocol):
    async def generate(self, prompt: str) -> str: ...


class SchedulingService:
    def __init__(
        self,
        model: TextModel,
        rate_limiter: Optional[RateLimiter] = None,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.model = model
        self.rate_limiter = rate_limiter or RateLimiter(3, 60.0)
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "SchedulingService":
        return cls(
            model=ScheduleModel.from_settings(settings),
            rate_limiter=RateLimiter(settings.rate_limit_calls, settings.rate_limit_window_seconds),
            retry_policy=RetryPolicy(settings.max_retries, settings.retry_base_delay_seconds),
        )

    async def plan_tasks(self, tasks: Iterable[Union[Task, dict]]) -> List[ScheduledTask]:
        try:
            validated = TaskList.validate_python(list(tasks))
        except ValidationError as e:
            err = e.errors()[0]
            # Caller bug, not a model hiccup: retrying cannot help.
            raise InvalidFormatError(
                f"Invalid task entry: {err.get('msg')}", value=err.get("input"), is_retryable=False
            ) from e
        if not validated:
            raise NoTasksError()

        descriptions = [t.description for t in validated]
        prompt = build_prompt(descriptions)
        logger.info(f"Planning {len(descriptions)} task(s)")
        logger.debug(f"Prompt: {redact_text(prompt)}")

        async def attempt() -> List[ScheduledTask]:
            await self.rate_limiter.wait_for_slot()
            response = await self.model.generate(prompt)
            return parse_schedule_response(response)

        schedule = await retry_with_backoff(attempt, self.retry_policy, sleep=self._sleep)
        logger.info(f"Planned schedule with {len(schedule)} item(s)")
        return schedule
