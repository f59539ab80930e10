import logging

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from ..settings import Settings

logger = logging.getLogger(__name__)


class ScheduleModel:
    """Thin async wrapper around the hosted chat model: prompt in, text out."""

    def __init__(self, api_key: str, model: str, temperature: float = 0, timeout: float = 90):
        self.model_name = model
        self._model = ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            timeout=timeout,
            # One request per attempt; retry_with_backoff owns retries.
            max_retries=0,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScheduleModel":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.request_timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        result = await self._model.ainvoke([HumanMessage(content=prompt)])
        content = result.content
        if isinstance(content, list):
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        logger.debug(f"{self.model_name} returned {len(content)} chars")
        return content
