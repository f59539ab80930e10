# Test configuration and fixtures
import json
import os
from typing import List
from unittest.mock import AsyncMock, Mock

import pytest

os.environ["TELEGRAM_BOT_TOKEN"] = "123456:test-token"
os.environ["OPENAI_API_KEY"] = "sk-test"
os.environ["OPENAI_MODEL"] = "test-model"


class FakeClock:
    """Monotonic clock whose sleep advances time instead of waiting."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def recording_sleep():
    """AsyncMock standing in for asyncio.sleep; inspect await_args_list for delays."""
    return AsyncMock(return_value=None)


def schedule_json(*items) -> str:
    return json.dumps({"schedule": [dict(task=t, time=tm, reason=r) for t, tm, r in items]})


@pytest.fixture
def valid_response():
    return schedule_json(
        ("Write report", "14:30", "Afternoon focus block"),
        ("Morning run", "06:00", "Energy is highest early"),
        ("Email triage", "09:15", "Clear the inbox before meetings"),
    )


@pytest.fixture
def mock_model(valid_response):
    """Mock chat model wrapper for testing."""
    model = Mock()
    model.generate = AsyncMock(return_value=valid_response)
    return model
