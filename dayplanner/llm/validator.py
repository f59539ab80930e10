"""Turns raw model output into a sorted, display-ready schedule.

Validation is all-or-nothing: the first bad entry rejects the whole reply so
the orchestrator can ask again instead of showing a partial day.
"""

import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from ..errors import InvalidFormatError, NoResponseError, ParseError, PlannerError
from ..logging import redact_text
from .schemas import ScheduleItem, ScheduledTask

logger = logging.getLogger(__name__)


def clean_markdown_json(response: str) -> str:
    return response.replace("```json", "").replace("```", "").strip()


def _validate_item(raw_item) -> ScheduleItem:
    try:
        return ScheduleItem.model_validate(raw_item)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "item"
        value = err.get("input")
        if field == "time" and isinstance(value, str) and value:
            raise InvalidFormatError(f"Invalid time format: {value}", value=value) from e
        raise InvalidFormatError(
            f"Invalid schedule item: missing required field '{field}' (got {value!r})",
            value=value,
        ) from e


def parse_schedule_response(response: Optional[str]) -> List[ScheduledTask]:
    if not response:
        raise NoResponseError()

    try:
        data = json.loads(clean_markdown_json(response))

        if not isinstance(data, dict) or not isinstance(data.get("schedule"), list):
            raise InvalidFormatError("Invalid response format: missing schedule array")

        items = [_validate_item(item) for item in data["schedule"]]
        items.sort(key=lambda item: item.minutes)
        return [item.to_scheduled() for item in items]
    except PlannerError:
        raise
    except Exception as e:
        logger.error(f"Raw response: {redact_text(response)}")
        raise ParseError(response=response[:500]) from e
