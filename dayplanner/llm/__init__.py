from .prompts import build_prompt
from .schemas import ScheduledTask, ScheduleItem, Task, to_12_hour
from .validator import parse_schedule_response

__all__ = [
    "build_prompt",
    "parse_schedule_response",
    "ScheduledTask",
    "ScheduleItem",
    "Task",
    "to_12_hour",
]
