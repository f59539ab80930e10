"""AI daily planner: turns a task list into a schedule via a hosted chat model."""

from .errors import PlannerError
from .llm.schemas import ScheduledTask, Task
from .service import SchedulingService

__all__ = ["PlannerError", "ScheduledTask", "SchedulingService", "Task"]
__version__ = "0.1.0"
