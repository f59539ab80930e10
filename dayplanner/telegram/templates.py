from typing import List

from ..llm.schemas import ScheduledTask, Task


HELP_TEXT = (
    "I turn your task list into a daily schedule.\n\n"
    "Send tasks as text, one per line, for example:\n"
    "- Go for a 20 minute run\n"
    "- Reply to client emails\n"
    "- Grocery shopping\n\n"
    "Commands:\n"
    "/tasks - show your task list\n"
    "/edit N text - replace task N\n"
    "/remove N - delete task N\n"
    "/move FROM TO - reorder tasks\n"
    "/plan - build the schedule\n"
    "/clear - start over"
)


def build_task_list(tasks: List[Task]) -> str:
    if not tasks:
        return "No tasks yet. Add some tasks to get started!"
    lines = ["📝 Your Tasks:", ""]
    for i, t in enumerate(tasks, start=1):
        lines.append(f"{i}. {t.description}")
    lines.append("")
    lines.append("Send /plan when you're ready.")
    return "\n".join(lines)


def build_schedule(schedule: List[ScheduledTask]) -> str:
    if not schedule:
        return "The planner returned an empty schedule."
    lines = ["📅 Your Schedule:", ""]
    for item in schedule:
        lines.append(f"{item.time} - {item.task}")
        lines.append(f"   {item.reason}")
    return "\n".join(lines)


def build_error(message: str, can_retry: bool) -> str:
    text = f"❌ Error: {message}"
    if can_retry:
        text += "\n\nTap Retry to try again."
    return text
