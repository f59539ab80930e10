from typing import Sequence

from ..errors import NoTasksError


PLANNER_INSTRUCTIONS = (
    "You are a task planning assistant. Create an optimal daily schedule based on the following tasks.\n"
    "Consider factors like energy levels, task complexity, and natural breaks."
)

SCHEDULE_FORMAT = (
    "Please provide a schedule in the following exact JSON format:\n"
    "{\n"
    '  "schedule": [\n'
    "    {\n"
    '      "task": "exact task description",\n'
    '      "time": "HH:MM in 24-hour format",\n'
    '      "reason": "brief explanation of scheduling"\n'
    "    }\n"
    "  ]\n"
    "}"
)

SCHEDULE_RULES = (
    "Important:\n"
    '- Use exact 24-hour time format (e.g., "09:00", "14:30")\n'
    "- Keep task descriptions exactly as provided\n"
    "- Provide clear, concise reasons for scheduling\n"
    "- Ensure all times are within a typical day (06:00 to 22:00)\n"
    "- Return ONLY the JSON, no additional text"
)


def build_prompt(descriptions: Sequence[str]) -> str:
    if not descriptions:
        raise NoTasksError()
    task_list = "\n".join(descriptions)
    return f"{PLANNER_INSTRUCTIONS}\n\nTasks:\n{task_list}\n\n{SCHEDULE_FORMAT}\n\n{SCHEDULE_RULES}"
