from datetime import datetime
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from ..errors import MAX_RETRIES_REACHED, TASK_EMPTY, TASK_NOT_FOUND
from ..llm.schemas import ScheduledTask, Task


class PlannerSession(BaseModel):
    tasks: List[Task] = []
    schedule: List[ScheduledTask] = []
    last_error: Optional[str] = None
    retry_count: int = 0
    created_at: datetime


class SessionStore:
    """In-memory task lists per chat, plus the manual Retry budget.

    `retry_count` counts user-triggered re-plans only; the service's own
    backoff attempts are invisible here.
    """

    def __init__(self, max_manual_retries: int = 3) -> None:
        self.max_manual_retries = max_manual_retries
        self._sessions: Dict[int, PlannerSession] = {}

    def start(self, chat_id: int, now: datetime) -> PlannerSession:
        s = PlannerSession(created_at=now)
        self._sessions[chat_id] = s
        return s

    def get(self, chat_id: int) -> Optional[PlannerSession]:
        return self._sessions.get(chat_id)

    def get_or_start(self, chat_id: int, now: datetime) -> PlannerSession:
        s = self._sessions.get(chat_id)
        if s is None:
            s = self.start(chat_id, now)
        return s

    def add_tasks(self, chat_id: int, descriptions: Iterable[str], now: datetime) -> List[Task]:
        s = self.get_or_start(chat_id, now)
        added = [Task(description=d) for d in descriptions if d.strip()]
        s.tasks.extend(added)
        s.last_error = None
        return added

    def edit_task(self, chat_id: int, index: int, text: str) -> Optional[str]:
        s = self._sessions.get(chat_id)
        if s is None or not 0 <= index < len(s.tasks):
            return TASK_NOT_FOUND
        if not text.strip():
            s.last_error = TASK_EMPTY
            return TASK_EMPTY
        s.tasks[index] = Task(description=text)
        s.last_error = None
        return None

    def remove_task(self, chat_id: int, index: int) -> Optional[str]:
        s = self._sessions.get(chat_id)
        if s is None or not 0 <= index < len(s.tasks):
            return TASK_NOT_FOUND
        del s.tasks[index]
        s.schedule = []
        s.last_error = None
        return None

    def move_task(self, chat_id: int, source: int, destination: int) -> Optional[str]:
        s = self._sessions.get(chat_id)
        if s is None:
            return TASK_NOT_FOUND
        n = len(s.tasks)
        if not (0 <= source < n and 0 <= destination < n):
            return TASK_NOT_FOUND
        item = s.tasks.pop(source)
        s.tasks.insert(destination, item)
        s.schedule = []
        return None

    def record_schedule(self, chat_id: int, schedule: List[ScheduledTask]) -> None:
        s = self._sessions.get(chat_id)
        if s is not None:
            s.schedule = schedule
            s.last_error = None
            s.retry_count = 0

    def record_failure(self, chat_id: int, message: str) -> None:
        s = self._sessions.get(chat_id)
        if s is not None:
            s.last_error = message

    def can_retry(self, chat_id: int) -> bool:
        s = self._sessions.get(chat_id)
        return s is not None and s.retry_count < self.max_manual_retries

    def register_retry(self, chat_id: int) -> bool:
        s = self._sessions.get(chat_id)
        if s is None:
            return False
        if s.retry_count < self.max_manual_retries:
            s.retry_count += 1
            return True
        s.last_error = MAX_RETRIES_REACHED
        return False

    def purge(self, chat_id: int) -> None:
        if chat_id in self._sessions:
            del self._sessions[chat_id]
