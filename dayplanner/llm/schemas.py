import re
from typing import List

from pydantic import BaseModel, TypeAdapter, field_validator


TIME_24H = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]")


class Task(BaseModel):
    description: str


class ScheduledTask(BaseModel):
    task: str
    time: str
    reason: str


def to_12_hour(time24: str) -> str:
    hh, mm = time24.split(":")
    hours, minutes = int(hh), int(mm)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


class ScheduleItem(BaseModel):
    task: str
    time: str
    reason: str

    @field_validator("task", "time", "reason", mode="before")
    def validate_present(cls, v):
        if not v or not isinstance(v, str):
            raise ValueError("missing required field")
        return v

    @field_validator("time")
    def validate_time(cls, v):
        if not TIME_24H.fullmatch(v):
            raise ValueError(f"Invalid time format: {v}")
        return v

    @property
    def minutes(self) -> int:
        hh, mm = self.time.split(":")
        return int(hh) * 60 + int(mm)

    def to_scheduled(self) -> ScheduledTask:
        return ScheduledTask(task=self.task, time=to_12_hour(self.time), reason=self.reason)


TaskList = TypeAdapter(List[Task])
