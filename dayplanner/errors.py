from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    NO_TASKS = "NO_TASKS"
    NO_RESPONSE = "NO_RESPONSE"
    INVALID_FORMAT = "INVALID_FORMAT"
    PARSE_ERROR = "PARSE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PlannerError(Exception):
    """Classified planning failure.

    `is_retryable` drives the backoff loop: anything not explicitly marked
    otherwise is worth another attempt.
    """

    def __init__(self, message: str, code: ErrorKind = ErrorKind.UNKNOWN_ERROR, is_retryable: bool = True):
        super().__init__(message)
        self.message = message
        self.code = code
        self.is_retryable = is_retryable


class NoTasksError(PlannerError):
    def __init__(self, message: str = "No tasks provided for planning"):
        super().__init__(message, ErrorKind.NO_TASKS, is_retryable=False)


class NoResponseError(PlannerError):
    def __init__(self, message: str = "No response received from the model"):
        super().__init__(message, ErrorKind.NO_RESPONSE)


class InvalidFormatError(PlannerError):
    def __init__(self, message: str, value: Any = None, is_retryable: bool = True):
        super().__init__(message, ErrorKind.INVALID_FORMAT, is_retryable)
        self.value = value


class ParseError(PlannerError):
    def __init__(self, message: str = "Failed to parse the model response", response: Optional[str] = None):
        super().__init__(message, ErrorKind.PARSE_ERROR)
        self.response = response


class UnknownError(PlannerError):
    def __init__(self, message: str = "An unexpected error occurred while planning tasks"):
        super().__init__(message, ErrorKind.UNKNOWN_ERROR)


INPUT_TOO_LONG = "INPUT_TOO_LONG"
OUTPUT_TOO_LONG = "OUTPUT_TOO_LONG"
TASK_EMPTY = "Task description cannot be empty"
TASK_NOT_FOUND = "No task with that number"
MAX_RETRIES_REACHED = "Maximum retry attempts reached. Please try again later."
UNEXPECTED_ERROR = "An unexpected error occurred while planning your tasks"
