"""
errors.py - Domain errors
Single responsibility: validation failures raised by the task list.
"""
from todo_app.config import MSG_DUPLICATE_TASK, MSG_EMPTY_TASK


class TaskValidationError(ValueError):
    """Recoverable input error; the list is left untouched."""


class EmptyTaskError(TaskValidationError):
    def __init__(self, message: str = MSG_EMPTY_TASK):
        super().__init__(message)


class DuplicateTaskError(TaskValidationError):
    def __init__(self, task: str, message: str = MSG_DUPLICATE_TASK):
        super().__init__(message)
        self.task = task
