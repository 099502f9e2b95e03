"""Task list module."""

from focus_timer.tasks.store import (
    Task,
    TaskNotFoundError,
    TaskSort,
    TaskStore,
    TaskValidationError,
    parse_minutes,
    sort_tasks,
)

__all__ = [
    "Task",
    "TaskStore",
    "TaskSort",
    "TaskNotFoundError",
    "TaskValidationError",
    "parse_minutes",
    "sort_tasks",
]
