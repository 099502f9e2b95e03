"""Persisted task list with sorting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from focus_timer.storage.database import Database

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
DEFAULT_MINUTES = 25


class TaskValidationError(ValueError):
    """Raised when a task cannot be created from the given input."""


class TaskNotFoundError(LookupError):
    """Raised when a task id does not exist."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskSort(Enum):
    """Task list ordering."""
    DEFAULT = "default"      # Insertion order
    CATEGORY = "category"    # Alphabetical, case-insensitive
    TIME = "time"            # Shortest first
    COMPLETED = "completed"  # Open tasks first


@dataclass
class Task:
    """A single task in the list."""
    id: int | None = None
    name: str = ""
    category: str = DEFAULT_CATEGORY
    minutes: int = DEFAULT_MINUTES
    completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> Task:
        """Create from database row."""
        created = row.get("created_at")
        return cls(
            id=row.get("id"),
            name=row.get("name", ""),
            category=row.get("category") or DEFAULT_CATEGORY,
            minutes=row.get("minutes") or DEFAULT_MINUTES,
            completed=bool(row.get("completed", False)),
            created_at=datetime.fromisoformat(created) if created else datetime.now(),
        )

    def to_db_dict(self) -> dict[str, Any]:
        """Convert to dictionary for database storage."""
        return {
            "name": self.name,
            "category": self.category,
            "minutes": self.minutes,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_db_dict()}


def parse_minutes(value: Any, default: int = DEFAULT_MINUTES) -> int:
    """Parse a minutes value leniently; anything unusable becomes the default.

    Leading digits are honoured ("45min" -> 45), zero and negatives are not.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        minutes = int(value)
    else:
        text = str(value).strip()
        sign = ""
        if text and text[0] in "+-":
            sign, text = text[0], text[1:]
        digits = ""
        for ch in text:
            if not ch.isdigit():
                break
            digits += ch
        if not digits:
            return default
        minutes = int(sign + digits)
    return minutes if minutes > 0 else default


def sort_tasks(tasks: list[Task], sort_by: TaskSort = TaskSort.DEFAULT) -> list[Task]:
    """Return a sorted copy of the task list."""
    if sort_by == TaskSort.CATEGORY:
        return sorted(tasks, key=lambda t: t.category.casefold())
    if sort_by == TaskSort.TIME:
        return sorted(tasks, key=lambda t: t.minutes)
    if sort_by == TaskSort.COMPLETED:
        return sorted(tasks, key=lambda t: t.completed)
    return list(tasks)


class TaskStore:
    """CRUD access to the task list.

    Usage:
        store = TaskStore(db)
        task = await store.add_task("Write report", category="Work", minutes="50")
        await store.toggle_task(task.id)
        tasks = await store.list_tasks(TaskSort.TIME)
    """

    def __init__(
        self,
        db: Database,
        default_category: str = DEFAULT_CATEGORY,
        default_minutes: int = DEFAULT_MINUTES,
    ):
        self.db = db
        self.default_category = default_category
        self.default_minutes = default_minutes

    async def add_task(
        self,
        name: str,
        category: str | None = None,
        minutes: Any = None,
    ) -> Task:
        """Create a task. Blank names are rejected."""
        name = (name or "").strip()
        if not name:
            raise TaskValidationError("Please enter a task name!")

        task = Task(
            name=name,
            category=(category or "").strip() or self.default_category,
            minutes=parse_minutes(minutes, self.default_minutes),
        )
        task.id = await self.db.insert("tasks", task.to_db_dict())
        logger.info(f"Added task {task.id}: {task.name}")
        return task

    async def get_task(self, task_id: int) -> Task:
        row = await self.db.fetch_one("SELECT * FROM tasks WHERE id = ?", (task_id,))
        if row is None:
            raise TaskNotFoundError(task_id)
        return Task.from_db_row(row)

    async def list_tasks(self, sort_by: TaskSort = TaskSort.DEFAULT) -> list[Task]:
        """List tasks in the requested order."""
        rows = await self.db.fetch_all("SELECT * FROM tasks ORDER BY id")
        return sort_tasks([Task.from_db_row(r) for r in rows], sort_by)

    async def toggle_task(self, task_id: int) -> Task:
        """Flip a task's completed flag."""
        task = await self.get_task(task_id)
        task.completed = not task.completed
        await self.db.execute(
            "UPDATE tasks SET completed = ? WHERE id = ?",
            (task.completed, task_id),
        )
        return task

    async def delete_task(self, task_id: int) -> None:
        await self.get_task(task_id)
        await self.db.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        logger.info(f"Deleted task {task_id}")
