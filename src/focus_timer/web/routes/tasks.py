"""Task list routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from focus_timer.tasks.store import Task, TaskNotFoundError, TaskSort, TaskStore, TaskValidationError
from focus_timer.web.app import get_task_store

router = APIRouter(tags=["tasks"])


class TaskResponse(BaseModel):
    """Task response."""
    id: int
    name: str
    category: str
    minutes: int
    completed: bool
    created_at: str

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id or 0,
            name=task.name,
            category=task.category,
            minutes=task.minutes,
            completed=task.completed,
            created_at=task.created_at.isoformat(),
        )


class TaskCreate(BaseModel):
    name: str
    category: str | None = None
    minutes: int | float | str | None = None


@router.get("/tasks", response_model=list[TaskResponse])
async def list_tasks(
    sort_by: TaskSort = Query(TaskSort.DEFAULT, description="default, category, time or completed"),
    store: TaskStore = Depends(get_task_store),
) -> list[TaskResponse]:
    tasks = await store.list_tasks(sort_by)
    return [TaskResponse.from_task(t) for t in tasks]


@router.post("/tasks", response_model=TaskResponse, status_code=201)
async def create_task(body: TaskCreate, store: TaskStore = Depends(get_task_store)) -> TaskResponse:
    try:
        task = await store.add_task(body.name, category=body.category, minutes=body.minutes)
    except TaskValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TaskResponse.from_task(task)


@router.post("/tasks/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(task_id: int, store: TaskStore = Depends(get_task_store)) -> TaskResponse:
    """Mark a task completed, or undo it."""
    try:
        task = await store.toggle_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TaskResponse.from_task(task)


@router.delete("/tasks/{task_id}", status_code=204)
async def delete_task(task_id: int, store: TaskStore = Depends(get_task_store)) -> None:
    try:
        await store.delete_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
