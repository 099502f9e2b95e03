"""Countdown timer routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from focus_timer.timer.display import FrameRecorder, RecordingNotifier, stroke_offset
from focus_timer.timer.engine import CountdownEngine
from focus_timer.web.app import get_engine

router = APIRouter(tags=["timer"])


class NotificationResponse(BaseModel):
    """Completion notification."""
    message: str
    created_at: str
    acknowledged: bool


class TimerResponse(BaseModel):
    """Timer snapshot."""
    phase: str
    running: bool
    remaining_seconds: int
    total_seconds: int
    text: str
    progress: float
    stroke_offset: float
    message: str
    task_label: str | None
    notifications: list[NotificationResponse]


class TaskLabelRequest(BaseModel):
    label: str | None = None


def _snapshot(request: Request, engine: CountdownEngine) -> TimerResponse:
    display: FrameRecorder = request.app.state.display
    notifier: RecordingNotifier = request.app.state.notifier
    state = engine.state
    radius = request.app.state.config.timer.ring_radius

    return TimerResponse(
        phase=state.phase.value,
        running=state.running,
        remaining_seconds=state.remaining,
        total_seconds=state.total_duration,
        text=display.frame.text,
        progress=display.frame.progress,
        stroke_offset=stroke_offset(display.frame.progress, radius),
        message=display.frame.message,
        task_label=state.task_label,
        notifications=[
            NotificationResponse(
                message=n.message,
                created_at=n.created_at.isoformat(),
                acknowledged=n.acknowledged,
            )
            for n in notifier.notifications
        ],
    )


@router.get("/timer", response_model=TimerResponse)
async def get_timer(request: Request, engine: CountdownEngine = Depends(get_engine)) -> TimerResponse:
    """Current timer state."""
    return _snapshot(request, engine)


@router.post("/timer/start", response_model=TimerResponse)
async def start_timer(request: Request, engine: CountdownEngine = Depends(get_engine)) -> TimerResponse:
    engine.start()
    return _snapshot(request, engine)


@router.post("/timer/pause", response_model=TimerResponse)
async def pause_timer(request: Request, engine: CountdownEngine = Depends(get_engine)) -> TimerResponse:
    engine.pause()
    return _snapshot(request, engine)


@router.post("/timer/reset", response_model=TimerResponse)
async def reset_timer(request: Request, engine: CountdownEngine = Depends(get_engine)) -> TimerResponse:
    engine.reset()
    return _snapshot(request, engine)


@router.put("/timer/task", response_model=TimerResponse)
async def set_task_label(
    body: TaskLabelRequest,
    request: Request,
    engine: CountdownEngine = Depends(get_engine),
) -> TimerResponse:
    """Set the task label used in the completion message."""
    engine.task_label = (body.label or "").strip() or None
    return _snapshot(request, engine)


@router.post("/timer/acknowledge", response_model=TimerResponse)
async def acknowledge(request: Request, engine: CountdownEngine = Depends(get_engine)) -> TimerResponse:
    """Mark pending completion notifications as seen."""
    request.app.state.notifier.acknowledge_all()
    return _snapshot(request, engine)
