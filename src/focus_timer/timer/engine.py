"""Countdown engine state machine with injectable ticker and display."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

from focus_timer.motivation.quotes import TIMER_QUOTES
from focus_timer.timer.display import (
    CompletionNotifier,
    DisplaySink,
    format_time,
    progress_fraction,
    split_time,
)
from focus_timer.timer.ticker import TickHandle, Ticker

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 25 * 60
DEFAULT_TASK_LABEL = "your task"
DONE_LABEL = "DONE"


class TimerPhase(Enum):
    """Lifecycle phase of a countdown session."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


@dataclass
class SessionState:
    """Current state of a countdown session."""
    total_duration: int = DEFAULT_DURATION_SECONDS
    remaining: int = DEFAULT_DURATION_SECONDS
    phase: TimerPhase = TimerPhase.IDLE
    task_label: str | None = None
    message: str = ""

    @property
    def running(self) -> bool:
        return self.phase == TimerPhase.RUNNING

    @property
    def time_remaining_display(self) -> str:
        """Format time remaining as MM:SS."""
        return format_time(self.remaining)

    @property
    def progress(self) -> float:
        """Elapsed fraction of the session (0.0-1.0)."""
        return progress_fraction(self.total_duration, self.remaining)


class CountdownEngine:
    """Countdown timer with start/pause/reset commands.

    The engine owns no timer of its own; it asks the injected ticker for a
    recurring callback and keeps at most one tick handle alive.

    Usage:
        engine = CountdownEngine(ticker=AsyncioTicker(), display=sink, notifier=notifier)
        engine.task_label = "Write report"
        engine.start()
        engine.pause()
        engine.start()   # resumes from the paused value
        engine.reset()
    """

    def __init__(
        self,
        ticker: Ticker,
        display: DisplaySink,
        notifier: CompletionNotifier,
        total_duration: int = DEFAULT_DURATION_SECONDS,
        tick_interval: float = 1.0,
        default_task_label: str = DEFAULT_TASK_LABEL,
        quotes: Sequence[str] = TIMER_QUOTES,
        rng: random.Random | None = None,
    ):
        if total_duration <= 0:
            raise ValueError("total_duration must be a positive number of seconds")
        if not quotes:
            raise ValueError("quotes must not be empty")

        self._ticker = ticker
        self._display = display
        self._notifier = notifier
        self._tick_interval = tick_interval
        self._default_task_label = default_task_label
        self._quotes = tuple(quotes)
        self._rng = rng or random.Random()
        self._handle: TickHandle | None = None
        self._state = SessionState(total_duration=total_duration, remaining=total_duration)

        self._render()

    @property
    def state(self) -> SessionState:
        """Get current session state (read-only copy)."""
        return replace(self._state)

    @property
    def phase(self) -> TimerPhase:
        return self._state.phase

    @property
    def remaining(self) -> int:
        return self._state.remaining

    @property
    def total_duration(self) -> int:
        return self._state.total_duration

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def task_label(self) -> str | None:
        return self._state.task_label

    @task_label.setter
    def task_label(self, value: str | None) -> None:
        self._state.task_label = value

    def start(self) -> None:
        """Start or resume the countdown."""
        if self._state.phase in (TimerPhase.RUNNING, TimerPhase.COMPLETED):
            return

        self._cancel_tick_source()
        self._state.phase = TimerPhase.RUNNING
        self._handle = self._ticker.schedule(
            self.tick, self._tick_interval, on_error=self._on_tick_error
        )
        logger.info(f"Countdown started at {self._state.time_remaining_display}")

    def pause(self) -> None:
        """Pause the countdown, keeping the remaining time."""
        if self._state.phase != TimerPhase.RUNNING:
            return

        self._cancel_tick_source()
        self._state.phase = TimerPhase.PAUSED
        logger.info(f"Countdown paused at {self._state.time_remaining_display}")

    def reset(self) -> None:
        """Stop the countdown and restore the full duration."""
        self._cancel_tick_source()
        self._state.phase = TimerPhase.IDLE
        self._state.remaining = self._state.total_duration
        self._state.message = self._rng.choice(self._quotes)

        self._render()
        self._display.show_message(self._state.message)
        logger.info("Countdown reset")

    def tick(self) -> None:
        """Advance one second. Ignored unless running."""
        if self._state.phase != TimerPhase.RUNNING:
            return

        self._state.remaining = max(0, self._state.remaining - 1)
        self._render()

        if self._state.remaining == 0:
            self._complete()

    def _complete(self) -> None:
        """Handle session completion."""
        self._cancel_tick_source()
        self._state.phase = TimerPhase.COMPLETED

        task = self._state.task_label or self._default_task_label
        self._state.message = f"✅ Great job finishing {task}!"

        self._display.show_progress(1.0)
        self._display.show_label(DONE_LABEL)
        self._display.show_message(self._state.message)

        logger.info(f"Countdown complete: {task}")
        self._notifier.notify(f"Pomodoro session complete! Great job finishing {task}!")

    def _render(self) -> None:
        minutes, seconds = split_time(self._state.remaining)
        self._display.show_time(minutes, seconds)
        self._display.show_progress(self._state.progress)

    def _on_tick_error(self, error: Exception) -> None:
        """The tick source died; fall back to paused so start() can resume."""
        self._handle = None
        if self._state.phase == TimerPhase.RUNNING:
            self._state.phase = TimerPhase.PAUSED
            logger.warning(f"Countdown paused at {self._state.time_remaining_display} after tick error: {error}")

    def _cancel_tick_source(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def get_summary(self) -> dict:
        """Get a summary of the current session."""
        return {
            "phase": self._state.phase.value,
            "is_running": self._state.running,
            "time_remaining": self._state.time_remaining_display,
            "remaining_seconds": self._state.remaining,
            "total_seconds": self._state.total_duration,
            "progress": self._state.progress,
            "task_label": self._state.task_label,
            "message": self._state.message,
        }
