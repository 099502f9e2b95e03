"""Display sink and completion notifier boundaries for the countdown engine."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


class DisplaySink(Protocol):
    """Rendering boundary consuming time and progress updates."""

    def show_time(self, minutes: str, seconds: str) -> None: ...

    def show_label(self, text: str) -> None: ...

    def show_progress(self, fraction: float) -> None: ...

    def show_message(self, text: str) -> None: ...


class CompletionNotifier(Protocol):
    """Surfaces end-of-session messaging to the user."""

    def notify(self, message: str) -> None: ...


def split_time(seconds: int) -> tuple[str, str]:
    """Split a second count into zero-padded minute and second strings."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}", f"{secs:02d}"


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    minutes, secs = split_time(seconds)
    return f"{minutes}:{secs}"


def progress_fraction(total: int, remaining: int) -> float:
    """Elapsed fraction of a session, in [0.0, 1.0]."""
    return (total - remaining) / total


def ring_circumference(radius: float) -> float:
    return 2 * math.pi * radius


def stroke_offset(fraction: float, radius: float) -> float:
    """SVG stroke-dashoffset for a progress ring.

    An empty ring has an offset equal to the circumference, a full ring 0.
    """
    fraction = min(1.0, max(0.0, fraction))
    return ring_circumference(radius) * (1 - fraction)


@dataclass
class DisplayFrame:
    """Everything a renderer needs to draw the timer."""
    minutes: str = "00"
    seconds: str = "00"
    label: str | None = None
    progress: float = 0.0
    message: str = ""

    @property
    def text(self) -> str:
        """Time text, or the terminal label when one is set."""
        if self.label:
            return self.label
        return f"{self.minutes}:{self.seconds}"


class FrameRecorder:
    """Display sink that keeps the latest frame and recent progress updates.

    Only the newest ``history_size`` progress values are kept. Used by the web
    API and by tests.
    """

    def __init__(self, history_size: int = 600) -> None:
        self.frame = DisplayFrame()
        self.progress_history: deque[float] = deque(maxlen=history_size)
        self.updates = 0

    def show_time(self, minutes: str, seconds: str) -> None:
        self.frame.minutes = minutes
        self.frame.seconds = seconds
        self.frame.label = None
        self.updates += 1

    def show_label(self, text: str) -> None:
        self.frame.label = text
        self.updates += 1

    def show_progress(self, fraction: float) -> None:
        self.frame.progress = fraction
        self.progress_history.append(fraction)
        self.updates += 1

    def show_message(self, text: str) -> None:
        self.frame.message = text
        self.updates += 1


@dataclass
class Notification:
    message: str
    created_at: datetime = field(default_factory=datetime.now)
    acknowledged: bool = False


class RecordingNotifier:
    """Non-blocking notifier: completion messages queue up until acknowledged.

    Acknowledged notifications are dropped on the next ``notify``, and at most
    ``max_notifications`` are kept (oldest first out).
    """

    def __init__(self, max_notifications: int = 20) -> None:
        self.max_notifications = max_notifications
        self.notifications: list[Notification] = []

    def notify(self, message: str) -> None:
        self.notifications = [n for n in self.notifications if not n.acknowledged]
        self.notifications.append(Notification(message=message))
        del self.notifications[: -self.max_notifications]

    @property
    def pending(self) -> list[Notification]:
        return [n for n in self.notifications if not n.acknowledged]

    def acknowledge_all(self) -> int:
        pending = self.pending
        for notification in pending:
            notification.acknowledged = True
        return len(pending)
