"""Countdown timer engine, tick sources, and display boundaries."""

from focus_timer.timer.display import (
    CompletionNotifier,
    DisplayFrame,
    DisplaySink,
    FrameRecorder,
    RecordingNotifier,
    format_time,
    stroke_offset,
)
from focus_timer.timer.engine import CountdownEngine, SessionState, TimerPhase
from focus_timer.timer.ticker import AsyncioTicker, FakeTicker, Ticker

__all__ = [
    "CountdownEngine",
    "SessionState",
    "TimerPhase",
    "Ticker",
    "AsyncioTicker",
    "FakeTicker",
    "DisplaySink",
    "CompletionNotifier",
    "DisplayFrame",
    "FrameRecorder",
    "RecordingNotifier",
    "format_time",
    "stroke_offset",
]
