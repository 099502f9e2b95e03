"""Tests for display helpers, recorders, and the rich console renderers."""
from __future__ import annotations

import io
import math

import pytest
from rich.console import Console

from focus_timer.timer.console import ConsoleDisplay, ConsoleNotifier
from focus_timer.timer.display import (
    DisplayFrame,
    FrameRecorder,
    RecordingNotifier,
    format_time,
    progress_fraction,
    split_time,
    stroke_offset,
)


class TestFormatting:
    def test_split_time(self) -> None:
        assert split_time(1500) == ("25", "00")
        assert split_time(61) == ("01", "01")

    def test_format_time(self) -> None:
        assert format_time(0) == "00:00"
        assert format_time(599) == "09:59"

    def test_negative_clamps_to_zero(self) -> None:
        assert format_time(-5) == "00:00"

    def test_progress_fraction(self) -> None:
        assert progress_fraction(1500, 1500) == 0.0
        assert progress_fraction(1500, 0) == 1.0
        assert progress_fraction(1500, 1125) == 0.25


class TestStrokeOffset:
    def test_empty_ring(self) -> None:
        assert stroke_offset(0.0, 52) == pytest.approx(2 * math.pi * 52)

    def test_full_ring(self) -> None:
        assert stroke_offset(1.0, 52) == 0.0

    def test_half(self) -> None:
        assert stroke_offset(0.5, 10) == pytest.approx(math.pi * 10)

    def test_clamped(self) -> None:
        assert stroke_offset(1.5, 52) == 0.0
        assert stroke_offset(-1, 52) == pytest.approx(2 * math.pi * 52)


class TestFrameRecorder:
    def test_label_overrides_time_text(self) -> None:
        frame = DisplayFrame(minutes="01", seconds="02", label="DONE")
        assert frame.text == "DONE"

    def test_show_time_clears_label(self) -> None:
        recorder = FrameRecorder()
        recorder.show_label("DONE")
        recorder.show_time("25", "00")
        assert recorder.frame.text == "25:00"

    def test_progress_history(self) -> None:
        recorder = FrameRecorder()
        recorder.show_progress(0.1)
        recorder.show_progress(0.2)
        assert list(recorder.progress_history) == [0.1, 0.2]
        assert recorder.frame.progress == 0.2

    def test_progress_history_is_bounded(self) -> None:
        recorder = FrameRecorder(history_size=3)
        for i in range(10):
            recorder.show_progress(i / 10)
        assert list(recorder.progress_history) == [0.7, 0.8, 0.9]


class TestRecordingNotifier:
    def test_acknowledge(self) -> None:
        notifier = RecordingNotifier()
        notifier.notify("one")
        notifier.notify("two")
        assert len(notifier.pending) == 2
        assert notifier.acknowledge_all() == 2
        assert notifier.pending == []
        assert len(notifier.notifications) == 2

    def test_acknowledged_dropped_on_next_notify(self) -> None:
        notifier = RecordingNotifier()
        notifier.notify("one")
        notifier.acknowledge_all()
        notifier.notify("two")
        assert [n.message for n in notifier.notifications] == ["two"]

    def test_keeps_newest_when_unacknowledged(self) -> None:
        notifier = RecordingNotifier(max_notifications=3)
        for i in range(5):
            notifier.notify(str(i))
        assert [n.message for n in notifier.notifications] == ["2", "3", "4"]


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=60, record=True)


class TestConsoleRenderers:
    def test_display_prints_final_frame_on_close(self) -> None:
        console = make_console()
        display = ConsoleDisplay(console)
        display.open()
        display.show_time("00", "00")
        display.show_progress(1.0)
        display.show_label("DONE")
        display.show_message("Great job")
        display.close()

        output = console.export_text()
        assert "DONE" in output
        assert "Great job" in output

    def test_display_without_open_only_stores_frame(self) -> None:
        console = make_console()
        display = ConsoleDisplay(console)
        display.show_time("12", "34")
        assert display.frame.text == "12:34"
        assert console.export_text() == ""

    def test_notifier_without_ack(self) -> None:
        console = make_console()
        notifier = ConsoleNotifier(console, wait_for_ack=False)
        notifier.notify("Session complete")
        assert notifier.messages == ["Session complete"]
        assert "Session complete" in console.export_text()

    def test_notifier_blocks_for_ack(self, monkeypatch) -> None:
        prompts: list[str] = []
        monkeypatch.setattr("builtins.input", lambda *args: prompts.append("asked") or "")
        console = make_console()
        display = ConsoleDisplay(console)
        display.open()
        notifier = ConsoleNotifier(console, display=display)
        notifier.notify("Session complete")
        assert prompts == ["asked"]
        assert display._live is None
