"""Terminal rendering for the countdown engine using rich."""

from __future__ import annotations

import logging

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from focus_timer.timer.display import DisplayFrame

logger = logging.getLogger(__name__)


class ConsoleDisplay:
    """Live terminal panel showing time, a progress bar, and the message line.

    Call ``open()`` before the first tick and ``close()`` when done; outside
    that window updates are only stored in the frame.
    """

    def __init__(self, console: Console | None = None, title: str = "🍅 Focus"):
        self.console = console or Console()
        self.title = title
        self.frame = DisplayFrame()
        self._live: Live | None = None

    def open(self) -> None:
        if self._live is None:
            self._live = Live(self._renderable(), console=self.console, auto_refresh=False)
            self._live.start()

    def close(self) -> None:
        if self._live is not None:
            self._live.update(self._renderable(), refresh=True)
            self._live.stop()
            self._live = None

    def show_time(self, minutes: str, seconds: str) -> None:
        self.frame.minutes = minutes
        self.frame.seconds = seconds
        self.frame.label = None
        self._refresh()

    def show_label(self, text: str) -> None:
        self.frame.label = text
        self._refresh()

    def show_progress(self, fraction: float) -> None:
        self.frame.progress = fraction
        self._refresh()

    def show_message(self, text: str) -> None:
        self.frame.message = text
        self._refresh()

    def _renderable(self) -> Panel:
        time_text = Text(self.frame.text, style="bold green" if self.frame.label else "bold", justify="center")
        bar = ProgressBar(total=1.0, completed=self.frame.progress)
        parts = [time_text, bar]
        if self.frame.message:
            parts.append(Text(self.frame.message, style="dim", justify="center"))
        return Panel(Group(*parts), title=self.title, width=48)

    def _refresh(self) -> None:
        if self._live is not None:
            self._live.update(self._renderable(), refresh=True)


class ConsoleNotifier:
    """Blocking notifier: prints the message and waits for Enter."""

    def __init__(
        self,
        console: Console | None = None,
        wait_for_ack: bool = True,
        display: ConsoleDisplay | None = None,
    ):
        self.console = console or Console()
        self.wait_for_ack = wait_for_ack
        self.display = display
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
        # The live panel must be stopped before prompting
        if self.display is not None:
            self.display.close()
        self.console.bell()
        self.console.print(Panel(message, border_style="green"))
        if self.wait_for_ack:
            self.console.input("[dim]Press Enter to continue[/dim]")
