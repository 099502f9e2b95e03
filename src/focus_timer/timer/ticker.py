"""Periodic tick sources for the countdown engine."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]
TickErrorCallback = Callable[[Exception], None]


class TickHandle(Protocol):
    """A scheduled recurring callback."""

    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Ticker(Protocol):
    """Something that can fire a callback every ``interval`` seconds.

    If the callback raises, the handle goes inactive and ``on_error`` (when
    given) receives the exception.
    """

    def schedule(
        self,
        callback: TickCallback,
        interval: float,
        on_error: TickErrorCallback | None = None,
    ) -> TickHandle: ...


class AsyncioTickHandle:
    """Tick handle backed by an asyncio task."""

    def __init__(
        self,
        callback: TickCallback,
        interval: float,
        on_error: TickErrorCallback | None = None,
    ):
        self._callback = callback
        self._interval = interval
        self._on_error = on_error
        self._active = True
        self._task: asyncio.Task | None = asyncio.get_running_loop().create_task(self._tick_loop())

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop the tick loop. Safe to call from inside the callback."""
        if not self._active:
            return
        self._active = False
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _tick_loop(self) -> None:
        """Main tick loop. A failing callback stops the loop."""
        while self._active:
            await asyncio.sleep(self._interval)
            if not self._active:
                break
            try:
                self._callback()
            except Exception as e:
                logger.error(f"Tick callback failed, stopping tick source: {e}")
                self._active = False
                self._task = None
                if self._on_error is not None:
                    self._on_error(e)
                break


class AsyncioTicker:
    """Ticker for code running inside an asyncio event loop.

    ``schedule`` must be called with a running loop.
    """

    def schedule(
        self,
        callback: TickCallback,
        interval: float,
        on_error: TickErrorCallback | None = None,
    ) -> AsyncioTickHandle:
        return AsyncioTickHandle(callback, interval, on_error)


class FakeTickHandle:
    def __init__(
        self,
        callback: TickCallback,
        interval: float,
        first_fire: float,
        on_error: TickErrorCallback | None = None,
    ):
        self.callback = callback
        self.interval = interval
        self.next_fire = first_fire
        self.on_error = on_error
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False


class FakeTicker:
    """Ticker driven by virtual time.

    A failing callback deactivates its handle and reports to ``on_error``
    like the asyncio ticker, then re-raises out of ``advance()``.

    Usage:
        ticker = FakeTicker()
        engine = CountdownEngine(ticker=ticker, ...)
        engine.start()
        ticker.advance(60)  # fires every due callback, in time order
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._handles: list[FakeTickHandle] = []
        self.fired = 0

    @property
    def active_handles(self) -> list[FakeTickHandle]:
        self._handles = [h for h in self._handles if h.active]
        return list(self._handles)

    @property
    def active_count(self) -> int:
        return len(self.active_handles)

    def schedule(
        self,
        callback: TickCallback,
        interval: float,
        on_error: TickErrorCallback | None = None,
    ) -> FakeTickHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = FakeTickHandle(callback, interval, self.now + interval, on_error)
        self._handles.append(handle)
        return handle

    def advance(self, seconds: float) -> int:
        """Move virtual time forward, firing due callbacks. Returns fire count."""
        target = self.now + seconds
        fired = 0
        try:
            while True:
                due = [h for h in self.active_handles if h.next_fire <= target]
                if not due:
                    break
                handle = min(due, key=lambda h: h.next_fire)
                self.now = handle.next_fire
                handle.next_fire += handle.interval
                fired += 1
                try:
                    handle.callback()
                except Exception as e:
                    handle.cancel()
                    if handle.on_error is not None:
                        handle.on_error(e)
                    raise
            self.now = target
        finally:
            self.fired += fired
        return fired
