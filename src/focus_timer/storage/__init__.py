"""Storage layer for the task database."""

from focus_timer.storage.database import Database

__all__ = ["Database"]
