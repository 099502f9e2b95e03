"""Motivational quotes and the remote motivation client."""

from focus_timer.motivation.client import MotivationClient
from focus_timer.motivation.quotes import MOTIVATION_QUOTES, TIMER_QUOTES, format_quote, random_quote

__all__ = [
    "MotivationClient",
    "MOTIVATION_QUOTES",
    "TIMER_QUOTES",
    "format_quote",
    "random_quote",
]
