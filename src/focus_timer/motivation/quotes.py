"""Fixed motivational quote pools."""

from __future__ import annotations

import random
from typing import Sequence

# Shown on the timer after a reset
TIMER_QUOTES: tuple[str, ...] = (
    "Stay focused — you're doing great.",
    "Discipline beats motivation every time.",
    "Deep work brings deep rewards.",
    "Small steps every day lead to big results.",
    "The future depends on what you do now.",
)

# Standalone "new quote" feature
MOTIVATION_QUOTES: tuple[str, ...] = (
    "Push yourself, because no one else is going to do it for you.",
    "Success doesn't come from what you do occasionally—it comes from what you do consistently.",
    "Your future is created by what you do today, not tomorrow.",
    "Discipline will take you places motivation can't.",
    "Start where you are. Use what you have. Do what you can.",
    "Dream big. Start small. Act now.",
)


def random_quote(pool: Sequence[str] = MOTIVATION_QUOTES, rng: random.Random | None = None) -> str:
    """Pick a quote uniformly at random."""
    if not pool:
        raise ValueError("quote pool is empty")
    return (rng or random).choice(pool)


def format_quote(text: str) -> str:
    return f'"{text}"'
