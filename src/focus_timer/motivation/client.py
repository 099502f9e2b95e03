"""Client for the remote AI motivation endpoint."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

logger = logging.getLogger(__name__)

EMPTY_MOOD_MESSAGE = "Please describe how you're feeling."
NO_MESSAGE_FALLBACK = "Couldn't generate motivation."
CONNECTION_FALLBACK = "Couldn't connect to AI."


class MotivationClient:
    """Sends a mood description to the motivation endpoint and returns its message."""

    def __init__(self, endpoint: str, timeout_seconds: float = 10):
        """Initialize the client.

        Args:
            endpoint: Full URL accepting ``POST {"mood": ...}``.
            timeout_seconds: Total request timeout.
        """
        self.endpoint = endpoint
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def motivate(self, mood: str) -> str:
        """Get a motivational message for the given mood.

        Never raises for network or payload problems; returns a user-facing
        fallback string instead.
        """
        mood = (mood or "").strip()
        if not mood:
            return EMPTY_MOOD_MESSAGE

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(self.endpoint, json={"mood": mood}) as resp:
                    data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Motivation request failed: {e}")
            return CONNECTION_FALLBACK

        if not isinstance(data, dict):
            return NO_MESSAGE_FALLBACK
        return data.get("message") or NO_MESSAGE_FALLBACK
