"""General API routes: health, quotes, motivation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from focus_timer.motivation.client import MotivationClient
from focus_timer.motivation.quotes import MOTIVATION_QUOTES, format_quote, random_quote
from focus_timer.web.app import get_motivation_client

router = APIRouter(tags=["api"])


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database_connected: bool
    database_size_mb: float
    total_tasks: int


class QuoteResponse(BaseModel):
    quote: str
    formatted: str


class MotivationRequest(BaseModel):
    mood: str = ""


class MotivationResponse(BaseModel):
    message: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """API health check."""
    db = request.app.state.db

    try:
        size = await db.get_size_mb()
        count = await db.fetch_value("SELECT COUNT(*) FROM tasks")

        return HealthResponse(
            status="healthy",
            database_connected=True,
            database_size_mb=size,
            total_tasks=count or 0,
        )
    except Exception as e:
        return HealthResponse(
            status=f"unhealthy: {e}",
            database_connected=False,
            database_size_mb=0,
            total_tasks=0,
        )


@router.get("/quotes/random", response_model=QuoteResponse)
async def get_random_quote() -> QuoteResponse:
    quote = random_quote(MOTIVATION_QUOTES)
    return QuoteResponse(quote=quote, formatted=format_quote(quote))


@router.post("/motivation", response_model=MotivationResponse)
async def get_motivation(
    body: MotivationRequest,
    client: MotivationClient = Depends(get_motivation_client),
) -> MotivationResponse:
    """Ask the remote motivation endpoint for a message."""
    message = await client.motivate(body.mood)
    return MotivationResponse(message=message)
