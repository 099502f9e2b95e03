"""FastAPI application exposing the timer, tasks, and quotes."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from focus_timer import __version__
from focus_timer.core.config import Config, get_config
from focus_timer.motivation.client import MotivationClient
from focus_timer.storage.database import Database
from focus_timer.tasks.store import TaskStore
from focus_timer.timer.display import FrameRecorder, RecordingNotifier
from focus_timer.timer.engine import CountdownEngine
from focus_timer.timer.ticker import AsyncioTicker, Ticker

logger = logging.getLogger(__name__)


def build_engine(
    config: Config,
    ticker: Ticker,
    display: FrameRecorder,
    notifier: RecordingNotifier,
) -> CountdownEngine:
    """Create an engine wired to a recording display and notifier."""
    return CountdownEngine(
        ticker=ticker,
        display=display,
        notifier=notifier,
        total_duration=config.timer.duration_seconds,
        tick_interval=config.timer.tick_seconds,
        default_task_label=config.timer.default_task_label,
    )


def create_app(config: Config | None = None, ticker: Ticker | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or get_config()
    ticker = ticker or AsyncioTicker()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("Starting focus timer API...")

        db = Database(config.db_path)
        await db.connect()

        app.state.db = db
        app.state.tasks = TaskStore(
            db,
            default_category=config.tasks.default_category,
            default_minutes=config.tasks.default_minutes,
        )
        app.state.display = FrameRecorder()
        app.state.notifier = RecordingNotifier()
        app.state.engine = build_engine(config, ticker, app.state.display, app.state.notifier)
        app.state.motivation = MotivationClient(
            config.motivation.endpoint,
            timeout_seconds=config.motivation.timeout_seconds,
        )

        yield

        app.state.engine.pause()
        await db.close()
        logger.info("Focus timer API shutdown complete")

    app = FastAPI(
        title="Focus Timer",
        description="Countdown timer, task list and motivation API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from focus_timer.web.routes import api, tasks, timer

    app.include_router(api.router, prefix="/api")
    app.include_router(timer.router, prefix="/api")
    app.include_router(tasks.router, prefix="/api")

    return app


def get_engine(request: Request) -> CountdownEngine:
    return request.app.state.engine


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.tasks


def get_motivation_client(request: Request) -> MotivationClient:
    return request.app.state.motivation


def run_server(config: Config | None = None) -> None:
    """Run the web server."""
    import uvicorn

    config = config or get_config()
    host = config.web.host
    port = config.web.port

    logger.info(f"Starting API at http://{host}:{port}")

    uvicorn.run(
        "focus_timer.web.app:create_app",
        host=host,
        port=port,
        factory=True,
        log_level="info",
    )
