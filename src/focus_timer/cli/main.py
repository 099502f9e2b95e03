"""CLI commands for the focus timer using Typer."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from focus_timer import __version__
from focus_timer.core.config import Config, get_config

app = typer.Typer(
    name="focus-timer",
    help="Pomodoro countdown timer with a task list and motivation.",
    add_completion=False,
)

console = Console()


def setup_logging(log_level: str, log_file: Path | None = None) -> None:
    """Configure logging for the application."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Reduce noise from external libraries
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _task_store_call(config: Config, action):
    """Run ``action(store)`` against a freshly connected task store."""
    from focus_timer.storage.database import Database
    from focus_timer.tasks.store import TaskStore

    async def run():
        db = Database(config.db_path)
        await db.connect()
        try:
            store = TaskStore(
                db,
                default_category=config.tasks.default_category,
                default_minutes=config.tasks.default_minutes,
            )
            return await action(store)
        finally:
            await db.close()

    return asyncio.run(run())


@app.command()
def run(
    task: str = typer.Option(
        None,
        "--task",
        "-t",
        help="Task label used in the completion message",
    ),
    minutes: int = typer.Option(
        None,
        "--minutes",
        "-m",
        min=1,
        help="Session length in minutes (defaults to config)",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Run a countdown session in the terminal. Ctrl+C pauses and exits."""
    from focus_timer.timer.console import ConsoleDisplay, ConsoleNotifier
    from focus_timer.timer.engine import CountdownEngine, TimerPhase
    from focus_timer.timer.ticker import AsyncioTicker

    config = get_config()
    setup_logging(log_level, config.log_dir / "focus-timer.log")

    duration = (minutes or config.timer.duration_minutes) * 60
    display = ConsoleDisplay(console, title=f"🍅 {task}" if task else "🍅 Focus")
    notifier = ConsoleNotifier(console, display=display)

    engine = CountdownEngine(
        ticker=AsyncioTicker(),
        display=display,
        notifier=notifier,
        total_duration=duration,
        tick_interval=config.timer.tick_seconds,
        default_task_label=config.timer.default_task_label,
    )
    engine.task_label = task

    async def run_session():
        display.open()
        engine.start()
        while engine.running:
            await asyncio.sleep(0.2)

    try:
        asyncio.run(run_session())
    except KeyboardInterrupt:
        engine.pause()
    finally:
        display.close()

    if engine.phase != TimerPhase.COMPLETED:
        console.print(f"\n[yellow]Paused with {engine.state.time_remaining_display} remaining[/yellow]")


@app.command(name="task-add")
def task_add(
    name: str = typer.Argument(..., help="Task name"),
    category: str = typer.Option(None, "--category", "-c", help="Category (default: General)"),
    minutes: str = typer.Option(None, "--minutes", "-m", help="Estimated minutes (default: 25)"),
) -> None:
    """Add a task to the list."""
    from focus_timer.tasks.store import TaskValidationError

    config = get_config()
    try:
        task = _task_store_call(
            config, lambda store: store.add_task(name, category=category, minutes=minutes)
        )
    except TaskValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Added task {task.id}:[/green] {task.name} ({task.category} • {task.minutes} mins)")


@app.command(name="tasks")
def tasks_list(
    sort: str = typer.Option(
        "default",
        "--sort",
        "-s",
        help="Sort by: default, category, time, completed",
    ),
) -> None:
    """List tasks."""
    from focus_timer.tasks.store import TaskSort

    try:
        sort_by = TaskSort(sort)
    except ValueError:
        console.print(f"[red]Unknown sort '{sort}'[/red]")
        raise typer.Exit(1)

    config = get_config()
    tasks = _task_store_call(config, lambda store: store.list_tasks(sort_by))

    if not tasks:
        console.print("[dim]No tasks yet. Add one with 'focus-timer task-add NAME'[/dim]")
        return

    table = Table(title="Tasks")
    table.add_column("ID", justify="right")
    table.add_column("Task")
    table.add_column("Category")
    table.add_column("Minutes", justify="right")
    table.add_column("Done", justify="center")

    for t in tasks:
        style = "dim strike" if t.completed else None
        table.add_row(
            str(t.id),
            t.name,
            t.category,
            str(t.minutes),
            "✓" if t.completed else "",
            style=style,
        )

    console.print(table)


@app.command(name="task-toggle")
def task_toggle(task_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Mark a task completed, or undo it."""
    from focus_timer.tasks.store import TaskNotFoundError

    config = get_config()
    try:
        task = _task_store_call(config, lambda store: store.toggle_task(task_id))
    except TaskNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    state = "completed" if task.completed else "reopened"
    console.print(f"[green]Task {task.id} {state}:[/green] {task.name}")


@app.command(name="task-delete")
def task_delete(task_id: int = typer.Argument(..., help="Task ID")) -> None:
    """Delete a task."""
    from focus_timer.tasks.store import TaskNotFoundError

    config = get_config()
    try:
        _task_store_call(config, lambda store: store.delete_task(task_id))
    except TaskNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Deleted task {task_id}[/green]")


@app.command()
def quote() -> None:
    """Show a random motivational quote."""
    from focus_timer.motivation.quotes import format_quote, random_quote

    console.print(f"[italic]{format_quote(random_quote())}[/italic]")


@app.command()
def motivate(mood: str = typer.Argument(..., help="How are you feeling?")) -> None:
    """Ask the AI motivation endpoint for a pep talk."""
    from focus_timer.motivation.client import MotivationClient

    config = get_config()
    client = MotivationClient(
        config.motivation.endpoint,
        timeout_seconds=config.motivation.timeout_seconds,
    )

    with console.status("Thinking..."):
        message = asyncio.run(client.motivate(mood))

    console.print(message)


@app.command()
def dashboard(
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Log level"),
) -> None:
    """Run the web API."""
    from focus_timer.web.app import run_server

    config = get_config()
    setup_logging(log_level)
    console.print(f"[green]Starting API at http://{config.web.host}:{config.web.port}[/green]")
    run_server(config)


@app.command(name="config-show")
def config_show() -> None:
    """Show current configuration."""
    config = get_config()

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Data directory", str(config.data_dir))
    table.add_row("Database", str(config.db_path))
    table.add_row("Log directory", str(config.log_dir))
    table.add_row("Config file", str(config.config_file))
    table.add_row("Log level", config.log_level)
    table.add_row("Session length", f"{config.timer.duration_minutes} min")
    table.add_row("Tick interval", f"{config.timer.tick_seconds}s")
    table.add_row("Default task label", config.timer.default_task_label)
    table.add_row("Default category", config.tasks.default_category)
    table.add_row("Motivation endpoint", config.motivation.endpoint)
    table.add_row("Web", f"{config.web.host}:{config.web.port}")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"focus-timer version {__version__}")


if __name__ == "__main__":
    app()
