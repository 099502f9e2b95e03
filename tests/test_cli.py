"""Tests for the Typer CLI."""
from __future__ import annotations

import pytest
from typer.testing import CliRunner

from focus_timer import __version__
from focus_timer.cli.main import app
from focus_timer.core.config import get_config
from focus_timer.motivation.quotes import MOTIVATION_QUOTES

runner = CliRunner()


def flat(text: str) -> str:
    return " ".join(text.split())


class TestInfoCommands:
    def test_version(self, config) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_config_show(self, config) -> None:
        result = runner.invoke(app, ["config-show"])
        assert result.exit_code == 0
        assert "25 min" in result.output

    def test_quote(self, config) -> None:
        result = runner.invoke(app, ["quote"])
        assert result.exit_code == 0
        assert any(f'"{q}"' in flat(result.output) for q in MOTIVATION_QUOTES)

    def test_motivate_blank_mood(self, config) -> None:
        result = runner.invoke(app, ["motivate", "  "])
        assert result.exit_code == 0
        assert "Please describe how you're feeling." in result.output


class TestTaskCommands:
    def test_add_and_list(self, config) -> None:
        result = runner.invoke(app, ["task-add", "Write tests", "-c", "Dev", "-m", "30"])
        assert result.exit_code == 0
        assert "Added task 1" in result.output

        result = runner.invoke(app, ["tasks", "--sort", "time"])
        assert result.exit_code == 0
        assert "Write tests" in result.output
        assert "Dev" in result.output

    def test_add_blank_name(self, config) -> None:
        result = runner.invoke(app, ["task-add", "   "])
        assert result.exit_code == 1
        assert "Please enter a task name!" in result.output

    def test_empty_list(self, config) -> None:
        result = runner.invoke(app, ["tasks"])
        assert result.exit_code == 0
        assert "No tasks yet" in result.output

    def test_unknown_sort(self, config) -> None:
        result = runner.invoke(app, ["tasks", "--sort", "size"])
        assert result.exit_code == 1

    def test_toggle_and_delete(self, config) -> None:
        runner.invoke(app, ["task-add", "Laundry"])
        result = runner.invoke(app, ["task-toggle", "1"])
        assert result.exit_code == 0
        assert "completed" in result.output

        result = runner.invoke(app, ["task-delete", "1"])
        assert result.exit_code == 0
        assert runner.invoke(app, ["task-delete", "1"]).exit_code == 1
        assert runner.invoke(app, ["task-toggle", "1"]).exit_code == 1


class TestRunCommand:
    @pytest.fixture
    def fast_config(self, config, monkeypatch):
        monkeypatch.setenv("FOCUS_TIMER_TIMER__TICK_SECONDS", "0.001")
        get_config.cache_clear()
        return get_config()

    def test_run_to_completion(self, fast_config) -> None:
        result = runner.invoke(app, ["run", "--minutes", "1", "--task", "Inbox zero"], input="\n")
        assert result.exit_code == 0
        assert "Pomodoro session complete! Great job finishing Inbox zero!" in flat(result.output)
