from __future__ import annotations

import pytest

from focus_timer.core.config import get_config


@pytest.fixture
def config(tmp_path, monkeypatch):
    """A config whose directories all live under tmp_path."""
    monkeypatch.setenv("FOCUS_TIMER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("FOCUS_TIMER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("FOCUS_TIMER_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("FOCUS_TIMER_CONFIG", str(tmp_path / "config" / "config.yaml"))
    get_config.cache_clear()
    yield get_config()
    get_config.cache_clear()
