"""Configuration management with Pydantic and YAML support."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimerConfig(BaseModel):
    """Countdown timer configuration."""

    duration_minutes: int = Field(default=25, ge=1, description="Session length")
    tick_seconds: float = Field(default=1.0, gt=0, description="Seconds between ticks")
    default_task_label: str = Field(default="your task")
    ring_radius: float = Field(default=52, gt=0, description="Progress ring radius")

    @property
    def duration_seconds(self) -> int:
        return self.duration_minutes * 60


class TaskConfig(BaseModel):
    """Task list defaults."""

    default_category: str = "General"
    default_minutes: int = Field(default=25, ge=1)


class MotivationConfig(BaseModel):
    """Remote motivation endpoint configuration."""

    endpoint: str = Field(default="http://localhost:3000/aiMotivation")
    timeout_seconds: float = Field(default=10, gt=0)


class WebConfig(BaseModel):
    """Web API configuration."""

    host: str = Field(default="127.0.0.1", description="Bind to localhost only")
    port: int = Field(default=8080, ge=1024, le=65535)


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FOCUS_TIMER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local/share/focus-timer")
    log_dir: Path = Field(default_factory=lambda: Path.home() / ".local/state/focus-timer")
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config/focus-timer")

    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    # Sub-configurations
    timer: TimerConfig = Field(default_factory=TimerConfig)
    tasks: TaskConfig = Field(default_factory=TaskConfig)
    motivation: MotivationConfig = Field(default_factory=MotivationConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    @property
    def db_path(self) -> Path:
        """Path to SQLite database."""
        return self.data_dir / "focus_timer.db"

    @property
    def config_file(self) -> Path:
        """Path to YAML config file."""
        return self.config_dir / "config.yaml"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        os.chmod(self.data_dir, 0o700)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from YAML file, environment variables, and defaults.

        Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values
        """
        if config_path is None:
            env_path = os.environ.get("FOCUS_TIMER_CONFIG")
            config_path = Path(env_path) if env_path else Path.home() / ".config/focus-timer/config.yaml"

        yaml_config: dict[str, Any] = {}
        if config_path.exists():
            with open(config_path) as f:
                yaml_config = yaml.safe_load(f) or {}

        # YAML is init data; pydantic-settings lets env vars win over it
        return cls(**yaml_config)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    def save(self, config_path: Path | None = None) -> None:
        """Save current configuration to YAML file."""
        config_path = config_path or self.config_file
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(exclude_none=True)

        # Convert Path objects to strings for YAML
        for key in ["data_dir", "log_dir", "config_dir"]:
            if key in data:
                data[key] = str(data[key])

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        os.chmod(config_path, 0o600)


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.load()
