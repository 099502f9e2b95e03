"""Allow running as ``python -m focus_timer``."""

from focus_timer.cli.main import app

if __name__ == "__main__":
    app()
