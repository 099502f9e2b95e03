"""Focus timer: countdown sessions, a task list, and motivation."""

__version__ = "0.1.0"
