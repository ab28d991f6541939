"""Terminal panels for task worktrees: tasks, services and an output log."""

__version__ = "0.1.0"
__all__ = ["__version__"]