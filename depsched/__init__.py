"""Run tasks that depend on each other's results in dependency order."""

__version__ = "0.1.0"
__all__ = ["cli", "scheduler", "sometype"]