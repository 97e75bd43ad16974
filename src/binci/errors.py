"""Unified exception hierarchy for binci.

All custom exceptions inherit from BinciError for consistent error handling.
CLI catches these and converts to user-friendly messages via click.ClickException.

Dependency direction:
    This module has NO internal dependencies (leaf module).
    It may be imported by: all other binci modules.
    It should NOT import from any other binci modules.
"""

from __future__ import annotations


class BinciError(Exception):
    """Base exception for all binci errors.

    All binci-specific exceptions should inherit from this class.
    This enables consistent error handling at the CLI layer.
    """


class ConfigError(BinciError):
    """Configuration-related errors.

    Raised while building a single container command. Aborts that build only;
    no partial arguments or script are returned.
    """


class MissingBaseImageError(ConfigError):
    """Raised when the 'from' property is absent."""

    def __init__(self) -> None:
        self.field = "from"
        super().__init__("Missing 'from' property in config or argument")


class ConfigShapeError(ConfigError):
    """Raised when a config field has the wrong shape (e.g. not a list)."""

    def __init__(self, field: str, expected: str = "an array") -> None:
        self.field = field
        super().__init__(f"Config error: '{field}' should be {expected}")


class MissingTasksError(ConfigError):
    """Raised when a task run is requested but no tasks are defined."""

    def __init__(self) -> None:
        self.field = "tasks"
        super().__init__("No tasks are defined")


class MissingRunTargetError(ConfigError):
    """Raised when no task has been selected to run."""

    def __init__(self) -> None:
        self.field = "run"
        super().__init__("No task has been specified")


class UnknownTaskError(ConfigError):
    """Raised when a selected task is absent or empty."""

    def __init__(self, task: str) -> None:
        self.task = task
        super().__init__(f"Task '{task}' does not exist.")


class TaskMissingCommandError(ConfigError):
    """Raised when a structured task entry has no 'cmd'."""

    def __init__(self, task: str) -> None:
        self.task = task
        super().__init__(f"Task '{task}' has no command defined.")


class ConfigFileError(ConfigError):
    """Config file errors.

    Examples:
        - binci.yml not found
        - YAML parse errors
        - Top-level document is not a mapping
    """
