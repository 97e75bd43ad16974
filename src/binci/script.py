"""Execution script generation.

The primary container runs ``sh <tmpdir>/binci.sh``; this module produces the
contents of that script from either an inline ``exec`` command or the tasks
selected with ``run``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .config import PlainCommand, StructuredCommand, parse_task_entry
from .constants import SCRIPT_HEADER
from .errors import (
    ConfigShapeError,
    MissingRunTargetError,
    MissingTasksError,
    TaskMissingCommandError,
    UnknownTaskError,
)
from .logging import get_logger

if TYPE_CHECKING:
    from .config import ContainerConfig

logger = get_logger(__name__)


def resolve_task(name: str, entry: Any) -> str:
    """Return the command text for a task entry.

    Raises:
        UnknownTaskError: If the entry is missing or empty.
        TaskMissingCommandError: If a structured entry has no cmd.
    """
    match parse_task_entry(entry):
        case PlainCommand(text=text):
            return text
        case StructuredCommand(cmd=None):
            raise TaskMissingCommandError(name)
        case StructuredCommand(cmd=cmd):
            return cmd
        case _:
            raise UnknownTaskError(name)


def _task_body(config: ContainerConfig) -> str:
    # An empty mapping counts as defined; "", false, 0 do not
    if not config.tasks and not isinstance(config.tasks, Mapping):
        raise MissingTasksError()
    if not isinstance(config.tasks, Mapping):
        raise ConfigShapeError("tasks", "a mapping")
    if not config.run:
        raise MissingRunTargetError()

    commands = [resolve_task(name, config.tasks.get(name)) for name in config.run]
    logger.debug("Resolved tasks %s", ", ".join(config.run))
    return "\n".join(commands)


def build_exec_script(config: ContainerConfig) -> str:
    """Build the execution script for the primary container.

    Layout is always: header, before hook, body, after hook. An inline exec
    command skips task resolution entirely.

    Raises:
        MissingTasksError: No tasks defined and no exec command.
        MissingRunTargetError: No task selected.
        UnknownTaskError: A selected task is missing or empty.
        TaskMissingCommandError: A structured task has no cmd.
    """
    before = f"{config.before}\n" if config.before else ""
    after = f"\n{config.after}" if config.after else ""
    body = config.exec_command if config.exec_command else _task_body(config)
    return SCRIPT_HEADER + before + body + after
