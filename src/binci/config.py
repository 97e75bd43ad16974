"""Configuration model and loading for binci.

A binci.yml describes one primary container plus optional linked services.
Building the model never validates; each command-building operation checks
the fields it needs so errors surface where they are used.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import ARG_FLAGS, CONFIG_FILE_NAME
from .errors import ConfigFileError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlainCommand:
    """Task defined as shell text: ``test: npm test``."""

    text: str


@dataclass(frozen=True)
class StructuredCommand:
    """Task defined as a mapping: ``test: {cmd: npm test, description: ...}``.

    Only cmd is used to build the script. description is carried through
    unchanged for callers that list tasks; nothing in binci reads it.
    """

    cmd: str | None
    description: str | None = None


TaskEntry = PlainCommand | StructuredCommand


def parse_task_entry(entry: Any) -> TaskEntry | None:
    """Convert a raw tasks value into a task variant.

    Returns:
        None for falsy entries (missing or empty task).
    """
    if not entry:
        return None
    if isinstance(entry, Mapping):
        cmd = entry.get("cmd")
        return StructuredCommand(
            cmd=str(cmd) if cmd else None,
            description=entry.get("description"),
        )
    return PlainCommand(str(entry))


def _text(value: Any) -> str | None:
    return str(value) if value else None


def _as_run_list(value: Any) -> tuple[str, ...] | None:
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    # "", false, 0 mean no task selected
    if not value:
        return None
    return (str(value),)


@dataclass(frozen=True)
class ContainerConfig:
    """Container config for the primary container or a service.

    Field names are snake_case versions of the binci.yml keys
    (``from`` -> image, ``workDir`` -> work_dir, ``exec`` -> exec_command).
    """

    image: str | None = None
    persist: bool = False
    user: str | None = None
    work_dir: str | None = None
    # None means "not configured"; only an explicit False disables --privileged
    privileged: bool | None = None
    network_host: bool = False
    rm_on_shutdown: bool = False

    exec_command: str | None = None
    tasks: Mapping[str, Any] | None = None
    run: tuple[str, ...] | None = None
    before: str | None = None
    after: str | None = None

    # Raw service entries, checked by links.iter_services
    services: Any = None

    # Flag-bearing fields in config key order, raw values
    arguments: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContainerConfig:
        """Create ContainerConfig from a parsed binci.yml mapping.

        Unknown keys are ignored.
        """
        return cls(
            image=_text(data.get("from")),
            persist=bool(data.get("persist")),
            user=_text(data.get("user")),
            work_dir=_text(data.get("workDir")),
            privileged=data.get("privileged"),
            network_host=data.get("networkHost") is True,
            rm_on_shutdown=bool(data.get("rmOnShutdown")),
            exec_command=_text(data.get("exec")),
            tasks=data.get("tasks"),
            run=_as_run_list(data.get("run")),
            before=_text(data.get("before")),
            after=_text(data.get("after")),
            services=data.get("services"),
            arguments=tuple((key, value) for key, value in data.items() if key in ARG_FLAGS),
        )


def find_config(start: str | Path) -> Path | None:
    """Find binci.yml in start or the nearest parent directory."""
    current = Path(start).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: str | Path) -> ContainerConfig:
    """Load a binci.yml file.

    Raises:
        ConfigFileError: If the file is unreadable, not valid YAML, or its
            top-level document is not a mapping.
    """
    config_path = Path(path)
    logger.debug("Loading config: %s", config_path)

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Unable to read config file '{config_path}': {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in '{config_path}': {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigFileError(f"Config file '{config_path}' must contain a mapping")

    return ContainerConfig.from_mapping(data)
