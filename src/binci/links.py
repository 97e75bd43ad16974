"""Service link resolution.

Each entry in ``services`` is a single-key mapping ``{alias: config}``:

    services:
      - mongo:
          from: mongo:3
          persist: true
      - redis:
          from: redis
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .config import ContainerConfig
from .constants import LINK_FLAG
from .errors import ConfigShapeError
from .logging import get_logger
from .naming import get_container_name

logger = get_logger(__name__)


def _entries(services: Any) -> list[Mapping[str, Any]]:
    if services is None:
        return []
    if isinstance(services, Mapping):
        # alias -> config mapping: every item is its own entry
        return [{alias: cfg} for alias, cfg in services.items()]
    if isinstance(services, (list, tuple)):
        return list(services)
    raise ConfigShapeError("services", "a list of services")


def iter_services(config: ContainerConfig) -> Iterator[tuple[str, ContainerConfig]]:
    """Yield (alias, config) for each service entry in order.

    Only the first key of each entry is used; extra keys are ignored.

    Raises:
        ConfigShapeError: If an entry or service config is not a mapping.
    """
    for entry in _entries(config.services):
        if not isinstance(entry, Mapping) or not entry:
            raise ConfigShapeError("services", "a list of single-key mappings")

        items = iter(entry.items())
        alias, service = next(items)
        extra = [str(key) for key, _ in items]
        if extra:
            logger.warning(
                "Service entry '%s' has extra keys that are ignored: %s", alias, ", ".join(extra)
            )

        if service is None:
            service = {}
        if not isinstance(service, Mapping):
            raise ConfigShapeError(f"services.{alias}", "a mapping")

        yield str(alias), ContainerConfig.from_mapping(service)


def get_links(config: ContainerConfig, instance_id: str) -> list[str]:
    """Build --link arguments pairing each service's container name with its alias."""
    links: list[str] = []
    for alias, service in iter_services(config):
        links.extend([LINK_FLAG, f"{get_container_name(alias, service, instance_id)}:{alias}"])
    return links
