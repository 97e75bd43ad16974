"""Container naming for binci."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from .constants import EPHEMERAL_PREFIX, INSTANCE_ID_LENGTH

if TYPE_CHECKING:
    from .config import ContainerConfig


def new_instance_id() -> str:
    """Generate a short unique token for one tool invocation."""
    return uuid.uuid4().hex[:INSTANCE_ID_LENGTH]


def get_container_name(name: str, config: ContainerConfig, instance_id: str) -> str:
    """Get Docker container name for a logical container.

    Persisted containers keep their logical name so they can be reused across
    invocations. Ephemeral ones get bc_<name>_<instance_id>.
    """
    if config.persist:
        return name
    return f"{EPHEMERAL_PREFIX}_{name}_{instance_id}"
