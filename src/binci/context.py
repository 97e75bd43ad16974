"""Invocation context for binci.

Bundles the ambient inputs of a single tool invocation (instance id, working
directory, environment, terminal interactivity) so command building never
reads process globals directly.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from .naming import new_instance_id


@dataclass(frozen=True)
class InvocationContext:
    """Ambient inputs for building container commands.

    Immutable; one instance is shared by every container started in the same
    invocation so ephemeral names carry the same instance id.
    """

    instance_id: str
    cwd: str
    environ: Mapping[str, str] = field(default_factory=dict, compare=False)
    interactive: bool = False

    @classmethod
    def current(cls, *, instance_id: str | None = None) -> InvocationContext:
        """Capture the current process state.

        Args:
            instance_id: Reuse an existing id; a new one is generated if None.
        """
        return cls(
            instance_id=instance_id or new_instance_id(),
            cwd=os.getcwd(),
            environ=dict(os.environ),
            interactive=sys.stdout.isatty(),
        )
