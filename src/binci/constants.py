"""Constants module for binci.

The argument flag table and all fixed strings used to build commands are
defined here (SSOT).
"""

from __future__ import annotations

from types import MappingProxyType

# === Config ===
CONFIG_FILE_NAME = "binci.yml"

# === Argument flags ===
# Config key -> docker run flag. Keys outside this table are ignored by the
# argument mapper.
ARG_FLAGS = MappingProxyType(
    {
        "expose": "-p",
        "volumes": "-v",
        "env": "-e",
        "hosts": "--add-host",
    }
)

# === Container naming ===
EPHEMERAL_PREFIX = "bc"  # bc_<name>_<instance id>
INSTANCE_ID_LENGTH = 6

# === Run flags ===
OVERLAY_NETWORK_FLAG = "--network=my-overlay"
PRIVILEGED_FLAG = "--privileged"
INTERACTIVE_FLAG = "-it"
LINK_FLAG = "--link"

# === Execution script ===
SCRIPT_NAME = "binci.sh"  # Written to <tmpdir>/binci.sh by the caller
SCRIPT_HEADER = "#!/bin/sh\nset -e;\n"
SCRIPT_SHELL = "sh"

# === Runtime ===
RUNTIME_COMMAND = "docker"
DEFAULT_PRIMARY_NAME = "primary"
