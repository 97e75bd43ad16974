"""Host environment variable interpolation.

Resolves ``${VAR}`` and ``${VAR:-default}`` placeholders in config strings
against the host environment.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def parse_host_env_vars(value: Any, environ: Mapping[str, str]) -> str:
    """Replace ``${VAR}`` placeholders with host environment values.

    Presence decides: a variable set to an empty string resolves to the empty
    string, not to the default. An unset variable with no default resolves to
    the empty string; this never raises.

    Args:
        value: Text to interpolate. Non-strings (e.g. YAML ints) are
            converted with str() first.
        environ: Environment to resolve names against.

    Returns:
        Interpolated string.

    Examples:
        >>> parse_host_env_vars("FOO=${BAR:-baz}", {})
        'FOO=baz'
        >>> parse_host_env_vars("${HOME}/app", {"HOME": "/root"})
        '/root/app'
    """

    def _replace(match: re.Match[str]) -> str:
        name, _, default = match.group(1).partition(":-")
        if name in environ:
            return environ[name]
        return default

    return _PLACEHOLDER.sub(_replace, str(value))
