"""Config field to docker run flag mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .constants import ARG_FLAGS
from .errors import ConfigShapeError
from .interpolate import parse_host_env_vars
from .paths import resolve_volumes

if TYPE_CHECKING:
    from .config import ContainerConfig
    from .context import InvocationContext


def parse_args(arg_type: str, values: list[Any], context: InvocationContext) -> list[str]:
    """Reduce a list of values into flagged arguments.

    Volumes are resolved against the working directory before interpolation;
    every other type is only interpolated.

    Args:
        arg_type: Config key (one of ARG_FLAGS).
        values: Values for that key.
        context: Invocation context (cwd and environment).

    Returns:
        Interleaved [flag, value, flag, value, ...] list in input order.
    """
    flag = ARG_FLAGS[arg_type]
    if arg_type == "volumes":
        values = resolve_volumes(values, context.cwd)

    args: list[str] = []
    for value in values:
        args.extend([flag, parse_host_env_vars(value, context.environ)])
    return args


def get_args(config: ContainerConfig, context: InvocationContext) -> list[str]:
    """Build flagged arguments for every recognized config field.

    Raises:
        ConfigShapeError: If a recognized field is not a list.
    """
    args: list[str] = []
    for key, values in config.arguments:
        if not isinstance(values, (list, tuple)):
            raise ConfigShapeError(key)
        args.extend(parse_args(key, list(values), context))
    return args
