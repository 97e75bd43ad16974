"""Docker run command assembly for binci.

Combines argument mapping, service links, container naming and script
generation into the full argument list for the primary project container or
a background service container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

from .arguments import get_args
from .constants import (
    INTERACTIVE_FLAG,
    OVERLAY_NETWORK_FLAG,
    PRIVILEGED_FLAG,
    SCRIPT_NAME,
    SCRIPT_SHELL,
)
from .errors import MissingBaseImageError
from .interpolate import parse_host_env_vars
from .links import get_links
from .logging import get_logger
from .naming import get_container_name
from .paths import dewindowize
from .script import build_exec_script

if TYPE_CHECKING:
    from typing import Literal

    from .config import ContainerConfig
    from .context import InvocationContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrimaryCommand:
    """Run arguments for the primary container plus its execution script.

    The script must be written to <tmpdir>/binci.sh before the run.
    """

    args: list[str]
    script: str


def _require_image(config: ContainerConfig) -> str:
    if not config.image:
        raise MissingBaseImageError()
    return config.image


def _common_args(
    config: ContainerConfig,
    name: str,
    image: str,
    context: InvocationContext,
) -> list[str]:
    """Args shared by both roles, from --user through the image name."""
    args: list[str] = []
    if config.user:
        args.append(f"--user={parse_host_env_vars(config.user, context.environ)}")
    args.extend(get_args(config, context))
    args.extend(get_links(config, context.instance_id))
    args.extend(["--name", get_container_name(name, config, context.instance_id)])
    args.append(image.lower())
    return args


def build_primary_command(
    config: ContainerConfig,
    name: str,
    tmpdir: str,
    context: InvocationContext,
) -> PrimaryCommand:
    """Generate docker run arguments and script for the main project container.

    Args:
        config: Primary container config.
        name: Logical container name.
        tmpdir: Directory holding the execution script (mounted at the same path).
        context: Invocation context.

    Raises:
        MissingBaseImageError: If 'from' is not set.
        ConfigError: Any argument or script error for this container.
    """
    image = _require_image(config)
    cwd = dewindowize(context.cwd)
    work_dir = config.work_dir or cwd

    args = [
        "run",
        "--rm",
        "-v",
        f"{cwd}:{work_dir}:cached",
        "-v",
        f"{tmpdir}:{tmpdir}",
        "-w",
        work_dir,
    ]
    if config.privileged is not False:
        args.append(PRIVILEGED_FLAG)
    if config.network_host:
        args.append(OVERLAY_NETWORK_FLAG)
    if context.interactive:
        args.append(INTERACTIVE_FLAG)

    args.extend(_common_args(config, name, image, context))
    args.extend([SCRIPT_SHELL, f"{tmpdir}/{SCRIPT_NAME}"])

    script = build_exec_script(config)
    logger.debug("Primary run args: %s", args)
    return PrimaryCommand(args=args, script=script)


def build_service_command(
    config: ContainerConfig,
    name: str,
    context: InvocationContext,
) -> list[str]:
    """Generate docker run arguments for a detached service container.

    Services are removed on exit unless rmOnShutdown is set.

    Raises:
        MissingBaseImageError: If 'from' is not set.
        ConfigError: Any argument error for this container.
    """
    image = _require_image(config)

    args = ["run", "-d"]
    if config.privileged is not False:
        args.append(PRIVILEGED_FLAG)
    if config.network_host:
        args.append(OVERLAY_NETWORK_FLAG)
    if not config.rm_on_shutdown:
        args.append("--rm")

    args.extend(_common_args(config, name, image, context))
    logger.debug("Service '%s' run args: %s", name, args)
    return args


@overload
def get_command(
    config: ContainerConfig,
    name: str,
    tmpdir: str,
    context: InvocationContext,
    primary: Literal[True],
) -> PrimaryCommand: ...


@overload
def get_command(
    config: ContainerConfig,
    name: str,
    tmpdir: str,
    context: InvocationContext,
    primary: Literal[False] = ...,
) -> list[str]: ...


def get_command(
    config: ContainerConfig,
    name: str,
    tmpdir: str,
    context: InvocationContext,
    primary: bool = False,
) -> PrimaryCommand | list[str]:
    """Return full command arguments for a container.

    Returns:
        PrimaryCommand for the primary container, argument list for a service.
    """
    if primary:
        return build_primary_command(config, name, tmpdir, context)
    return build_service_command(config, name, context)
