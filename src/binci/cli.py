"""CLI for binci - Containerized task runner.

Previews the docker run commands binci would issue for a binci.yml: one per
linked service, then the primary container. Nothing is started and the
execution script is not written.
"""

from __future__ import annotations

import os
import shlex
import tempfile
from dataclasses import replace

import click
from rich.console import Console

from . import __version__
from .command import build_primary_command, build_service_command
from .config import find_config, load_config
from .constants import CONFIG_FILE_NAME, DEFAULT_PRIMARY_NAME, RUNTIME_COMMAND, SCRIPT_NAME
from .context import InvocationContext
from .errors import BinciError
from .links import iter_services
from .logging import get_logger, set_debug

console = Console(emoji=False, highlight=False)
logger = get_logger(__name__)


def _print_command(args: list[str]) -> None:
    console.print(shlex.join([RUNTIME_COMMAND, *args]), markup=False, soft_wrap=True)


@click.command()
@click.argument("tasks", nargs=-1)
@click.option(
    "--file",
    "-f",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help=f"Config file (default: nearest {CONFIG_FILE_NAME})",
)
@click.option("--exec", "-e", "exec_command", help="Run this command instead of tasks")
@click.option("--tmp-dir", type=click.Path(), help="Directory for the execution script")
@click.option(
    "--name",
    default=DEFAULT_PRIMARY_NAME,
    show_default=True,
    help="Logical name of the primary container",
)
@click.option("--script", "show_script", is_flag=True, help="Also print the execution script")
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="binci")
def cli(
    tasks: tuple[str, ...],
    config_file: str | None,
    exec_command: str | None,
    tmp_dir: str | None,
    name: str,
    show_script: bool,
    debug: bool,
) -> None:
    """binci - Run project tasks in Docker containers.

    Prints the docker commands for TASKS as configured in binci.yml.
    """
    if debug:
        set_debug(True)

    path = config_file or find_config(os.getcwd())
    if path is None:
        raise click.ClickException(f"No {CONFIG_FILE_NAME} found in this directory or its parents")

    tmpdir = tmp_dir or tempfile.gettempdir()
    context = InvocationContext.current()
    logger.debug("Instance %s, config %s", context.instance_id, path)

    try:
        config = load_config(path)
        if exec_command:
            config = replace(config, exec_command=exec_command)
        elif tasks:
            config = replace(config, run=tasks)

        service_commands = [
            build_service_command(service, alias, context) for alias, service in iter_services(config)
        ]
        primary = build_primary_command(config, name, tmpdir, context)
    except BinciError as e:
        raise click.ClickException(str(e)) from e

    for args in service_commands:
        _print_command(args)
    _print_command(primary.args)

    if show_script:
        console.print(f"# {tmpdir}/{SCRIPT_NAME}", markup=False)
        console.print(primary.script, markup=False, soft_wrap=True)
