"""Options shared by every wdag command."""

from functools import wraps
from pathlib import Path
from typing import Optional

import click

from weightdag.config import ConfigError, DAGOptions, load_options

from .utils.logging import configure_logging


def _set_debug(ctx: click.Context, param, value: bool) -> None:
    root = ctx.find_root()
    root.ensure_object(dict)
    # A flag given on the group stays on for the subcommand.
    root.obj["DEBUG"] = value or root.obj.get("DEBUG", False)
    configure_logging(root.obj["DEBUG"])


def _set_config(ctx: click.Context, param, value: Optional[str]) -> None:
    if value is None:
        return
    root = ctx.find_root()
    root.ensure_object(dict)
    root.obj["CONFIG"] = Path(value)


debug_option = click.option(
    "--debug/--no-debug",
    is_eager=True,
    expose_value=False,
    callback=_set_debug,
    help="Enable debug mode",
)

config_option = click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    is_eager=True,
    expose_value=False,
    callback=_set_config,
    help="Path to a weightdag.cfg file.",
    envvar="WEIGHTDAG_CONFIG",
)


def common_options(cmd):
    """Decorator adding --debug and --config to a command function"""

    @debug_option
    @config_option
    @wraps(cmd)
    def wrapper(*args, **kwargs):
        return cmd(*args, **kwargs)

    return wrapper


def dag_options(ctx: click.Context) -> DAGOptions:
    """Resolve DAGOptions from the --config file, or the default config location."""
    root = ctx.find_root()
    obj = root.obj or {}
    try:
        return load_options(obj.get("CONFIG"))
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
