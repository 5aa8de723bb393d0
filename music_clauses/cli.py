"""Command-line interface for music-clauses."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from music_clauses import __version__
from music_clauses.config import Config, load_config
from music_clauses.exceptions import ConfigError
from music_clauses.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/music-clauses/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="music-clauses")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """music-clauses: Build SQL filter clauses for multi-value music metadata.

    Artists, genres and similar fields are stored as several values packed
    into one text column. These commands build the WHERE clauses that
    search such columns, and decode or encode the packed values.

    Examples:

        # IN clause from a list of genres
        music-clauses clause in Genre Rock Jazz

        # Whole-item artist search across two columns
        music-clauses clause like artists --column2 album_artists --whole-items Metallica

        # Show a packed column value
        music-clauses multivalue display '¤Muse¤¤Queen¤'
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet

    set_verbosity(verbose=verbose, debug=debug)
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None
    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
    except ConfigError as e:
        error(str(e), hint="Fix the file or recreate it with: music-clauses init-config --force")
        ctx.exit(1)
        return

    app_ctx.config = loaded_config

    if not disable_color and not loaded_config.colored_output:
        set_color(False)

    # The missing-config warning is noise for one-shot clause commands.
    if verbose or debug:
        for warn in warnings:
            warning(warn)


def register_commands() -> None:
    """Register all commands from the commands package."""
    from music_clauses.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
