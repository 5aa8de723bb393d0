"""Initialize configuration file for music-clauses."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from music_clauses.config import get_default_config_path
from music_clauses.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("music_clauses").joinpath("config.example.toml").read_text(
        encoding="utf-8"
    )


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/music-clauses/config.toml)",
)
def cli(force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    Examples:

    \b
      # Create config at default location
      music-clauses init-config

    \b
      # Overwrite a config at a custom location
      music-clauses init-config --output ./config.toml --force
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(_load_example_config(), encoding="utf-8")
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {config_path}")
    info("Set paths.database to search your track library.")
