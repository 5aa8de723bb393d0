"""CLI subcommands. Every public module exposing a click ``cli`` is registered."""

from __future__ import annotations

import importlib
import pkgutil
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Iterator


def discover_commands() -> Iterator[click.Command]:
    """Yield the ``cli`` command of each public submodule, sorted by name."""
    package = importlib.import_module(__name__)
    names = sorted(
        info.name
        for info in pkgutil.iter_modules(package.__path__)
        if not info.name.startswith("_")
    )
    for name in names:
        command = getattr(importlib.import_module(f"{__name__}.{name}"), "cli", None)
        if isinstance(command, click.Command):
            yield command
