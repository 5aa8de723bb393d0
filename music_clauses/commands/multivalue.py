"""Decode and encode packed multi-value column text."""

from __future__ import annotations

import json

import click

from music_clauses.sql.multivalue import encode, split, split_and_trim, to_display_string
from music_clauses.utils.output import print_raw


@click.group("multivalue")
def cli() -> None:
    """Inspect values stored as '¤item¤¤item¤' in one column."""


@cli.command("split")
@click.argument("value")
def split_cmd(value: str) -> None:
    """Print the raw segments of VALUE as a JSON list (delimiters kept)."""
    print_raw(json.dumps(split(value), ensure_ascii=False))


@cli.command("decode")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print a JSON list.")
def decode_cmd(value: str, as_json: bool) -> None:
    """Print the items packed in VALUE, one per line."""
    items = split_and_trim(value)
    if as_json:
        print_raw(json.dumps(items, ensure_ascii=False))
        return
    for item in items:
        print_raw(item)


@cli.command("display")
@click.argument("value")
def display_cmd(value: str) -> None:
    """Print VALUE joined with ', ' for display."""
    print_raw(to_display_string(value))


@cli.command("encode")
@click.argument("items", nargs=-1)
def encode_cmd(items: tuple[str, ...]) -> None:
    """Pack ITEMS into the stored column form."""
    print_raw(encode(items))
