"""Build SQL filter clauses from the command line."""

from __future__ import annotations

import json

import click

from music_clauses.cli import Context, pass_context
from music_clauses.exceptions import ClauseCompileError
from music_clauses.sql.ast_nodes import Clause, In, LikeAny
from music_clauses.sql.clauses import create_in_clause, create_or_like_clause, is_vacuous_clause
from music_clauses.sql.compiler import compile_clause
from music_clauses.sql.multivalue import TRIM_DELIMITER
from music_clauses.utils.output import error, print_raw, warning

EXIT_USAGE_ERROR = 1


def _resolve_delimiter(delimiter: str | None, whole_items: bool) -> str:
    if delimiter is not None and whole_items:
        raise click.UsageError("--delimiter and --whole-items are mutually exclusive")
    if whole_items:
        return TRIM_DELIMITER
    return delimiter or ""


def _warn_if_vacuous(ctx: Context, clause: str) -> None:
    if not ctx.quiet and is_vacuous_clause(clause):
        warning("No items given: this clause matches no rows and must not be embedded as-is")


@click.group("clause")
def cli() -> None:
    """Build WHERE clause fragments from lists of values.

    Values are escaped by doubling single quotes. Column names are used
    verbatim and must come from a trusted source.
    """


@cli.command("in")
@click.argument("column")
@click.argument("items", nargs=-1)
@pass_context
def in_cmd(ctx: Context, column: str, items: tuple[str, ...]) -> None:
    """Print COLUMN IN ('item', ...).

    Examples:

    \b
      music-clauses clause in Genre Rock Jazz
      Genre IN ('Rock','Jazz')
    """
    clause = create_in_clause(column, list(items))
    _warn_if_vacuous(ctx, clause)
    print_raw(clause, style="sql")


@cli.command("like")
@click.argument("column")
@click.argument("items", nargs=-1)
@click.option("--column2", default=None, help="Secondary column searched with OR.")
@click.option(
    "--delimiter",
    "-d",
    default=None,
    help="String wrapped around each term inside the LIKE pattern.",
)
@click.option(
    "--whole-items",
    "-w",
    is_flag=True,
    default=False,
    help="Only match whole packed items (uses the multi-value delimiter).",
)
@pass_context
def like_cmd(
    ctx: Context,
    column: str,
    items: tuple[str, ...],
    column2: str | None,
    delimiter: str | None,
    whole_items: bool,
) -> None:
    """Print a disjunction of case-insensitive LIKE matches.

    Pass an empty string ("") as an item to match NULL or empty columns.

    Examples:

    \b
      music-clauses clause like Artist --whole-items Metallica
      music-clauses clause like artists --column2 album_artists Muse ""
    """
    clause = create_or_like_clause(
        column, column2, list(items), _resolve_delimiter(delimiter, whole_items)
    )
    _warn_if_vacuous(ctx, clause)
    print_raw(clause.rstrip("\n"), style="sql")


@cli.command("compile")
@click.option(
    "--column",
    "columns",
    multiple=True,
    required=True,
    help="Column to search. Repeat for several columns.",
)
@click.option("--term", "terms", multiple=True, help="Search term. Repeat for several terms.")
@click.option(
    "--in",
    "use_in",
    is_flag=True,
    default=False,
    help="Exact IN match on the first column instead of LIKE.",
)
@click.option("--delimiter", "-d", default=None, help="String wrapped around each term.")
@click.option("--whole-items", "-w", is_flag=True, default=False, help="Match whole items.")
@click.pass_context
def compile_cmd(
    click_ctx: click.Context,
    columns: tuple[str, ...],
    terms: tuple[str, ...],
    use_in: bool,
    delimiter: str | None,
    whole_items: bool,
) -> None:
    """Print parameterized SQL and its parameters as JSON.

    Unlike the textual builders, values are never inlined, and an empty
    term list compiles to a constant false expression.

    Examples:

    \b
      music-clauses clause compile --column artists --term "O'Brien" -w
    """
    node: Clause
    if use_in:
        node = In(columns[0], tuple(terms))
    else:
        node = LikeAny(columns, tuple(terms), _resolve_delimiter(delimiter, whole_items))

    try:
        compiled = compile_clause(node)
    except ClauseCompileError as e:
        error(str(e))
        click_ctx.exit(EXIT_USAGE_ERROR)
        return

    print_raw(
        json.dumps({"sql": compiled.sql, "params": compiled.params}, ensure_ascii=False, indent=2)
    )
