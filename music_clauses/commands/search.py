"""Search a track library by artists, genres and paths."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape
from sqlalchemy.exc import SQLAlchemyError

from music_clauses.cli import Context, pass_context
from music_clauses.db.queries import search_tracks
from music_clauses.db.session import get_session
from music_clauses.exceptions import DatabaseError
from music_clauses.utils.output import console, create_table, error, info, verbose

EXIT_USAGE_ERROR = 1
EXIT_DB_ERROR = 2


@click.command("search")
@click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help="SQLite track library (default: paths.database from config)",
)
@click.option("--artist", "-a", "artists", multiple=True, help="Artist term (repeatable).")
@click.option("--genre", "-g", "genres", multiple=True, help="Genre term (repeatable).")
@click.option("--path", "-p", "paths", multiple=True, help="Exact track path (repeatable).")
@click.option(
    "--whole-items/--substring",
    default=None,
    help="Match whole packed items or any substring (default: search.whole_items).",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
@pass_context
def cli(
    ctx: Context,
    db_path: Path | None,
    artists: tuple[str, ...],
    genres: tuple[str, ...],
    paths: tuple[str, ...],
    whole_items: bool | None,
    as_json: bool,
) -> None:
    """Search tracks whose artists or genres match the given terms.

    Artist terms also match album artists. Several terms of one kind are
    OR-ed; different kinds are AND-ed. Pass an empty string to find tracks
    with no value, e.g. --genre "".

    Examples:

    \b
      music-clauses search --db library.db --artist Metallica
      music-clauses search --db library.db --genre Rock --genre Jazz --substring
    """
    config = ctx.config
    if db_path is None and config is not None:
        db_path = config.database
    if db_path is None:
        error("No track database given", hint="Pass --db or set paths.database in the config")
        raise SystemExit(EXIT_USAGE_ERROR)

    if whole_items is None:
        whole_items = config.whole_items if config is not None else True

    try:
        with get_session(db_path) as session:
            tracks = search_tracks(
                session,
                artists=list(artists) if artists else None,
                genres=list(genres) if genres else None,
                paths=list(paths) if paths else None,
                whole_items=whole_items,
            )
            rows = [
                {
                    "path": track.path,
                    "title": track.title,
                    "album": track.album,
                    "artists": list(track.artists),
                    "album_artists": list(track.album_artists),
                    "genres": list(track.genres),
                }
                for track in tracks
            ]
    except DatabaseError as e:
        error(str(e))
        raise SystemExit(EXIT_DB_ERROR)
    except SQLAlchemyError as e:
        error(f"Query failed: {escape(str(e))}", hint="Is this a music-clauses track database?")
        raise SystemExit(EXIT_DB_ERROR)

    verbose(f"{len(rows)} track(s) matched")

    if as_json:
        click.echo(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    if not rows:
        if not ctx.quiet:
            info("No matching tracks.")
        return

    table = create_table(title=f"{len(rows)} track(s)")
    table.add_column("Artists", style="bold")
    table.add_column("Title", style="italic")
    table.add_column("Album")
    table.add_column("Genres")
    table.add_column("Path", style="path")
    for row in rows:
        table.add_row(
            ", ".join(row["artists"]),
            row["title"] or "",
            row["album"] or "",
            ", ".join(row["genres"]),
            row["path"],
        )
    console.print(table)
