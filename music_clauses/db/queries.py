"""Query functions for the track library."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from music_clauses.db.models import Track
from music_clauses.sql.ast_nodes import Clause
from music_clauses.sql.compiler import to_expression
from music_clauses.sql.filters import combine_filters, in_filter, multi_value_filter

log = logging.getLogger(__name__)


def _escape_text_binds(where: str) -> str:
    # text() treats ":name" as a bind parameter, even inside string literals.
    return where.replace(":", "\\:")


def search_tracks(
    session: Session,
    *,
    artists: Sequence[str] | None = None,
    genres: Sequence[str] | None = None,
    paths: Sequence[str] | None = None,
    whole_items: bool = True,
) -> list[Track]:
    """Search tracks with textual filter clauses.

    Artists are matched against both ``artists`` and ``album_artists``.
    A filter argument of None is ignored; an empty list matches nothing
    and short-circuits without querying.

    Args:
        session: Active database session.
        artists: Artist terms. An empty string matches tracks without artists.
        genres: Genre terms. An empty string matches tracks without genres.
        paths: Exact track paths.
        whole_items: Match whole multi-value items instead of substrings.

    Returns:
        Matching tracks ordered by path.
    """
    clauses: list[str] = []
    for column_name1, column_name2, items in (
        ("artists", "album_artists", artists),
        ("genres", None, genres),
    ):
        if items is None:
            continue
        clause = multi_value_filter(column_name1, items, column_name2, whole_items=whole_items)
        if clause is None:
            log.debug("Empty %s filter matches nothing", column_name1)
            return []
        clauses.append(clause)

    if paths is not None:
        clause = in_filter("path", paths)
        if clause is None:
            log.debug("Empty path filter matches nothing")
            return []
        clauses.append(clause)

    stmt = select(Track)
    where = combine_filters(*clauses)
    if where is not None:
        log.debug("Track search WHERE %s", where)
        stmt = stmt.where(text(_escape_text_binds(where)))

    return list(session.scalars(stmt.order_by(Track.path)))


def find_tracks(session: Session, clause: Clause) -> list[Track]:
    """Search tracks with a clause tree compiled to bound parameters."""
    table = Track.__table__
    stmt = select(Track).where(to_expression(clause, table.c.__getitem__)).order_by(Track.path)
    return list(session.scalars(stmt))


def add_track(
    session: Session,
    path: str,
    *,
    title: str | None = None,
    album: str | None = None,
    artists: Sequence[str] = (),
    album_artists: Sequence[str] = (),
    genres: Sequence[str] = (),
) -> Track:
    """Insert a track and flush so its id is assigned."""
    track = Track(
        path=path,
        title=title,
        album=album,
        artists=list(artists),
        album_artists=list(album_artists),
        genres=list(genres),
    )
    session.add(track)
    session.flush()
    return track
