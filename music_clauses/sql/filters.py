"""Storage-boundary helpers that assemble WHERE bodies from text clauses.

These wrap the builders in :mod:`music_clauses.sql.clauses` and return
``None`` instead of a vacuous clause, so callers never embed ``IN ()`` or
an empty disjunction into a query.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from music_clauses.sql.clauses import create_in_clause, create_or_like_clause, is_vacuous_clause
from music_clauses.sql.multivalue import TRIM_DELIMITER

log = logging.getLogger(__name__)


def in_filter(column_name: str, items: Iterable[str | None]) -> str | None:
    """Build an IN clause, or return None when *items* is empty."""
    clause = create_in_clause(column_name, list(items))
    if is_vacuous_clause(clause):
        log.debug("Skipping empty IN filter on %s", column_name)
        return None
    return clause


def multi_value_filter(
    column_name1: str,
    items: Iterable[str | None],
    column_name2: str | None = None,
    *,
    whole_items: bool = True,
) -> str | None:
    """Build a LIKE disjunction over one or two multi-value columns.

    Args:
        column_name1: Primary column, e.g. ``"artists"``.
        items: Search terms. Empty strings match NULL/empty columns.
        column_name2: Optional secondary column, e.g. ``"album_artists"``.
        whole_items: Match whole packed items only by wrapping each term in
            the trim delimiter. Set to False for plain substring search.

    Returns:
        The clause text, or None when *items* is empty.
    """
    delimiter = TRIM_DELIMITER if whole_items else ""
    clause = create_or_like_clause(column_name1, column_name2, list(items), delimiter)
    if is_vacuous_clause(clause):
        log.debug("Skipping empty LIKE filter on %s", column_name1)
        return None
    return clause


def combine_filters(*clauses: str | None) -> str | None:
    """AND the non-None clauses together, or return None if there are none."""
    parts = [clause.strip() for clause in clauses if clause is not None]
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return " AND ".join(f"({part})" for part in parts)
