"""Unit tests for compiling clause trees to parameterized SQL."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from music_clauses.db.models import Track
from music_clauses.exceptions import ClauseCompileError
from music_clauses.sql.ast_nodes import And, Equals, In, IsEmpty, LikeAny, Or
from music_clauses.sql.compiler import compile_clause, escape_like, to_expression
from music_clauses.sql.multivalue import TRIM_DELIMITER


def _paths(session: Session, clause) -> list[str]:
    """Run a compiled clause through the raw DB-API and return matching paths."""
    compiled = compile_clause(clause)
    result = session.connection().exec_driver_sql(
        f"SELECT path FROM tracks WHERE {compiled.sql} ORDER BY path", tuple(compiled.params)
    )
    return [row[0] for row in result]


class TestEscapeLike:
    def test_wildcards(self) -> None:
        assert escape_like("100%_x") == "100\\%\\_x"

    def test_escape_char_doubled(self) -> None:
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain(self) -> None:
        assert escape_like("rock") == "rock"


class TestCompileClause:
    def test_values_are_bound_not_inlined(self) -> None:
        compiled = compile_clause(LikeAny(("artists",), ("O'Brien",), TRIM_DELIMITER))
        assert "brien" not in compiled.sql.lower()
        assert "?" in compiled.sql
        assert compiled.params == ["%¤o'brien¤%"]

    def test_in_params_in_order(self) -> None:
        compiled = compile_clause(In("genre", ("Rock", "Jazz")))
        assert "IN" in compiled.sql.upper()
        assert compiled.params == ["Rock", "Jazz"]

    def test_like_any_params_per_column(self) -> None:
        compiled = compile_clause(LikeAny(("a", "b"), ("x",)))
        assert compiled.params == ["%x%", "%x%"]

    def test_equals_lowers_value(self) -> None:
        compiled = compile_clause(Equals("title", "ONE"))
        assert compiled.params == ["one"]
        assert "lower" in compiled.sql.lower()

    def test_empty_in_has_no_params(self) -> None:
        compiled = compile_clause(In("genre", ()))
        assert compiled.params == []

    def test_unknown_node(self) -> None:
        with pytest.raises(ClauseCompileError):
            to_expression("artists = 'x'")  # type: ignore[arg-type]

    def test_like_any_without_columns(self) -> None:
        with pytest.raises(ClauseCompileError):
            compile_clause(LikeAny((), ("x",)))


class TestCompiledClauseExecution:
    def test_whole_item_artist_search(self, session: Session) -> None:
        clause = LikeAny(("artists", "album_artists"), ("Metallica",), TRIM_DELIMITER)
        assert _paths(session, clause) == ["a.mp3", "b.mp3"]

    def test_substring_artist_search(self, session: Session) -> None:
        clause = LikeAny(("artists",), ("metallica",))
        assert _paths(session, clause) == ["a.mp3", "b.mp3", "c.mp3"]

    def test_empty_term_matches_empty_columns(self, session: Session) -> None:
        clause = LikeAny(("artists", "album_artists"), ("",))
        assert _paths(session, clause) == ["d.mp3"]

    def test_empty_term_list_matches_nothing(self, session: Session) -> None:
        assert _paths(session, LikeAny(("artists",), ())) == []

    def test_percent_matches_literally(self, session: Session) -> None:
        assert _paths(session, LikeAny(("genres",), ("100%",))) == ["g.mp3"]

    def test_quote_in_term(self, session: Session) -> None:
        assert _paths(session, LikeAny(("artists",), ("o'brien",), TRIM_DELIMITER)) == ["e.mp3"]

    def test_in(self, session: Session) -> None:
        assert _paths(session, In("path", ("a.mp3", "e.mp3", "zzz.mp3"))) == ["a.mp3", "e.mp3"]

    def test_empty_in_matches_nothing(self, session: Session) -> None:
        assert _paths(session, In("path", ())) == []

    def test_equals_ignores_case(self, session: Session) -> None:
        assert _paths(session, Equals("title", "ONE")) == ["a.mp3"]

    def test_is_empty(self, session: Session) -> None:
        assert _paths(session, IsEmpty("title")) == ["d.mp3"]

    def test_or(self, session: Session) -> None:
        clause = Or((Equals("title", "one"), IsEmpty("title")))
        assert _paths(session, clause) == ["a.mp3", "d.mp3"]

    def test_and(self, session: Session) -> None:
        clause = And(
            (
                LikeAny(("artists",), ("metallica",), TRIM_DELIMITER),
                LikeAny(("genres",), ("rock",), TRIM_DELIMITER),
            )
        )
        assert _paths(session, clause) == ["b.mp3"]

    def test_empty_and_matches_everything(self, session: Session) -> None:
        assert len(_paths(session, And())) == 6

    def test_empty_or_matches_nothing(self, session: Session) -> None:
        assert _paths(session, Or()) == []


class TestToExpressionWithTable:
    def test_resolves_against_table_columns(self, session: Session) -> None:
        table = Track.__table__
        expression = to_expression(Equals("path", "A.MP3"), table.c.__getitem__)
        rows = session.query(Track).filter(expression).all()
        assert [track.path for track in rows] == ["a.mp3"]
