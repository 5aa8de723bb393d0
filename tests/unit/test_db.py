"""Unit tests for the track library models, column type and queries."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from music_clauses.db.models import Track
from music_clauses.db.queries import add_track, find_tracks, search_tracks
from music_clauses.db.session import get_engine, get_session
from music_clauses.exceptions import DatabaseNotFoundError
from music_clauses.sql.ast_nodes import LikeAny
from music_clauses.sql.multivalue import TRIM_DELIMITER


def _paths(tracks: list[Track]) -> list[str]:
    return [track.path for track in tracks]


class TestMultiValueType:
    def test_stored_form(self, session: Session) -> None:
        raw = session.execute(text("SELECT artists FROM tracks WHERE path = 'b.mp3'")).scalar()
        assert raw == "¤Metallica¤¤Lou Reed¤"

    def test_empty_list_stored_as_empty_string(self, session: Session) -> None:
        raw = session.execute(text("SELECT genres FROM tracks WHERE path = 'd.mp3'")).scalar()
        assert raw == ""

    def test_loads_as_list(self, session: Session) -> None:
        session.expire_all()
        track = session.query(Track).filter(Track.path == "b.mp3").one()
        assert track.artists == ["Metallica", "Lou Reed"]
        assert track.genres == ["Rock", "Art Rock"]

    def test_null_loads_as_empty_list(self, session: Session) -> None:
        session.execute(text("UPDATE tracks SET genres = NULL WHERE path = 'a.mp3'"))
        session.expire_all()
        track = session.query(Track).filter(Track.path == "a.mp3").one()
        assert track.genres == []

    def test_display_properties(self, session: Session) -> None:
        track = session.query(Track).filter(Track.path == "b.mp3").one()
        assert track.artists_display == "Metallica, Lou Reed"
        assert track.genres_display == "Rock, Art Rock"


class TestSearchTracks:
    def test_no_filters_returns_all(self, session: Session) -> None:
        assert len(search_tracks(session)) == 6

    def test_whole_item_artist(self, session: Session) -> None:
        assert _paths(search_tracks(session, artists=["Metallica"])) == ["a.mp3", "b.mp3"]

    def test_substring_artist(self, session: Session) -> None:
        result = search_tracks(session, artists=["metallica"], whole_items=False)
        assert _paths(result) == ["a.mp3", "b.mp3", "c.mp3"]

    def test_album_artist_is_searched(self, session: Session) -> None:
        assert _paths(search_tracks(session, artists=["various artists"])) == ["e.mp3"]

    def test_empty_term_matches_tracks_without_artists(self, session: Session) -> None:
        assert _paths(search_tracks(session, artists=[""])) == ["d.mp3"]

    def test_quote_in_term(self, session: Session) -> None:
        assert _paths(search_tracks(session, artists=["O'Brien"])) == ["e.mp3"]

    def test_colon_in_term(self, session: Session) -> None:
        assert _paths(search_tracks(session, artists=["Mr: Colon"])) == ["g.mp3"]

    def test_several_genres_are_ored(self, session: Session) -> None:
        assert _paths(search_tracks(session, genres=["Jazz", "Metal"])) == ["a.mp3", "e.mp3"]

    def test_artist_and_genre_are_anded(self, session: Session) -> None:
        result = search_tracks(session, artists=["Metallica"], genres=["Metal"])
        assert _paths(result) == ["a.mp3"]

    def test_paths(self, session: Session) -> None:
        assert _paths(search_tracks(session, paths=["e.mp3", "a.mp3"])) == ["a.mp3", "e.mp3"]

    @pytest.mark.parametrize("kwargs", [{"artists": []}, {"genres": []}, {"paths": []}])
    def test_empty_list_matches_nothing(self, session: Session, kwargs: dict) -> None:
        assert search_tracks(session, **kwargs) == []

    def test_text_like_treats_percent_as_wildcard(self, session: Session) -> None:
        result = search_tracks(session, genres=["100%"], whole_items=False)
        assert _paths(result) == ["c.mp3", "g.mp3"]


class TestFindTracks:
    def test_matches_text_search(self, session: Session) -> None:
        clause = LikeAny(("artists", "album_artists"), ("Metallica",), TRIM_DELIMITER)
        assert _paths(find_tracks(session, clause)) == _paths(
            search_tracks(session, artists=["Metallica"])
        )

    def test_percent_is_literal(self, session: Session) -> None:
        assert _paths(find_tracks(session, LikeAny(("genres",), ("100%",)))) == ["g.mp3"]


class TestSession:
    def test_missing_database(self, temp_dir: Path) -> None:
        with pytest.raises(DatabaseNotFoundError):
            get_engine(temp_dir / "missing.db")

    def test_create_and_reopen(self, temp_dir: Path) -> None:
        db_path = temp_dir / "new.db"
        with get_session(db_path, create=True) as db_session:
            add_track(db_session, "x.flac", artists=["Björk"], genres=["Electronic"])
        with get_session(db_path) as db_session:
            track = db_session.query(Track).one()
            assert track.artists == ["Björk"]

    def test_rollback_on_error(self, temp_dir: Path) -> None:
        db_path = temp_dir / "rollback.db"
        with get_session(db_path, create=True):
            pass
        with pytest.raises(RuntimeError):
            with get_session(db_path) as db_session:
                add_track(db_session, "y.flac")
                raise RuntimeError("boom")
        with get_session(db_path) as db_session:
            assert db_session.query(Track).count() == 0
