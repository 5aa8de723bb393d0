"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from music_clauses.db.models import Base
from music_clauses.db.queries import add_track
from music_clauses.db.session import get_session

if TYPE_CHECKING:
    from collections.abc import Generator


# ---------------------------------------------------------------------------
# Library contents
# ---------------------------------------------------------------------------

TRACKS = [
    {
        "path": "a.mp3",
        "title": "One",
        "album": "...And Justice for All",
        "artists": ["Metallica"],
        "album_artists": ["Metallica"],
        "genres": ["Metal"],
    },
    {
        "path": "b.mp3",
        "title": "The View",
        "album": "Lulu",
        "artists": ["Metallica", "Lou Reed"],
        "album_artists": ["Lou Reed & Metallica"],
        "genres": ["Rock", "Art Rock"],
    },
    {
        "path": "c.mp3",
        "title": "Cats",
        "album": "Whiskers",
        "artists": ["Metallicats"],
        "album_artists": [],
        "genres": ["Punk", "1000 Pure"],
    },
    {
        "path": "d.mp3",
        "title": None,
        "album": None,
        "artists": [],
        "album_artists": [],
        "genres": [],
    },
    {
        "path": "e.mp3",
        "title": "Danny Boy",
        "album": "Irish Songs",
        "artists": ["O'Brien"],
        "album_artists": ["Various Artists"],
        "genres": ["Jazz"],
    },
    {
        "path": "g.mp3",
        "title": "Colon",
        "album": "Punctuation",
        "artists": ["Mr: Colon"],
        "album_artists": ["Mr: Colon"],
        "genres": ["Electronic", "100% Pure"],
    },
]


def populate_tracks(session: Session) -> None:
    """Insert the TRACKS fixture rows."""
    for row in TRACKS:
        add_track(session, **row)
    session.commit()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[paths]
database = "/tmp/music-clauses-test.db"

[display]
colored_output = false

[search]
whole_items = false
""")
    return config_path


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """In-memory track library populated with TRACKS."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    db_session = sessionmaker(bind=engine)()
    populate_tracks(db_session)
    try:
        yield db_session
    finally:
        db_session.close()
        engine.dispose()


@pytest.fixture
def track_db(temp_dir: Path) -> Path:
    """On-disk track library populated with TRACKS."""
    db_path = temp_dir / "library.db"
    with get_session(db_path, create=True) as db_session:
        populate_tracks(db_session)
    return db_path
