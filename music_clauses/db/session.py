"""Database session management for the track library."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import sqlalchemy.engine
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from music_clauses.db.models import Base
from music_clauses.exceptions import DatabaseConnectionError, DatabaseNotFoundError

log = logging.getLogger(__name__)


def get_engine(db_path: Path, *, create: bool = False) -> sqlalchemy.engine.Engine:
    """Create SQLAlchemy engine for the track library.

    Args:
        db_path: Path to the SQLite file.
        create: Create the file and schema if missing.

    Raises:
        DatabaseNotFoundError: If the file doesn't exist and *create* is False.
    """
    db_path = db_path.expanduser().resolve()

    if not create and not db_path.exists():
        raise DatabaseNotFoundError(db_path)

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={
            "timeout": 30,
            "check_same_thread": False,
        },
    )
    if create:
        Base.metadata.create_all(engine)
        log.debug("Ensured track schema in %s", db_path)
    return engine


@contextmanager
def get_session(db_path: Path, *, create: bool = False) -> Generator[Session, None, None]:
    """Open a session on the track library.

    Commits on success, rolls back on error and always closes.

    Raises:
        DatabaseNotFoundError: If the database file doesn't exist.
        DatabaseConnectionError: If connection fails.

    Example:
        with get_session(Path("~/Music/library.db")) as session:
            tracks = search_tracks(session, artists=["Muse"])
    """
    try:
        engine = get_engine(db_path, create=create)
    except DatabaseNotFoundError:
        raise
    except SQLAlchemyError as e:
        raise DatabaseConnectionError(f"Failed to connect: {e}") from e

    session_factory = sessionmaker(bind=engine)
    session = session_factory()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
