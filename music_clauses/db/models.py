"""SQLAlchemy ORM models for the track library."""

from __future__ import annotations

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from music_clauses.db.types import MultiValueType
from music_clauses.sql.multivalue import DISPLAY_SEPARATOR


class Base(DeclarativeBase):
    """Base class for library ORM models."""

    pass


class Track(Base):
    """A library track. Artists, album artists and genres are multi-valued."""

    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    path: Mapped[str] = mapped_column(Text, unique=True)
    title: Mapped[str | None] = mapped_column(Text)
    album: Mapped[str | None] = mapped_column(Text)
    artists: Mapped[list[str]] = mapped_column(MultiValueType, default=list, nullable=True)
    album_artists: Mapped[list[str]] = mapped_column(MultiValueType, default=list, nullable=True)
    genres: Mapped[list[str]] = mapped_column(MultiValueType, default=list, nullable=True)

    __table_args__ = (Index("ix_tracks_album", "album"),)

    @property
    def artists_display(self) -> str:
        return DISPLAY_SEPARATOR.join(self.artists or [])

    @property
    def genres_display(self) -> str:
        return DISPLAY_SEPARATOR.join(self.genres or [])

    def __repr__(self) -> str:
        return f"<Track(id={self.id}, path='{self.path}')>"
