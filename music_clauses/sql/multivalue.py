"""Multi-value column encoding.

Several logical values (artists, genres, ...) are packed into one text
column. Each item is wrapped on both sides by :data:`TRIM_DELIMITER`, so
adjacent items meet at :data:`VALUE_DELIMITER`::

    ["Muse", "Queen"]  <->  "¤Muse¤¤Queen¤"

The delimiter characters are part of the persisted format and must not
change. Items whose text contains the delimiter character do not decode
reliably.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

TRIM_DELIMITER = "¤"
VALUE_DELIMITER = TRIM_DELIMITER * 2

DISPLAY_SEPARATOR = ", "


def split(column_multi_value: str) -> list[str]:
    """Split a stored value on the value delimiter.

    Segments keep their outer trim delimiters. Splitting the empty string
    yields ``[""]``.
    """
    return column_multi_value.split(VALUE_DELIMITER)


def trim(column_value: str) -> str:
    """Strip leading and trailing trim delimiters from one segment."""
    return column_value.strip(TRIM_DELIMITER)


def split_and_trim(column_multi_value: str) -> list[str]:
    """Decode a stored multi-value string into its items."""
    return [trim(segment) for segment in split(column_multi_value)]


def to_display_string(column_multi_value: str) -> str:
    """Render a stored value for display, joining items with ``", "``.

    Text without a value delimiter is only trimmed, so applying this to
    its own output returns the output unchanged.
    """
    if VALUE_DELIMITER in column_multi_value:
        return DISPLAY_SEPARATOR.join(split_and_trim(column_multi_value))
    return trim(column_multi_value)


def encode(items: Iterable[str]) -> str:
    """Pack *items* into the stored form. An empty list encodes to ``""``."""
    return "".join(f"{TRIM_DELIMITER}{item}{TRIM_DELIMITER}" for item in items)


@dataclass(frozen=True)
class MultiValue(Sequence[str]):
    """An ordered, immutable list of items stored in a single column."""

    items: tuple[str, ...] = ()

    @classmethod
    def from_column(cls, column_multi_value: str | None) -> MultiValue:
        """Decode a stored value. ``None`` and ``""`` give an empty list."""
        if not column_multi_value:
            return cls()
        return cls(tuple(split_and_trim(column_multi_value)))

    @classmethod
    def of(cls, items: Iterable[str]) -> MultiValue:
        return cls(tuple(items))

    def to_column(self) -> str:
        return encode(self.items)

    def display(self) -> str:
        return DISPLAY_SEPARATOR.join(self.items)

    def __getitem__(self, index):  # type: ignore[override]
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __str__(self) -> str:
        return self.display()
