"""Conversion between typed shot text ("A5") and board coordinates.

Letters name columns (``A`` is column 0) and the 1-based number names the row,
so ``"A5"`` is ``Coord(row=4, col=0)``.
"""

from __future__ import annotations

from salvo.game.core.errors import (
    ColumnRangeError,
    CoordinateFormatError,
    RowNotNumberError,
    RowRangeError,
)
from salvo.game.core.models import BOARD_SIZE, Coord


def parse_coordinate(text: str, size: int = BOARD_SIZE) -> Coord:
    """Parse shot text, raising a ``CoordinateParseError`` subclass on failure."""
    cleaned = text.strip()
    if not 2 <= len(cleaned) <= 3:
        raise CoordinateFormatError()

    letter = cleaned[0]
    # single ASCII letter only; upper() can widen others ("ß" -> "SS")
    if not (letter.isascii() and letter.isalpha()):
        raise CoordinateFormatError()
    col = column_index(letter)
    if not 0 <= col < size:
        raise ColumnRangeError()

    digits = cleaned[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise RowNotNumberError()
    row_number = int(digits)
    if not 1 <= row_number <= size:
        raise RowRangeError()
    return Coord(row=row_number - 1, col=col)


def format_coordinate(coord: Coord) -> str:
    """Render a coordinate as letter plus 1-based row number."""
    return f"{column_letter(coord.col)}{coord.row + 1}"


def column_letter(col: int) -> str:
    if 0 <= col < 26:
        return chr(ord("A") + col)
    return "?"


def column_index(letter: str) -> int:
    return ord(letter.upper()) - ord("A")
