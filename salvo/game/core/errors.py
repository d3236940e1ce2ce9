"""Game error taxonomy."""

from __future__ import annotations


class SalvoError(Exception):
    """Base class for all game errors."""


class UserInputError(SalvoError):
    """Bad player input; recovered by prompting again."""

    message = "Invalid input."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class CoordinateParseError(UserInputError):
    """Shot text could not be turned into a coordinate."""

    message = "Unknown coordinate parsing error."


class CoordinateFormatError(CoordinateParseError):
    message = "Invalid coordinate format. Use LetterNumber (e.g., A5, J10)."


class ColumnRangeError(CoordinateParseError):
    message = "Column out of range. Must be A-J."


class RowNotNumberError(CoordinateParseError):
    message = "Row must be a number."


class RowRangeError(CoordinateParseError):
    message = "Row out of range. Must be 1-10."


class InvalidInitialsError(UserInputError):
    message = "Initials must be exactly 3 characters."


class RedundantShotError(SalvoError):
    """Shot at a cell whose result is already known."""

    def __init__(self, coordinate_text: str, marker: str) -> None:
        super().__init__(
            f"You've already conclusively fired at {coordinate_text} ({marker}). "
            "Try a different spot."
        )
        self.coordinate_text = coordinate_text
        self.marker = marker


class PersistenceError(SalvoError):
    """Save slot or score file I/O failed."""


class NoSaveError(PersistenceError):
    """The save slot is empty."""


class CorruptSaveError(PersistenceError):
    """The save slot holds a record that cannot be decoded."""


class InvalidSessionState(SalvoError):
    """Operation called in a session state that does not allow it."""
