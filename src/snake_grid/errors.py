"""Exceptions raised by the board store and simulation engine."""

from __future__ import annotations


class SnakeGridError(Exception):
    """Base class for all snake_grid errors."""


class OutOfBoundsError(SnakeGridError, IndexError):
    """A coordinate outside the board was read or written."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Coordinate ({row}, {col}) is outside the board.")
        self.row = row
        self.col = col


class MalformedBoardError(SnakeGridError, ValueError):
    """A tail glyph could not be traced to a head glyph."""

    def __init__(self, tail: tuple[int, int], reason: str) -> None:
        super().__init__(
            f"Snake with tail at {tail} has no reachable head: {reason}."
        )
        self.tail = tail


class MissingInputFileError(SnakeGridError, FileNotFoundError):
    """The board file named on input does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} does not exist")
        self.path = path
