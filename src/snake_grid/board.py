"""Character-grid board store with text (de)serialization."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np

from snake_grid.errors import MissingInputFileError, OutOfBoundsError
from snake_grid.glyphs import (
    EMPTY,
    FRUIT,
    WALL,
    Direction,
    SegmentKind,
    glyph_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """A fixed board layout with a single straight snake."""

    rows: int
    cols: int
    fruit: tuple[int, int]
    tail: tuple[int, int]
    length: int
    direction: Direction

    def __post_init__(self) -> None:
        if self.length < 2:
            raise ValueError("Snake length must be at least 2.")

    @property
    def head(self) -> tuple[int, int]:
        dr, dc = self.direction.value
        steps = self.length - 1
        return self.tail[0] + dr * steps, self.tail[1] + dc * steps


# 18x20 walled board, fruit at (2, 9), snake "d>D" from (2, 2) to (2, 4).
DEFAULT_SCENARIO = Scenario(
    rows=18,
    cols=20,
    fruit=(2, 9),
    tail=(2, 2),
    length=3,
    direction=Direction.EAST,
)


def _strip_terminator(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class Board:
    """Mutable grid of single-character glyphs.

    Each row is a one-dimensional NumPy array of ``<U1`` strings. Rows
    loaded from text may differ in width; coordinates use (row, col)
    ordering and are always bounds-checked against the row they address.
    """

    def __init__(self, rows: Iterable[str] = ()) -> None:
        self._rows: list[np.ndarray] = [
            np.array(list(row), dtype="<U1") for row in rows
        ]

    @classmethod
    def blank(cls, height: int, width: int) -> Board:
        """Return a board with a wall ring around an empty interior."""
        if width < 3 or height < 3:
            raise ValueError("Board dimensions must be at least 3x3.")
        board = cls()
        for r in range(height):
            row = np.full(width, WALL if r in (0, height - 1) else EMPTY,
                          dtype="<U1")
            row[0] = row[-1] = WALL
            board._rows.append(row)
        return board

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    def width(self, row: int) -> int:
        """Return the logical width of *row*."""
        if not 0 <= row < len(self._rows):
            raise OutOfBoundsError(row, 0)
        return len(self._rows[row])

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether a coordinate addresses an existing cell."""
        return 0 <= row < len(self._rows) and 0 <= col < len(self._rows[row])

    def get(self, row: int, col: int) -> str:
        """Return the glyph at the given coordinate."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return str(self._rows[row][col])

    def set(self, row: int, col: int, glyph: str) -> None:
        """Overwrite the glyph at the given coordinate."""
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"Glyph must be a single character, got {glyph!r}.")
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        self._rows[row][col] = glyph

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return all empty cell coordinates in row-major order."""
        cells: list[tuple[int, int]] = []
        for r, row in enumerate(self._rows):
            cells.extend((r, c) for c in np.flatnonzero(row == EMPTY).tolist())
        return cells

    def count(self, glyphs: Iterable[str]) -> int:
        """Count cells holding any of *glyphs*."""
        wanted = list(glyphs)
        return sum(int(np.isin(row, wanted).sum()) for row in self._rows)

    def copy(self) -> Board:
        board = Board()
        board._rows = [row.copy() for row in self._rows]
        return board

    def serialize(self) -> str:
        """Return the board as text, one line-feed terminated line per row."""
        return "".join("".join(row.tolist()) + "\n" for row in self._rows)

    @classmethod
    def deserialize(cls, text: str) -> Board:
        """Parse *text* produced by :meth:`serialize` (or a hand-written board)."""
        return cls.read(io.StringIO(text))

    @classmethod
    def read(cls, stream: TextIO) -> Board:
        """Read rows from *stream* until it is exhausted.

        Lines may be of any length and need not share a width. Only the
        trailing line feed is stripped; a final line without one still
        becomes a row.
        """
        return cls(_strip_terminator(line) for line in stream)

    def write(self, stream: TextIO) -> None:
        stream.write(self.serialize())

    @classmethod
    def load(cls, path: str | Path) -> Board:
        """Load a board from a text file.

        Bytes that are not valid UTF-8 are kept as surrogate escapes so
        that :meth:`save` writes them back unchanged.
        """
        p = Path(path)
        if not p.is_file():
            raise MissingInputFileError(str(path))
        with p.open(
            encoding="utf-8", errors="surrogateescape", newline="\n",
        ) as fh:
            board = cls.read(fh)
        logger.info("Board loaded from %s (%d rows)", p, board.num_rows)
        return board

    def save(self, path: str | Path) -> None:
        """Write the board to a text file."""
        p = Path(path)
        with p.open(
            "w", encoding="utf-8", errors="surrogateescape", newline="\n",
        ) as fh:
            self.write(fh)
        logger.info("Board saved to %s", p)

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "num_rows": self.num_rows,
            "rows": ["".join(row.tolist()) for row in self._rows],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return len(self._rows) == len(other._rows) and all(
            np.array_equal(a, b) for a, b in zip(self._rows, other._rows)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Board(num_rows={self.num_rows})"


def place_snake(board: Board, scenario: Scenario) -> None:
    """Lay a straight snake from *scenario* onto *board*."""
    dr, dc = scenario.direction.value
    r, c = scenario.tail
    for i in range(scenario.length):
        if i == 0:
            kind = SegmentKind.TAIL
        elif i == scenario.length - 1:
            kind = SegmentKind.HEAD
        else:
            kind = SegmentKind.BODY
        board.set(r + dr * i, c + dc * i, glyph_for(kind, scenario.direction))


def default_board(scenario: Scenario = DEFAULT_SCENARIO) -> Board:
    """Build the fixed default layout: walls, one fruit, one snake."""
    board = Board.blank(scenario.rows, scenario.cols)
    board.set(*scenario.fruit, FRUIT)
    place_snake(board, scenario)
    return board
