"""Glyph alphabet and pure classification helpers.

Snake shape lives in the board itself: every tail, body and head glyph
names the direction of the next segment toward the head.
"""

from __future__ import annotations

import enum

WALL = "#"
EMPTY = " "
FRUIT = "*"
DEAD_HEAD = "x"


class Direction(enum.Enum):
    """Cardinal directions with (row_delta, col_delta) values."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)


class SegmentKind(enum.Enum):
    """Which part of a snake a glyph marks."""

    TAIL = "tail"
    BODY = "body"
    HEAD = "head"


_GLYPHS: dict[SegmentKind, dict[Direction, str]] = {
    SegmentKind.TAIL: {
        Direction.NORTH: "w",
        Direction.WEST: "a",
        Direction.SOUTH: "s",
        Direction.EAST: "d",
    },
    SegmentKind.BODY: {
        Direction.NORTH: "^",
        Direction.WEST: "<",
        Direction.SOUTH: "v",
        Direction.EAST: ">",
    },
    SegmentKind.HEAD: {
        Direction.NORTH: "W",
        Direction.WEST: "A",
        Direction.SOUTH: "S",
        Direction.EAST: "D",
    },
}

# Reverse lookup: glyph -> (kind, direction).
_DECODE: dict[str, tuple[SegmentKind, Direction]] = {
    glyph: (kind, direction)
    for kind, by_dir in _GLYPHS.items()
    for direction, glyph in by_dir.items()
}

TAILS = frozenset(_GLYPHS[SegmentKind.TAIL].values())
BODIES = frozenset(_GLYPHS[SegmentKind.BODY].values())
HEADS = frozenset(_GLYPHS[SegmentKind.HEAD].values()) | {DEAD_HEAD}


def glyph_for(kind: SegmentKind, direction: Direction) -> str:
    """Return the glyph for a snake segment facing *direction*."""
    return _GLYPHS[kind][direction]


def is_tail(glyph: str) -> bool:
    return glyph in TAILS


def is_head(glyph: str) -> bool:
    """True for live head glyphs and the dead-head glyph."""
    return glyph in HEADS


def is_body(glyph: str) -> bool:
    return glyph in BODIES


def is_snake(glyph: str) -> bool:
    return is_tail(glyph) or is_body(glyph) or is_head(glyph)


def direction_of(glyph: str) -> Direction | None:
    """Return the direction a segment glyph points, or ``None``."""
    decoded = _DECODE.get(glyph)
    return decoded[1] if decoded is not None else None


def next_position(row: int, col: int, glyph: str) -> tuple[int, int]:
    """Step one cell from (row, col) in the direction *glyph* encodes.

    Glyphs without a direction leave the coordinate unchanged.
    """
    direction = direction_of(glyph)
    if direction is None:
        return row, col
    dr, dc = direction.value
    return row + dr, col + dc


def body_to_tail(glyph: str) -> str:
    """Convert a body glyph to the tail glyph of the same direction."""
    if not is_body(glyph):
        return glyph
    return _GLYPHS[SegmentKind.TAIL][_DECODE[glyph][1]]


def head_to_body(glyph: str) -> str:
    """Convert a live head glyph to the body glyph of the same direction."""
    decoded = _DECODE.get(glyph)
    if decoded is None or decoded[0] is not SegmentKind.HEAD:
        return glyph
    return _GLYPHS[SegmentKind.BODY][decoded[1]]
