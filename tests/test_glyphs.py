"""Tests for the glyph classifier helpers."""

import pytest

from snake_grid import glyphs
from snake_grid.glyphs import (
    DEAD_HEAD,
    EMPTY,
    FRUIT,
    WALL,
    Direction,
    SegmentKind,
    body_to_tail,
    direction_of,
    glyph_for,
    head_to_body,
    is_body,
    is_head,
    is_snake,
    is_tail,
    next_position,
)


class TestClassification:
    @pytest.mark.parametrize("glyph", list("wasd"))
    def test_tails(self, glyph):
        assert is_tail(glyph)
        assert not is_body(glyph)
        assert not is_head(glyph)
        assert is_snake(glyph)

    @pytest.mark.parametrize("glyph", list("^<v>"))
    def test_bodies(self, glyph):
        assert is_body(glyph)
        assert not is_tail(glyph)
        assert is_snake(glyph)

    @pytest.mark.parametrize("glyph", list("WASDx"))
    def test_heads_include_dead_head(self, glyph):
        assert is_head(glyph)
        assert is_snake(glyph)

    @pytest.mark.parametrize("glyph", [WALL, EMPTY, FRUIT, "?", "X"])
    def test_terrain_is_not_snake(self, glyph):
        assert not is_snake(glyph)

    def test_alphabet_sizes(self):
        assert len(glyphs.TAILS) == 4
        assert len(glyphs.BODIES) == 4
        assert len(glyphs.HEADS) == 5


class TestDirections:
    @pytest.mark.parametrize(
        ("glyph", "expected"),
        [
            ("w", Direction.NORTH), ("^", Direction.NORTH), ("W", Direction.NORTH),
            ("s", Direction.SOUTH), ("v", Direction.SOUTH), ("S", Direction.SOUTH),
            ("d", Direction.EAST), (">", Direction.EAST), ("D", Direction.EAST),
            ("a", Direction.WEST), ("<", Direction.WEST), ("A", Direction.WEST),
        ],
    )
    def test_direction_of(self, glyph, expected):
        assert direction_of(glyph) == expected

    @pytest.mark.parametrize("glyph", [DEAD_HEAD, WALL, EMPTY, FRUIT])
    def test_no_direction(self, glyph):
        assert direction_of(glyph) is None

    def test_next_position(self):
        assert next_position(5, 5, "W") == (4, 5)
        assert next_position(5, 5, "v") == (6, 5)
        assert next_position(5, 5, "d") == (5, 6)
        assert next_position(5, 5, "<") == (5, 4)

    def test_next_position_without_direction_stays(self):
        assert next_position(3, 7, DEAD_HEAD) == (3, 7)
        assert next_position(3, 7, EMPTY) == (3, 7)

    def test_glyph_for(self):
        assert glyph_for(SegmentKind.TAIL, Direction.EAST) == "d"
        assert glyph_for(SegmentKind.BODY, Direction.SOUTH) == "v"
        assert glyph_for(SegmentKind.HEAD, Direction.WEST) == "A"


class TestConversions:
    def test_body_to_tail(self):
        assert [body_to_tail(g) for g in "^<v>"] == list("wasd")

    def test_head_to_body(self):
        assert [head_to_body(g) for g in "WASD"] == list("^<v>")

    @pytest.mark.parametrize("glyph", ["w", "W", DEAD_HEAD, WALL, EMPTY, FRUIT])
    def test_body_to_tail_identity_outside_bodies(self, glyph):
        assert body_to_tail(glyph) == glyph

    @pytest.mark.parametrize("glyph", ["w", "^", DEAD_HEAD, WALL, EMPTY, FRUIT])
    def test_head_to_body_identity_outside_heads(self, glyph):
        assert head_to_body(glyph) == glyph
