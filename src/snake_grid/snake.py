"""Per-snake endpoint record."""

from __future__ import annotations


class Snake:
    """Cached tail and head coordinates for one snake on the board.

    The board glyphs are the source of truth for the snake's shape; this
    record only keeps the two endpoints for O(1) access.
    """

    __slots__ = ("tail", "head", "alive")

    def __init__(
        self,
        tail: tuple[int, int],
        head: tuple[int, int],
        alive: bool = True,
    ) -> None:
        self.tail = tail
        self.head = head
        self.alive = alive

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return (
            self.tail == other.tail
            and self.head == other.head
            and self.alive == other.alive
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Snake(tail={self.tail}, head={self.head}, alive={self.alive})"

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "tail": list(self.tail),
            "head": list(self.head),
            "alive": self.alive,
        }
