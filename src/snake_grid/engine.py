"""Tick-based simulation engine driven by the glyphs on the board."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from snake_grid.board import DEFAULT_SCENARIO, Board, Scenario, default_board
from snake_grid.errors import MalformedBoardError
from snake_grid.food import AddFood, deterministic_food
from snake_grid.glyphs import (
    DEAD_HEAD,
    EMPTY,
    FRUIT,
    WALL,
    body_to_tail,
    direction_of,
    head_to_body,
    is_head,
    is_snake,
    is_tail,
    next_position,
)
from snake_grid.snake import Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """Advances every live snake on a board by one cell per tick.

    The engine owns the board and the ordered list of snake records.
    Snakes are processed in list order and each one writes its move to
    the board immediately, so later snakes see earlier snakes' new
    positions within the same tick.
    """

    def __init__(
        self,
        board: Board,
        snakes: list[Snake] | None = None,
        add_food: AddFood = deterministic_food,
    ) -> None:
        self.board = board
        self.snakes: list[Snake] = list(snakes) if snakes is not None else []
        self.add_food = add_food
        self.tick = 0

    # --- construction ---

    @classmethod
    def default(
        cls,
        scenario: Scenario = DEFAULT_SCENARIO,
        add_food: AddFood = deterministic_food,
    ) -> GameEngine:
        """Return the fixed default game with its single snake."""
        snake = Snake(scenario.tail, scenario.head)
        return cls(default_board(scenario), [snake], add_food=add_food)

    @classmethod
    def from_board(
        cls, board: Board, add_food: AddFood = deterministic_food,
    ) -> GameEngine:
        """Wrap a loaded board and rebuild its snake records."""
        engine = cls(board, add_food=add_food)
        engine.initialize_snakes()
        return engine

    @classmethod
    def from_text(
        cls, text: str, add_food: AddFood = deterministic_food,
    ) -> GameEngine:
        return cls.from_board(Board.deserialize(text), add_food=add_food)

    @classmethod
    def from_stream(
        cls, stream: TextIO, add_food: AddFood = deterministic_food,
    ) -> GameEngine:
        return cls.from_board(Board.read(stream), add_food=add_food)

    @classmethod
    def from_file(
        cls, path: str | Path, add_food: AddFood = deterministic_food,
    ) -> GameEngine:
        return cls.from_board(Board.load(path), add_food=add_food)

    # --- reconstruction ---

    def initialize_snakes(self) -> list[Snake]:
        """Rebuild snake records by scanning the board for tail glyphs.

        Tails are visited in row-major order, which fixes the order the
        snakes are advanced in. A snake whose head is the dead-head glyph
        is recorded as not alive.

        Raises:
            MalformedBoardError: if a tail cannot be traced to a head.
        """
        snakes: list[Snake] = []
        for row in range(self.board.num_rows):
            for col in range(self.board.width(row)):
                if not is_tail(self.board.get(row, col)):
                    continue
                head = self._find_head((row, col))
                alive = self.board.get(*head) != DEAD_HEAD
                snakes.append(Snake((row, col), head, alive=alive))

        self.snakes = snakes
        logger.info(
            "Initialized %d snakes (%d alive).", len(snakes), self.alive_count,
        )
        return snakes

    def _find_head(self, tail: tuple[int, int]) -> tuple[int, int]:
        """Follow segment directions from *tail* until a head glyph."""
        row, col = tail
        glyph = self.board.get(row, col)
        visited = {tail}
        while not is_head(glyph):
            if direction_of(glyph) is None:
                raise MalformedBoardError(
                    tail, f"{glyph!r} at ({row}, {col}) is not a snake segment",
                )
            row, col = next_position(row, col, glyph)
            if not self.board.in_bounds(row, col):
                raise MalformedBoardError(
                    tail, f"trace leaves the board at ({row}, {col})",
                )
            if (row, col) in visited:
                raise MalformedBoardError(
                    tail, f"trace loops back to ({row}, {col})",
                )
            visited.add((row, col))
            glyph = self.board.get(row, col)
        return row, col

    # --- simulation ---

    @property
    def alive_count(self) -> int:
        return sum(1 for snake in self.snakes if snake.alive)

    def next_square(self, index: int) -> str:
        """Return the glyph snake *index* is about to move into.

        A cell off the board reads as a wall. Nothing is modified.
        """
        _, glyph = self._look_ahead(self.snakes[index])
        return glyph

    def step(self, add_food: AddFood | None = None) -> dict:
        """Advance every live snake by one tick.

        *add_food* overrides the engine's placer for this tick only; it is
        called once per fruit eaten, after the eating snake has grown.
        Returns the full game state as a serializable dict.
        """
        place_food = add_food if add_food is not None else self.add_food

        for index, snake in enumerate(self.snakes):
            if not snake.alive:
                continue

            target, square = self._look_ahead(snake)
            if square == WALL or is_snake(square):
                self._kill_snake(index, snake)
            elif square == FRUIT:
                self._update_head(snake, target)
                logger.info("Snake %d ate fruit at %s.", index, target)
                if not place_food(self.board):
                    logger.warning("Food placement after tick %d failed.",
                                   self.tick + 1)
            else:
                self._update_head(snake, target)
                self._update_tail(snake)
                logger.debug("Snake %d moved to %s.", index, target)

        self.tick += 1
        return self.get_state()

    update_game = step

    def _look_ahead(self, snake: Snake) -> tuple[tuple[int, int], str]:
        head_glyph = self.board.get(*snake.head)
        target = next_position(*snake.head, head_glyph)
        if not self.board.in_bounds(*target):
            return target, WALL
        return target, self.board.get(*target)

    def _update_head(self, snake: Snake, target: tuple[int, int]) -> None:
        head_glyph = self.board.get(*snake.head)
        self.board.set(*target, head_glyph)
        self.board.set(*snake.head, head_to_body(head_glyph))
        snake.head = target

    def _update_tail(self, snake: Snake) -> None:
        tail_glyph = self.board.get(*snake.tail)
        new_tail = next_position(*snake.tail, tail_glyph)
        self.board.set(*new_tail, body_to_tail(self.board.get(*new_tail)))
        self.board.set(*snake.tail, EMPTY)
        snake.tail = new_tail

    def _kill_snake(self, index: int, snake: Snake) -> None:
        self.board.set(*snake.head, DEAD_HEAD)
        snake.alive = False
        logger.info("Snake %d died at %s on tick %d.",
                    index, snake.head, self.tick + 1)

    # --- state ---

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "alive": self.alive_count,
            "board": self.board.to_dict(),
            "snakes": [snake.to_dict() for snake in self.snakes],
        }


def default_game(add_food: AddFood = deterministic_food) -> GameEngine:
    """Return the default scenario as a ready-to-step engine."""
    return GameEngine.default(add_food=add_food)
