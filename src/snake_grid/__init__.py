"""Snake Grid — glyph-encoded snake simulation on a text board."""

from snake_grid.board import DEFAULT_SCENARIO, Board, Scenario, default_board
from snake_grid.engine import GameEngine, default_game
from snake_grid.errors import (
    MalformedBoardError,
    MissingInputFileError,
    OutOfBoundsError,
    SnakeGridError,
)
from snake_grid.food import FoodPlacer, deterministic_food, no_food
from snake_grid.glyphs import Direction
from snake_grid.snake import Snake

__all__ = [
    "DEFAULT_SCENARIO",
    "Board",
    "Direction",
    "FoodPlacer",
    "GameEngine",
    "MalformedBoardError",
    "MissingInputFileError",
    "OutOfBoundsError",
    "Scenario",
    "Snake",
    "SnakeGridError",
    "default_board",
    "default_game",
    "deterministic_food",
    "no_food",
]
