"""Fruit placement collaborators invoked after a snake eats."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from snake_grid.glyphs import FRUIT

if TYPE_CHECKING:
    from snake_grid.board import Board

logger = logging.getLogger(__name__)

# Signature every placer satisfies: place fruit on the board, report success.
AddFood = Callable[["Board"], bool]

DETERMINISTIC_SEED = 10


class FoodPlacer:
    """Places fruit on uniformly random empty cells.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Instances are callable and can be handed straight to the engine.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.placed: list[tuple[int, int]] = []

    def reset(self, seed: int | None = None) -> None:
        """Restart the placement sequence, from *seed* or the original seed."""
        self.seed = seed if seed is not None else self.seed
        self.rng = np.random.default_rng(self.seed)
        self.placed.clear()

    def __call__(self, board: Board) -> bool:
        empty = board.empty_cells()
        if not empty:
            logger.warning("No empty cells available for fruit placement.")
            return False

        row, col = empty[int(self.rng.integers(len(empty)))]
        board.set(row, col, FRUIT)
        self.placed.append((row, col))
        logger.debug("Fruit placed at (%d, %d).", row, col)
        return True


# Shared fixed-seed placer; each call advances the same sequence.
deterministic_food = FoodPlacer(seed=DETERMINISTIC_SEED)


def no_food(board: Board) -> bool:
    """Placer that never adds fruit."""
    return False
