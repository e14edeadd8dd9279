"""Food placement and the eaten check."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.geometry import Position
from term_snake.render import FOOD_GLYPH, move_to

if TYPE_CHECKING:
    from term_snake.grid import Cell, Grid
    from term_snake.snake import Snake

logger = logging.getLogger(__name__)


class Food:
    """A single piece of food fixed to one cell of a grid.

    Instances are never moved; eating one means replacing it with a new
    :meth:`somewhere_within` instance.
    """

    __slots__ = ("cell", "grid")

    def __init__(self, cell: Cell, grid: Grid) -> None:
        if not grid.in_bounds(cell.col, cell.row):
            raise ValueError(f"Food cell {tuple(cell)} lies outside the grid.")
        self.cell = cell
        self.grid = grid

    @classmethod
    def somewhere_within(
        cls,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> Food:
        """Place food on a random cell the snake's head can reach.

        Draws a lattice position and projects it, so the column always sits
        on the doubled-column lattice the head moves along.
        """
        rng = rng if rng is not None else np.random.default_rng()
        x = int(rng.integers(grid.width))
        y = int(rng.integers(grid.height))
        cell = grid.project(Position(x, y))
        logger.debug("Food spawned at %s.", tuple(cell))
        return cls(cell, grid)

    def is_eaten_by(self, snake: Snake) -> bool:
        """True when the snake's head sits on this food's cell."""
        head = next(snake.cells(self.grid), None)
        return head == self.cell

    def directive(self, glyph: str = FOOD_GLYPH) -> str:
        return move_to(self.cell, glyph)

    def __str__(self) -> str:
        return self.directive()

    def __repr__(self) -> str:
        return f"Food(cell={tuple(self.cell)!r}, bound={self.grid.bound!r})"

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"cell": list(self.cell)}
