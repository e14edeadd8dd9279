"""Bounded torus grid: lattice-to-cell projection and a text frame buffer."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from term_snake.food import Food
    from term_snake.render import Glyphs
    from term_snake.snake import Snake


class Cell(NamedTuple):
    """A terminal character cell, zero-based."""

    col: int
    row: int


class CellType(enum.IntEnum):
    """Integer codes stored in the frame buffer."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Wraparound display of *width* columns by *height* rows.

    One lattice step maps to two terminal columns so horizontal movement
    looks as fast as vertical movement. The lattice origin sits at the
    centre of the display and lattice y grows upward.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1x1.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @property
    def bound(self) -> tuple[int, int]:
        return self.width, self.height

    def project(self, pos: tuple[int, int]) -> Cell:
        """Map a lattice position onto the wrapped display."""
        x, y = pos
        col = (self.width // 2 + x * 2) % self.width
        row = (self.height // 2 - y) % self.height
        return Cell(col, row)

    def project_all(self, positions: Iterable[tuple[int, int]]) -> Iterator[Cell]:
        """Lazily project every position, keeping order and count."""
        for pos in positions:
            yield self.project(pos)

    def in_bounds(self, col: int, row: int) -> bool:
        """Check whether a cell lies within the grid."""
        return 0 <= col < self.width and 0 <= row < self.height

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def set(self, col: int, row: int, cell_type: CellType) -> None:
        self.cells[row, col] = cell_type

    def paint(self, snake: Snake, food: Food | None = None) -> None:
        """Redraw the frame buffer from the current snake and food."""
        self.clear()
        if food is not None:
            self.set(food.cell.col, food.cell.row, CellType.FOOD)
        cells = list(snake.cells(self))
        # Tail first so the head wins when the body overlaps on screen.
        for col, row in reversed(cells[1:]):
            self.set(col, row, CellType.BODY)
        head = cells[0]
        self.set(head.col, head.row, CellType.HEAD)

    def render_text(
        self,
        glyphs: Glyphs,
        head_glyph: str | None = None,
        food_glyph: str = "@",
    ) -> list[str]:
        """Return the frame buffer as one string per row."""
        table = {
            CellType.EMPTY: " ",
            CellType.BODY: glyphs.body,
            CellType.HEAD: head_glyph if head_glyph is not None else glyphs.body,
            CellType.FOOD: food_glyph,
        }
        return [
            "".join(table[CellType(code)] for code in row.tolist())
            for row in self.cells
        ]

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
