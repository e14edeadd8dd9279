"""ANSI cursor directives and glyph tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from term_snake.geometry import Direction
from term_snake.grid import Cell

FOOD_GLYPH = "@"
NO_HEAD_GLYPH = "?"


class Glyphs(NamedTuple):
    """Head glyph per direction plus the glyph shared by the rest of the body."""

    up: str
    down: str
    left: str
    right: str
    body: str

    @classmethod
    def from_sequence(cls, chars: Iterable[str]) -> Glyphs:
        parts = tuple(chars)
        if len(parts) != 5:
            raise ValueError("Glyph table must have exactly 5 entries.")
        return cls(*parts)

    def head(self, direction: Direction) -> str:
        """Return the head glyph for *direction*."""
        return {
            Direction.UP: self.up,
            Direction.DOWN: self.down,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }[direction]


DEFAULT_GLYPHS = Glyphs("⮝", "⮟", "⮜", "➤", "*")


def move_to(cell: Cell, char: str) -> str:
    """Cursor-positioning directive for *cell* (1-based on the wire)."""
    return f"\x1b[{cell.row + 1};{cell.col + 1}H{char}"


class SnakeFormatter:
    """Render directives for a sequence of body cells, head first."""

    def __init__(
        self,
        cells: Iterable[Cell],
        direction: Direction,
        glyphs: Glyphs = DEFAULT_GLYPHS,
    ) -> None:
        self._cells = cells
        self.direction = direction
        self.glyphs = glyphs

    def __iter__(self) -> Iterator[str]:
        cells = iter(self._cells)
        head = next(cells, None)
        if head is None:
            yield NO_HEAD_GLYPH
            return
        yield move_to(head, self.glyphs.head(self.direction))
        for cell in cells:
            yield move_to(cell, self.glyphs.body)

    def __str__(self) -> str:
        return "".join(self)
