"""Snake state: a head position plus a run-length encoded body."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from term_snake.geometry import Direction, Position, PositionIterator, Segment, step
from term_snake.render import DEFAULT_GLYPHS, Glyphs, SnakeFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from term_snake.grid import Cell, Grid


class Snake:
    """A snake stored as a deque of straight runs.

    ``segs[0]`` is the run nearest the head, ``segs[-1]`` the run nearest
    the tail. The run-lengths always sum to the body length.
    """

    def __init__(
        self,
        head: tuple[int, int] = (0, 0),
        length: int = 10,
        direction: Direction = Direction.UP,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.head = Position(head[0], head[1])
        self.segs: deque[Segment] = deque([Segment(direction, length)])

    def __len__(self) -> int:
        return sum(seg.length for seg in self.segs)

    @property
    def direction(self) -> Direction:
        """Direction of travel, taken from the front run."""
        return self.segs[0].direction

    @property
    def segments(self) -> tuple[tuple[Direction, int], ...]:
        return tuple(seg.as_tuple() for seg in self.segs)

    def positions(self) -> PositionIterator:
        """Fresh head-to-tail walk over the body positions."""
        return PositionIterator(self.segs, self.head)

    def cells(self, grid: Grid) -> Iterator[Cell]:
        """Body positions projected onto *grid*, head first."""
        return grid.project_all(self.positions())

    def advance(self, new_direction: Direction | None = None) -> None:
        """Move one tick, optionally turning first.

        Turning back on the current direction is ignored, as is repeating it.
        """
        front = self.segs[0]
        if (
            new_direction is not None
            and new_direction != front.direction
            and new_direction != front.direction.opposite
        ):
            front = Segment(new_direction, 0)
            self.segs.appendleft(front)

        self.head = step(self.head, front.direction)
        front.length += 1

        back = self.segs[-1]
        if back.length > 1:
            back.length -= 1
        else:
            self.segs.pop()

    def grow(self) -> None:
        """Lengthen the tail run by one cell."""
        self.segs[-1].length += 1

    def is_collide(self) -> bool:
        """Check whether the head overlaps any other body position."""
        walk = self.positions()
        head = next(walk)
        return any(pos == head for pos in walk)

    def formatter(self, grid: Grid, glyphs: Glyphs = DEFAULT_GLYPHS) -> SnakeFormatter:
        """Render directives for the body as projected onto *grid*."""
        return SnakeFormatter(list(self.cells(grid)), self.direction, glyphs)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "segments": [[seg.direction.name, seg.length] for seg in self.segs],
            "length": len(self),
        }
