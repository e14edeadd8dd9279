"""Directions, lattice positions and the run-length body walk."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values; y grows upward."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    return _OPPOSITES[direction]


class Position(NamedTuple):
    """A point on the unbounded lattice."""

    x: int
    y: int


def step(pos: tuple[int, int], direction: Direction) -> Position:
    """Move *pos* one unit in *direction*."""
    dx, dy = direction.value
    return Position(pos[0] + dx, pos[1] + dy)


@dataclass
class Segment:
    """A straight stretch of body: *length* steps taken in *direction*.

    Mutable so the snake can lengthen the front run and shorten the back
    run in place.
    """

    direction: Direction
    length: int = 0

    def as_tuple(self) -> tuple[Direction, int]:
        return self.direction, self.length


def _coerce(segment: Segment | tuple[Direction, int]) -> tuple[Direction, int]:
    if isinstance(segment, Segment):
        return segment.as_tuple()
    return segment[0], segment[1]


class PositionIterator:
    """Expand head-to-tail segments into absolute body positions.

    Yields the head first, then walks toward the tail, each segment
    contributing exactly its run-length. Walking back toward the tail uses
    the opposite of the recorded direction. Like any Python iterator an
    instance is single-pass; build a new one for another walk.
    """

    def __init__(
        self,
        segments: Iterable[Segment | tuple[Direction, int]],
        start: tuple[int, int],
    ) -> None:
        self._segments: Iterator[Segment | tuple[Direction, int]] = iter(segments)
        self._active: tuple[Direction, int] | None = None
        self._idx = 0
        self._pos = Position(start[0], start[1])
        self._done = False

    def __iter__(self) -> PositionIterator:
        return self

    def __next__(self) -> Position:
        while True:
            if self._done:
                raise StopIteration
            if self._active is None:
                nxt = next(self._segments, None)
                if nxt is None:
                    self._done = True
                    continue
                self._active = _coerce(nxt)
                continue

            direction, length = self._active
            if self._idx >= length:
                self._active = None
                self._idx = 0
                continue

            current = self._pos
            self._pos = step(self._pos, direction.opposite)
            self._idx += 1
            return current
