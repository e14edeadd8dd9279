"""term-snake — run-length snake geometry for wraparound terminal grids."""

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, TickResult
from term_snake.food import Food
from term_snake.geometry import (
    Direction,
    Position,
    PositionIterator,
    Segment,
    opposite,
    step,
)
from term_snake.grid import Cell, Grid
from term_snake.render import DEFAULT_GLYPHS, Glyphs
from term_snake.snake import Snake

__all__ = [
    "DEFAULT_GLYPHS",
    "Cell",
    "Direction",
    "Food",
    "GameConfig",
    "GameEngine",
    "Glyphs",
    "Grid",
    "Position",
    "PositionIterator",
    "Segment",
    "Snake",
    "TickResult",
    "opposite",
    "step",
]
