"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from term_snake.config import GameConfig
from term_snake.food import Food
from term_snake.geometry import Direction
from term_snake.grid import Grid
from term_snake.render import Glyphs
from term_snake.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """Signals produced by one call to :meth:`GameEngine.step`."""

    tick: int
    collided: bool = False
    ate: bool = False


class GameEngine:
    """Single-snake engine on a wraparound terminal grid.

    Each call to :meth:`step` advances the game by one tick. The caller owns
    the clock and the terminal; the engine only turns an optional direction
    into collision and food signals plus render directives.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.width, self.config.height)
        self.glyphs = Glyphs.from_sequence(self.config.glyphs)
        self.rng = np.random.default_rng(self.config.seed)
        self.snake = Snake(
            (self.config.start_x, self.config.start_y),
            length=self.config.initial_length,
        )
        self.food = Food.somewhere_within(self.grid, self.rng)

        self.tick = 0
        self.game_over = False
        self._last = TickResult(tick=0)

    def step(self, direction: Direction | None = None) -> TickResult:
        """Advance one tick, then check for collision and food."""
        if self.game_over:
            return self._last

        self.snake.advance(direction)
        self.tick += 1

        if self.snake.is_collide():
            self.game_over = True
            logger.info(
                "Snake collided with itself at tick %d (length %d).",
                self.tick, len(self.snake),
            )
            self._last = TickResult(tick=self.tick, collided=True)
            return self._last

        ate = self.food.is_eaten_by(self.snake)
        if ate:
            self.snake.grow()
            logger.info(
                "Food eaten at %s on tick %d; length now %d.",
                tuple(self.food.cell), self.tick, len(self.snake),
            )
            self.food = Food.somewhere_within(self.grid, self.rng)

        self._last = TickResult(tick=self.tick, ate=ate)
        return self._last

    def frame(self) -> str:
        """Render directives for the snake followed by the food."""
        snake = str(self.snake.formatter(self.grid, self.glyphs))
        return snake + self.food.directive(self.config.food_glyph)

    def render_text(self) -> list[str]:
        """Plain-text picture of the board, one string per row."""
        self.grid.paint(self.snake, self.food)
        return self.grid.render_text(
            self.glyphs,
            head_glyph=self.glyphs.head(self.snake.direction),
            food_glyph=self.config.food_glyph,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        self.grid.paint(self.snake, self.food)
        return {
            "tick": self.tick,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }
