"""Tests for the GameEngine module."""

import json

from term_snake.config import GameConfig
from term_snake.engine import GameEngine, TickResult
from term_snake.food import Food
from term_snake.geometry import Direction, step
from term_snake.grid import CellType


def _food_ahead(engine: GameEngine, direction: Direction | None = None) -> Food:
    """Place food on the cell the head will enter next tick."""
    heading = direction if direction is not None else engine.snake.direction
    cell = engine.grid.project(step(engine.snake.head, heading))
    engine.food = Food(cell, engine.grid)
    return engine.food


class TestEngineInit:
    def test_default_init(self):
        engine = GameEngine(GameConfig(seed=0))
        assert engine.tick == 0
        assert not engine.game_over
        assert len(engine.snake) == 10
        assert engine.snake.head == (0, 0)

    def test_uses_config(self):
        config = GameConfig(width=30, height=12, initial_length=4, start_x=2, start_y=-1)
        engine = GameEngine(config)
        assert engine.grid.bound == (30, 12)
        assert len(engine.snake) == 4
        assert engine.snake.head == (2, -1)

    def test_food_inside_grid(self):
        engine = GameEngine(GameConfig(width=20, height=10, seed=1))
        assert engine.grid.in_bounds(*engine.food.cell)


class TestEngineStep:
    def test_basic_step(self):
        engine = GameEngine(GameConfig(seed=0))
        result = engine.step()
        assert result == TickResult(tick=1, collided=False, ate=result.ate)
        assert engine.snake.head == (0, 1)

    def test_direction_change(self):
        engine = GameEngine(GameConfig(seed=0))
        engine.step(Direction.LEFT)
        assert engine.snake.head == (-1, 0)
        assert engine.snake.direction == Direction.LEFT

    def test_reverse_request_ignored(self):
        engine = GameEngine(GameConfig(seed=0))
        engine.step(Direction.DOWN)
        assert engine.snake.head == (0, 1)
        assert engine.snake.direction == Direction.UP


class TestEngineFood:
    def test_eating_grows_and_respawns(self):
        engine = GameEngine(GameConfig(seed=0))
        eaten = _food_ahead(engine)
        result = engine.step()
        assert result.ate
        assert not result.collided
        assert len(engine.snake) == 11
        assert engine.food is not eaten

    def test_growth_persists(self):
        engine = GameEngine(GameConfig(seed=0))
        _food_ahead(engine)
        engine.step()
        engine.food = Food(engine.grid.project((30, 30)), engine.grid)
        for _ in range(5):
            engine.step()
        assert len(engine.snake) == 11

    def test_eating_after_turn(self):
        engine = GameEngine(GameConfig(seed=0))
        _food_ahead(engine, Direction.RIGHT)
        result = engine.step(Direction.RIGHT)
        assert result.ate


class TestEngineCollision:
    def test_dies_on_self_collision(self):
        engine = GameEngine(GameConfig(initial_length=5, seed=0))
        results = [engine.step(d) for d in (Direction.RIGHT, Direction.DOWN, Direction.LEFT)]
        assert not results[0].collided
        assert not results[1].collided
        assert results[2].collided
        assert engine.game_over

    def test_game_over_stops_ticks(self):
        engine = GameEngine(GameConfig(initial_length=5, seed=0))
        for d in (Direction.RIGHT, Direction.DOWN, Direction.LEFT):
            last = engine.step(d)
        head = engine.snake.head
        assert engine.step(Direction.UP) == last
        assert engine.tick == 3
        assert engine.snake.head == head


class TestEngineRendering:
    def test_frame_contains_snake_and_food(self):
        engine = GameEngine(GameConfig(width=20, height=10, initial_length=3, seed=0))
        frame = engine.frame()
        assert frame.startswith("\x1b[6;11H⮝")
        assert frame.endswith(str(engine.food))
        assert frame.count("\x1b[") == 4

    def test_render_text_shape(self):
        engine = GameEngine(GameConfig(width=20, height=10, initial_length=3, seed=0))
        lines = engine.render_text()
        assert len(lines) == 10
        assert all(len(line) == 20 for line in lines)
        assert lines[5][10] == "⮝"


class TestEngineSerialization:
    def test_state_is_json_serializable(self):
        engine = GameEngine(GameConfig(seed=42))
        engine.step(Direction.RIGHT)
        serialized = json.dumps(engine.get_state())
        assert isinstance(serialized, str)

    def test_state_structure(self):
        state = GameEngine(GameConfig(seed=0)).get_state()
        assert state["tick"] == 0
        assert state["game_over"] is False
        assert state["snake"]["length"] == 10
        assert "cell" in state["food"]

    def test_state_includes_painted_grid(self):
        engine = GameEngine(GameConfig(width=20, height=10, initial_length=3, seed=0))
        engine.food = Food(engine.grid.project((0, 4)), engine.grid)
        grid = engine.get_state()["grid"]
        assert grid["width"] == 20
        assert grid["height"] == 10
        assert grid["cells"][5][10] == CellType.HEAD
        assert grid["cells"][6][10] == CellType.BODY
        assert grid["cells"][1][10] == CellType.FOOD


class TestEngineDeterminism:
    def test_same_seed_same_outcome(self):
        moves = [Direction.RIGHT, None, Direction.DOWN, None, Direction.LEFT]
        assert self._run_game(123, moves) == self._run_game(123, moves)

    @staticmethod
    def _run_game(seed: int, moves: list) -> dict:
        engine = GameEngine(GameConfig(initial_length=3, seed=seed))
        for move in moves:
            engine.step(move)
        return engine.get_state()
