"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from term_snake.render import DEFAULT_GLYPHS, FOOD_GLYPH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, snake and display settings for one game."""

    # Board
    width: int = 80
    height: int = 24

    # Snake
    initial_length: int = 10
    start_x: int = 0
    start_y: int = 0

    # Timing
    tick_ms: int = 250

    # Display
    glyphs: tuple[str, ...] = tuple(DEFAULT_GLYPHS)
    food_glyph: str = FOOD_GLYPH

    # Randomness
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive.")
        if len(self.glyphs) != 5:
            raise ValueError("glyphs must have exactly 5 entries.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["glyphs"] = list(self.glyphs)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        p.write_text(text, encoding="utf-8")
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if "glyphs" in raw:
            raw["glyphs"] = tuple(raw["glyphs"])
        return cls(**raw)
