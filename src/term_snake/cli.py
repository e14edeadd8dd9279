"""Headless command-line tools for term-snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import TYPE_CHECKING

from term_snake.geometry import Direction

if TYPE_CHECKING:
    from term_snake.config import GameConfig

logger = logging.getLogger(__name__)

_MOVE_CODES: dict[str, Direction | None] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    ".": None,
}


def parse_moves(moves: str) -> list[Direction | None]:
    """Turn a string such as ``"RR.D"`` into one optional direction per tick."""
    parsed: list[Direction | None] = []
    for ch in moves.upper():
        if ch.isspace():
            continue
        if ch not in _MOVE_CODES:
            raise ValueError(f"Unknown move {ch!r}; expected one of U D L R .")
        parsed.append(_MOVE_CODES[ch])
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Headless simulation and configuration tools for term-snake.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Run a scripted game without a terminal.")
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--length", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--tick-ms", type=int, default=None)
    sim_p.add_argument(
        "--ticks", type=int, default=None,
        help="Number of ticks to run (defaults to the number of moves).",
    )
    sim_p.add_argument(
        "--moves", type=str, default="",
        help="One character per tick: U, D, L, R, or '.' for no input.",
    )
    sim_p.add_argument(
        "--realtime", action="store_true",
        help="Wait tick_ms between ticks like the interactive game.",
    )
    sim_p.add_argument(
        "--show", action="store_true", help="Print the final board.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print or save the default config.")
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config to this path instead of stdout.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    from term_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "length": "initial_length",
        "seed": "seed",
        "tick_ms": "tick_ms",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        d["glyphs"] = tuple(d["glyphs"])
        config = GameConfig(**d)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from term_snake.engine import GameEngine

    try:
        config = _load_config(args)
        moves = parse_moves(args.moves)
    except (OSError, TypeError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    ticks = args.ticks if args.ticks is not None else len(moves)

    engine = GameEngine(config)
    logger.info(
        "Simulating %d ticks on a %dx%d grid (tick %d ms%s).",
        ticks, config.width, config.height, config.tick_ms,
        ", realtime" if args.realtime else "",
    )
    eaten = 0
    for i in range(ticks):
        if args.realtime and i:
            time.sleep(config.tick_ms / 1000)
        move = moves[i] if i < len(moves) else None
        result = engine.step(move)
        eaten += result.ate
        logger.debug(
            "tick=%d move=%s head=%s", result.tick,
            move.name if move else "-", tuple(engine.snake.head),
        )
        if result.collided:
            break

    print(  # noqa: T201
        f"ticks={engine.tick} length={len(engine.snake)} "
        f"eaten={eaten} collided={engine.game_over}"
    )
    if args.show:
        print("\n".join(engine.render_text()))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from term_snake.config import GameConfig

    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
