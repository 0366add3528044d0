"""Command-line tools for rendering and headless simulation."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from svg_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _key_codes(raw: str) -> list[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid key code list: {raw!r}",
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-snake",
        description="SVG Snake rendering and simulation tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- render ---
    render_p = sub.add_parser(
        "render", help="Print the SVG of the starting position.",
    )
    render_p.add_argument("--width", type=int, default=None)
    render_p.add_argument("--height", type=int, default=None)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run ticks headlessly and print the final state.",
    )
    sim_p.add_argument("--ticks", type=int, default=100)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--keys", type=_key_codes, default=[],
        help="Comma-separated key codes, one dispatched before each tick.",
    )

    return parser


def _run_render(args: argparse.Namespace, config: GameConfig) -> int:
    from svg_snake.engine import initial_game
    from svg_snake.render import project, to_svg

    width = args.width if args.width is not None else config.initial_width
    height = args.height if args.height is not None else config.initial_height
    print(to_svg(project(initial_game(width, height))))  # noqa: T201
    return 0


def _run_simulate(args: argparse.Namespace, config: GameConfig) -> int:
    from svg_snake.engine import GameEngine
    from svg_snake.messages import ArrowPressed, Tick, key_from_code

    seed = args.seed if args.seed is not None else config.seed
    engine = GameEngine(
        width=config.initial_width, height=config.initial_height, seed=seed,
    )
    keys = list(args.keys)
    for i in range(args.ticks):
        if i < len(keys):
            engine.dispatch(ArrowPressed(key_from_code(keys[i])))
        engine.dispatch(Tick(timestamp=i * config.tick_interval))
        if engine.game.is_dead:
            break

    logger.info(
        "Simulation finished after %d ticks (%s).",
        engine.tick_count, engine.game.status,
    )
    state = engine.get_state()
    state.pop("cells")
    print(json.dumps(state))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``svg-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = GameConfig.load(args.config) if args.config else GameConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "render": _run_render,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
