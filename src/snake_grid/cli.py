"""Command-line entry point: load a board, run one tick, write it back."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from snake_grid.config import RunConfig
from snake_grid.engine import GameEngine
from snake_grid.errors import MalformedBoardError, MissingInputFileError
from snake_grid.food import AddFood, FoodPlacer, deterministic_food

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING_INPUT = 1
EXIT_MALFORMED_BOARD = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-grid",
        description="Advance every snake on a text board by one tick.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-i", dest="input_path", metavar="FILE", default=None,
        help="Read the board from FILE.",
    )
    source.add_argument(
        "--stdin", dest="use_stdin", action="store_true",
        help="Read the board from standard input.",
    )
    parser.add_argument(
        "-o", dest="output_path", metavar="FILE", default=None,
        help="Write the board to FILE instead of standard output.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON run config (flags override its values).",
    )
    parser.add_argument(
        "--seed", dest="food_seed", type=int, default=None,
        help="Seed for random fruit placement (default: fixed placement).",
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    base = RunConfig.load(args.config) if args.config else RunConfig()

    overrides: dict = {}
    for name in ("input_path", "output_path", "food_seed", "log_level"):
        val = getattr(args, name)
        if val is not None:
            overrides[name] = val
    # An input flag replaces whichever input source the config names.
    if args.input_path is not None:
        overrides["use_stdin"] = False
    if args.use_stdin:
        overrides["use_stdin"] = True
        overrides["input_path"] = None

    if not overrides:
        return base
    d = base.to_dict()
    d.update(overrides)
    return RunConfig(**d)


def _raw_text(stream: TextIO) -> TextIO:
    """Let a standard stream carry undecodable bytes and bare carriage returns."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape", newline="\n")
    return stream


def _food_placer(config: RunConfig) -> AddFood:
    if config.food_seed is None:
        return deterministic_food
    return FoodPlacer(seed=config.food_seed)


def run(config: RunConfig) -> int:
    """Run one simulation tick as described by *config*.

    Raises:
        MissingInputFileError: if ``config.input_path`` does not exist.
        MalformedBoardError: if a loaded board has a tail with no head.
    """
    add_food = _food_placer(config)
    if config.input_path is not None:
        engine = GameEngine.from_file(config.input_path, add_food=add_food)
    elif config.use_stdin:
        engine = GameEngine.from_stream(
            _raw_text(sys.stdin), add_food=add_food,
        )
    else:
        engine = GameEngine.default(add_food=add_food)

    engine.step()
    logger.info("Tick complete: %d of %d snakes alive.",
                engine.alive_count, len(engine.snakes))

    if config.output_path is not None:
        engine.board.save(config.output_path)
    else:
        engine.board.write(_raw_text(sys.stdout))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-grid`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _config_from_args(args)
    except (OSError, TypeError, ValueError) as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return run(config)
    except MissingInputFileError as exc:
        print(exc, file=sys.stderr)  # noqa: T201
        return EXIT_MISSING_INPUT
    except MalformedBoardError as exc:
        print(exc, file=sys.stderr)  # noqa: T201
        return EXIT_MALFORMED_BOARD


if __name__ == "__main__":
    sys.exit(main())
