"""Command line entry point: ``queensgen generate WIDTH [options]``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from queensgen.config import (
    LOG_LEVEL_ENV,
    MAX_SPREADS,
    PRESETS,
    GeneratorConfig,
    resolve_width,
)
from queensgen.errors import QueensError
from queensgen.export import write_csv
from queensgen.generator import PuzzleGenerator
from queensgen.render import render_text

logger = logging.getLogger("queensgen")


def configure_logging(verbose: bool = False) -> None:
    level_name = os.getenv(LOG_LEVEL_ENV)
    if verbose:
        level = logging.DEBUG
    elif level_name:
        level = getattr(logging, level_name.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="queensgen", description="Generate Queens puzzles.")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    gen = sub.add_parser("generate", help="generate one puzzle")
    gen.add_argument(
        "size",
        metavar="BOARD_SIZE",
        help=f"board width, or a preset: {', '.join(f'{k}={v}' for k, v in PRESETS.items())}",
    )
    gen.add_argument("-nq", "--hide-queens", action="store_true",
                     help="don't color the queens in board output")
    gen.add_argument("-nc", "--non-continuous", action="store_true",
                     help="allow the base region to be non-continuous during generation")
    gen.add_argument("-s", "--to-csv", metavar="FILE",
                     help="write the color map to FILE, plus a last row with each row's queen column")
    gen.add_argument("--seed", type=int, default=None, help="random seed for a reproducible board")
    gen.add_argument("--spreads", type=int, default=MAX_SPREADS,
                     help=f"cap on spread attempts (default {MAX_SPREADS})")
    gen.add_argument("--no-color", action="store_true", help="plain text output")
    gen.add_argument("--show", action="store_true", help="open the board in a pygame window")
    gen.add_argument("-y", "--yes", action="store_true", help="don't ask before generating large boards")
    gen.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _confirm_large(width: int) -> bool:
    print(f"WARNING: A board size greater than 12 is not recommended ({width}). Continue? (y/N)",
          file=sys.stderr)
    answer = sys.stdin.readline().strip()
    return answer in ("y", "Y")


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        config = GeneratorConfig(
            width=resolve_width(args.size),
            continuous_base=not args.non_continuous,
            max_spreads=args.spreads,
            seed=args.seed,
        )
    except (QueensError, ValueError) as exc:
        logger.error("INPUT ERROR: %s", exc)
        return 1

    if config.oversized and not args.yes and not _confirm_large(config.width):
        logger.error("Abort.")
        return 1
    if not config.continuous_base:
        logger.info("Generating with non-continuous base")

    try:
        puzzle = PuzzleGenerator(config).generate()
    except QueensError as exc:
        logger.error("Generation failed: %s", exc)
        return 1

    print(render_text(puzzle, hide_queens=args.hide_queens, color=not args.no_color))

    if args.to_csv:
        logger.info("Saving to %s", args.to_csv)
        try:
            write_csv(puzzle, args.to_csv)
        except OSError as exc:
            logger.error("Could not write %s: %s", args.to_csv, exc)
            return 1

    if args.show:
        from queensgen.viewer import run_viewer

        run_viewer(puzzle)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    if args.command == "generate":
        return cmd_generate(args)
    parser.error(f"No subcommand '{args.command}'")


if __name__ == "__main__":
    sys.exit(main())
