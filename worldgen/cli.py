"""Command-line entry point: generate a system and print it."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_config
from .constants import TITLE, VERSION
from .diagnostics import Diagnostics
from .errors import InvalidDigit
from .models.generator import SystemGenerator
from .models.world import World
from .report import render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worldgen",
        description="Generate a Traveller star system around a main world.",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Name of the main world.",
    )
    parser.add_argument(
        "--upp",
        type=str,
        default=None,
        help="UPP of the main world, e.g. A788899-A.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible system.",
    )
    parser.add_argument(
        "--show-empty",
        action="store_true",
        help="List orbits that were rolled to stay empty.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log generation decisions.",
    )
    parser.add_argument("--version", action="version", version=f"{TITLE} {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the worldgen command."""
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    name = args.name if args.name is not None else config.default_name
    upp = args.upp if args.upp is not None else config.default_upp
    diagnostics = Diagnostics()
    try:
        main_world = World.from_upp(name, upp, is_main_world=True, diagnostics=diagnostics)
    except InvalidDigit as exc:
        print(f"worldgen: invalid UPP '{upp}': {exc}", file=sys.stderr)
        return 2

    generator = SystemGenerator(
        main_world, seed=args.seed, config=config, diagnostics=diagnostics
    )
    show_empty = args.show_empty or config.show_empty_orbits
    print(render_report(generator.system, generator.diagnostics, show_empty=show_empty))
    logger.info("Seed %d", generator.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
