# __main__.py
# python -m space_exe [--assets PATH] [--mute] [--fractional-anchor] [--log-level LEVEL]

from __future__ import annotations
import argparse
import logging
import sys

from . import settings
from .assets import AssetLoadError
from .game import Game

logger = logging.getLogger("space_exe")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="space-exe", description="A sprite that follows your cursor through space.")
    parser.add_argument("--assets", default=None, help="asset directory (default: <project>/assets)")
    parser.add_argument("--mute", action="store_true", default=settings.SOUND_OFF, help="do not play music")
    parser.add_argument(
        "--fractional-anchor",
        action="store_true",
        default=settings.FRACTIONAL_ANCHOR,
        help="anchor the sprite with the fractional scale instead of int(scale)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        game = Game(asset_root=args.assets, muted=args.mute, fractional_anchor=args.fractional_anchor)
    except AssetLoadError as exc:
        for error in exc.errors:
            logger.error("Could not load asset %s", error)
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
