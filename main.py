"""Entry point for playing Tank Skirmish."""

import argparse
import logging

from tank_skirmish import ArenaSettings, run_pygame
from tank_skirmish.pygame.config import DEFAULT_FPS


def main() -> None:
    parser = argparse.ArgumentParser(description="Tank Skirmish arcade battle")
    parser.add_argument("--seed", type=int, default=None, help="seed the AI and spawn randomness")
    parser.add_argument("--width", type=int, default=960, help="playfield width in pixels")
    parser.add_argument("--height", type=int, default=600, help="playfield height in pixels")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="target frame rate")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = ArenaSettings(width=args.width, height=args.height)
    except ValueError as exc:
        parser.error(str(exc))
    run_pygame(settings=settings, seed=args.seed, fps=args.fps, debug=args.debug)


if __name__ == "__main__":
    main()
