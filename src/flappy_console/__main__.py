"""
Command-line entry point: ``python -m flappy_console`` or ``flappy-console``.
"""

import argparse
import logging
import random
import sys

from .constants import CELL_SIZE, RENDER_FPS
from .pygame_client import ConsoleInitError, FlappyClient
from .simulation import Simulation

logger = logging.getLogger("flappy_console")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-console", description="Flappy Bird on an 80x50 character grid.")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle gaps")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="render frame cap")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    simulation = Simulation(rng=random.Random(args.seed))
    client = FlappyClient(simulation, cell_size=args.cell_size, fps=args.fps)
    try:
        client.run()
    except ConsoleInitError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
