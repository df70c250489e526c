"""Simple ASCII demo for the shape algebra.

Run with: `python -m tetris_shapes`

Prints a handful of random catalogue shapes with their rotations, then combines
two of them side by side.  Useful as a smoke test for the rendering helpers.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .catalog import make_rng, random_color, random_shapes
from .shape import size
from .transform import combine, overlaps, rotate_shape_n, shift_shape
from .utils import render_shape, render_shapes


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shape generator.")
    parser.add_argument("--count", type=int, default=2, help="How many random shapes to draw.")
    parser.add_argument(
        "--rotations",
        type=int,
        default=1,
        help="Quarter turns applied to each drawn shape before printing.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s"
    )

    rng = make_rng(args.seed)
    shapes = random_shapes(max(0, args.count), rng)
    LOGGER.info(
        "Drew %d shapes (seed=%s), random colour: %s",
        len(shapes),
        args.seed,
        random_color(rng).value,
    )

    rotated = [rotate_shape_n(shape, args.rotations) for shape in shapes]
    print(render_shapes(rotated), end="")

    if len(rotated) >= 2:
        first, second = rotated[0], rotated[1]
        # Place the second shape to the right of the first so they never touch.
        moved = shift_shape(size(first)[0], 0, second)
        LOGGER.info("Overlap after shift: %s", overlaps(first, moved))
        print(render_shape(combine(first, moved, strict=True)), end="")


if __name__ == "__main__":
    main()
