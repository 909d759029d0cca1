"""Module entrypoint for `python -m hex_playground`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import argparse

from hex_playground.boards import PLAYGROUND_STANDARD
from hex_playground.config import LOG_LEVEL_DEFAULT
from hex_playground.playground import generate
from hex_playground.runtime import configure_logging
from hex_playground.validation import InvalidArgumentError


def build_parser():
    ap = argparse.ArgumentParser(
        prog="hex_playground",
        description="Print the cells of a hexagonal playground.",
    )
    ap.add_argument("--radius", type=int, default=PLAYGROUND_STANDARD.radius,
                    help="Number of rings around the center cell")
    ap.add_argument("--spacing", type=float, default=PLAYGROUND_STANDARD.spacing,
                    help="Gap between adjacent hexes")
    ap.add_argument("--center", type=float, nargs=3, metavar=("X", "Y", "Z"),
                    default=list(PLAYGROUND_STANDARD.center.as_tuple()))
    ap.add_argument("--log-level", default=LOG_LEVEL_DEFAULT)
    return ap


def format_cell(cell):
    gx, gy, gz = cell.grid.as_tuple()
    px, py, pz = cell.placement.as_tuple()
    return f"{cell.id}\tgrid=({gx}, {gy}, {gz})\tplacement=({px:.3f}, {py:.3f}, {pz:.3f})"


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        ap.error(str(exc))

    try:
        playground = generate(tuple(args.center), args.radius, args.spacing)
    except InvalidArgumentError as exc:
        ap.error(str(exc))

    for cell in playground:
        print(format_cell(cell))
    print(f"{len(playground)} cells, radius {playground.radius}, spacing {playground.spacing}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
