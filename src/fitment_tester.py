"""Hole/peg fitment tester.

A plate with a grid of holes (nominal size per row, fine delta per column)
and a matching set of pegs at the nominal sizes. Print it, then try pegs
and stock parts in the holes to find the delta that gives the fit you want
for your printer and material.

Layout (top view):

    [pegs]  [size labels] | o  o  o  o  o  o |   <- one row per nominal size
                          | o  o  o  o  o  o |
                            -0.2 +0 +0.1 ...     <- delta per column

Usage:
    fitment-tester                    # default profile
    fitment-tester --profile compact  # two sizes, three deltas
"""

import argparse
import sys

from build123d import *
from build123d.topology import Shape

from config import FitmentConfig, available_profiles, load_config
from labels import plate_labels
from layout import plate_dimensions
from pegs import create_cylinders
from plate import fitment_test_plate
from shapes import colorize, named, union_all

PART_NAMES = ("plate", "plate_labels", "cylinders", "cylinder_labels")


def generate_fitment_test(cfg: FitmentConfig | None = None) -> list[Shape]:
    """Build the four named parts: plate, plate_labels, cylinders, cylinder_labels."""
    if cfg is None:
        cfg = FitmentConfig()

    plate = named(fitment_test_plate(cfg), "plate")
    labels = named(plate_labels(cfg), "plate_labels")

    cylinders, cylinder_labels = create_cylinders(cfg)
    cylinders = named(union_all(cylinders), "cylinders")
    cylinder_labels = named(
        colorize(cfg.text_color, union_all(cylinder_labels)), "cylinder_labels"
    )

    return [plate, labels, cylinders, cylinder_labels]


def print_report(cfg: FitmentConfig, parts: list[Shape]) -> None:
    length, width, thickness = plate_dimensions(cfg)
    print("Fitment Tester")
    print("=" * 60)
    print(
        f"\nGrid: {cfg.rows} sizes x {cfg.columns} deltas, pitch {cfg.spacing:.2f} mm"
    )
    print(f"Sizes:  {', '.join(cfg.hole_size_labels)}")
    print(f"Deltas: {', '.join(f'{d:+g}' for d in cfg.size_deltas)}")
    print(f"Plate:  {length:.2f} x {width:.2f} x {thickness:.2f} mm")

    print("\nParts:")
    for part in parts:
        bb = part.bounding_box()
        print(
            f"  {part.label}: {bb.size.X:.2f} x {bb.size.Y:.2f} x {bb.size.Z:.2f} mm, "
            f"{len(part.solids())} solid(s)"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Hole/peg fitment tester generator")
    parser.add_argument(
        "--profile",
        default=None,
        help=f"config.toml profile ({', '.join(available_profiles())})",
    )
    args = parser.parse_args(argv)

    try:
        # "" keeps load_config from re-reading sys.argv
        cfg = load_config(args.profile or "")
    except ValueError as e:
        print("Configuration FAILED:")
        for issue in str(e).splitlines():
            print(f"  ✗ {issue}")
        return 1

    parts = generate_fitment_test(cfg)
    print_report(cfg, parts)
    print("\nFitment tester build complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
