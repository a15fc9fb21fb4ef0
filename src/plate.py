"""Base plate perforated with the calibration hole grid."""

from build123d import *

from config import FitmentConfig
from hole_grid import hole_grid
from layout import plate_center, plate_dimensions


def base_plate(cfg: FitmentConfig) -> Part:
    length, width, thickness = plate_dimensions(cfg)
    return Pos(*plate_center(cfg)) * Box(length, width, thickness)


def fitment_test_plate(cfg: FitmentConfig) -> Part:
    """Create a base plate with the holes cut through it."""
    plate = base_plate(cfg)
    holes = hole_grid(cfg)
    if not holes:
        return plate
    return plate.cut(*holes)
