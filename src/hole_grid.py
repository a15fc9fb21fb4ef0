"""Grid of cylindrical cutouts: one row per nominal size, one column per delta."""

from build123d import *

from config import FitmentConfig
from layout import grid_cells


def hole(diameter: float, height: float) -> Part:
    return Cylinder(radius=diameter / 2, height=height)


def hole_grid(cfg: FitmentConfig) -> list[Part]:
    """Cylinders for every grid cell, row-major, spanning Z = 0..plate_thickness.

    Tables are not validated; empty tables give an empty list.
    """
    return [
        Pos(cell.x, cell.y, cfg.plate_thickness / 2)
        * hole(cell.diameter, cfg.plate_thickness)
        for cell in grid_cells(cfg)
    ]
