"""Free-standing pegs, one per nominal size, each topped with its diameter."""

from build123d import *
from build123d.topology import Shape

from config import FitmentConfig
from labels import label_solid
from layout import peg_placements


def cylinder_part(diameter: float, height: float) -> Part:
    return Cylinder(radius=diameter / 2, height=height)


def create_cylinders(cfg: FitmentConfig) -> tuple[list[Part], list[Shape]]:
    """Build the peg cylinders and their labels as two parallel lists.

    Pegs test nominal sizes only; size_deltas plays no part here.
    """
    cylinders = []
    labels = []
    for peg in peg_placements(cfg):
        cylinders.append(Pos(*peg.position) * cylinder_part(peg.diameter, peg.height))
        labels.append(label_solid(cfg, peg.label))
    return cylinders, labels
