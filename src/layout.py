"""
Layout math for the fitment tester: where every hole, label and peg goes.

Grid convention (top view, X = columns, Y = rows, Z = up):

    row N-1   o  o  o  ...
    ...
    row 0     o  o  o  ...
            +0.0 +0.1 ...     <- delta labels along the bottom edge

Cell (r, c) is centered at ((c + 0.5) * spacing, (r + 0.5) * spacing).
Nominal-size labels sit in the left margin, pegs one pitch left of the grid.

Nothing here depends on build123d, so the layout is testable without OCCT.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from config import FitmentConfig


@dataclass(frozen=True)
class GridCell:
    """One hole of the plate."""

    row: int
    column: int
    x: float
    y: float
    diameter: float  # nominal + delta

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass(frozen=True)
class LabelPlacement:
    """Text and the point its XY-centered base sits on."""

    text: str
    position: tuple[float, float, float]


@dataclass(frozen=True)
class PegPlacement:
    """A free-standing peg and the label on its top face."""

    diameter: float
    position: tuple[float, float, float]  # cylinder center
    height: float
    label: LabelPlacement


def cell_center(index: int, spacing: float) -> float:
    return (index + 0.5) * spacing


def grid_cells(cfg: FitmentConfig) -> list[GridCell]:
    """Enumerate cells row-major: every column of row 0, then row 1, ..."""
    return [
        GridCell(
            row=row,
            column=col,
            x=cell_center(col, cfg.spacing),
            y=cell_center(row, cfg.spacing),
            diameter=size + delta,
        )
        for row, size in enumerate(cfg.hole_sizes)
        for col, delta in enumerate(cfg.size_deltas)
    ]


# ---------------------------------------------------------------------------
# Plate
# ---------------------------------------------------------------------------
def plate_dimensions(cfg: FitmentConfig) -> tuple[float, float, float]:
    """Slab size: grid plus margin in X and Y, plate thickness in Z."""
    return (
        cfg.grid_width + cfg.margin,
        cfg.grid_height + cfg.margin,
        cfg.plate_thickness,
    )


def plate_center(cfg: FitmentConfig) -> tuple[float, float, float]:
    # Margin lies entirely on the -X/-Y side where the labels go.
    return (
        cfg.grid_width / 2 - cfg.margin / 2,
        cfg.grid_height / 2 - cfg.margin / 2,
        cfg.plate_thickness / 2,
    )


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
def format_delta_label(delta: float) -> str:
    """Signed delta text: 0 -> "+0", -0.2 -> "-0.2", 0.6 -> "+0.6".

    Shortest round-tripping decimal, never exponent form.
    """
    if delta == 0:
        delta = 0.0  # no "-0"
    text = format(Decimal(repr(float(delta))), "f")
    if text.endswith(".0"):
        text = text[:-2]
    if delta >= 0:
        text = "+" + text
    return text


def format_peg_label(diameter: float) -> str:
    # Ties round up on the exact binary value: 2.25 -> "2.3", 6.35 -> "6.3".
    return str(Decimal(diameter).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def row_label_placements(cfg: FitmentConfig) -> list[LabelPlacement]:
    """Nominal-size label left of each row, on top of the plate."""
    return [
        LabelPlacement(
            text=label,
            position=(-cfg.margin / 4, cell_center(row, cfg.spacing), cfg.plate_thickness),
        )
        for row, label in enumerate(cfg.hole_size_labels)
    ]


def column_label_placements(cfg: FitmentConfig) -> list[LabelPlacement]:
    """Delta label under each column, on the grid's bottom edge."""
    return [
        LabelPlacement(
            text=format_delta_label(delta),
            position=(cell_center(col, cfg.spacing), 0.0, cfg.plate_thickness),
        )
        for col, delta in enumerate(cfg.size_deltas)
    ]


# ---------------------------------------------------------------------------
# Pegs
# ---------------------------------------------------------------------------
def peg_placements(cfg: FitmentConfig) -> list[PegPlacement]:
    """One peg per nominal size, in a column one pitch left of the grid."""
    x = -cfg.spacing
    placements = []
    for row, diameter in enumerate(cfg.hole_sizes):
        y = cell_center(row, cfg.spacing)
        placements.append(
            PegPlacement(
                diameter=diameter,
                position=(x, y, cfg.cylinder_height / 2),
                height=cfg.cylinder_height,
                label=LabelPlacement(
                    text=format_peg_label(diameter),
                    position=(x, y, cfg.cylinder_height),
                ),
            )
        )
    return placements
