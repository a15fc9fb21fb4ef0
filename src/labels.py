"""Text labels on top of the plate: nominal size per row, delta per column."""

from build123d import *
from build123d.topology import Shape

from config import FitmentConfig
from layout import LabelPlacement, column_label_placements, row_label_placements
from shapes import colorize, place, union_all
from stroke_text import flat_text


def label_solid(cfg: FitmentConfig, placement: LabelPlacement) -> Shape:
    text = flat_text(
        placement.text,
        cfg.text_depth,
        cfg.text_line_width,
        text_height=cfg.text_height,
        color=cfg.text_color,
    )
    return place(text, placement.position)


def row_text_labels(cfg: FitmentConfig) -> list[Shape]:
    """Add text for nominal dimension per row."""
    return [label_solid(cfg, placement) for placement in row_label_placements(cfg)]


def column_text_labels(cfg: FitmentConfig) -> list[Shape]:
    """Add text for delta dimension per column."""
    return [label_solid(cfg, placement) for placement in column_label_placements(cfg)]


def plate_labels(cfg: FitmentConfig) -> Shape:
    """All plate labels as one solid, recolored as a batch."""
    labels = union_all(row_text_labels(cfg) + column_text_labels(cfg))
    return colorize(cfg.text_color, labels)
