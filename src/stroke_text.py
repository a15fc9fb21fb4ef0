"""Stroke-font text converted to thin 3D solids.

Glyphs come from a Hershey single-stroke vector font as center-line
polylines. Each polyline is fattened into a 2D outline the way a round
pen of width ``line_width`` would draw it: a disc at every vertex, with
consecutive discs joined by their convex hull. The flat outline is then
extruded and centered on X/Y with its base at Z = 0.
"""

from HersheyFonts import HersheyFonts
from build123d import *
from build123d.topology import Shape

from shapes import colorize, empty, is_empty, union_all

Point = tuple[float, float]


def stroke_paths(message: str | None, text_height: float) -> list[list[Point]]:
    """Center-line polylines, one per glyph stroke, scaled to text_height."""
    if not message:
        return []

    font = HersheyFonts()
    font.load_default_font()
    font.normalize_rendering(text_height)

    paths = []
    for stroke in font.strokes_for_text(message):
        points = [(float(x), float(y)) for x, y in stroke]
        if points:
            paths.append(points)
    return paths


def fatten_stroke(points: list[Point], radius: float) -> Sketch:
    """Outline of a polyline traced by a disc of the given radius (hull chain)."""
    corners: list[Point] = []
    for point in points:
        if not corners or point != corners[-1]:
            corners.append(point)

    discs = [Pos(x, y, 0) * Circle(radius) for x, y in corners]
    if len(discs) == 1:
        return discs[0]

    links = [make_hull(a.edges() + b.edges()) for a, b in zip(discs, discs[1:])]
    return union_all(links)


def flat_text(
    message: str | None,
    extrusion_height: float,
    line_width: float,
    text_height: float = 1.5,
    color: tuple[float, float, float] = (1.0, 0.0, 0.0),
) -> Shape:
    """Build text by creating the font strokes (2D), then extruding up (3D).

    Args:
        message: Label text. None or "" gives an empty Compound.
        extrusion_height: Z height of the solid.
        line_width: Stroke width of the pen.
        text_height: Nominal glyph height.
        color: RGB applied to the result.
    """
    if not message:
        return empty()

    line_radius = line_width / 2
    strokes = [
        fatten_stroke(points, line_radius)
        for points in stroke_paths(message, text_height)
    ]
    message_2d = union_all(strokes)
    if is_empty(message_2d):
        # whitespace only
        return empty()

    message_3d = extrude(message_2d, amount=extrusion_height)
    center = message_3d.bounding_box().center()
    message_3d = Pos(-center.X, -center.Y, 0) * message_3d
    return colorize(color, message_3d)
