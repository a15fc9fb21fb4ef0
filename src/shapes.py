"""Small build123d helpers shared by the part builders."""

from build123d import *
from build123d.topology import Shape


def is_empty(shape: Shape) -> bool:
    """True for shapes with no geometry, e.g. the result of an empty label."""
    return not shape.faces()


def empty() -> Compound:
    return Compound([])


def union_all(shapes) -> Shape:
    """Fuse shapes (2D or 3D) into one. Empty shapes are ignored."""
    shapes = [shape for shape in shapes if not is_empty(shape)]
    if not shapes:
        return empty()
    if len(shapes) == 1:
        return shapes[0]
    return shapes[0].fuse(*shapes[1:])


def place(shape: Shape, position) -> Shape:
    """Translate shape by position (x, y, z)."""
    if is_empty(shape):
        return shape
    return Pos(*position) * shape


def colorize(color, shape: Shape) -> Shape:
    """Set the display color (r, g, b in [0, 1]). Re-applying is harmless."""
    shape.color = Color(*color)
    return shape


def named(shape: Shape, name: str) -> Shape:
    shape.label = name
    return shape
