from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Sequence, Tuple

from geometry.AffineMatrix import AffineMatrix
from views.view_constants import FIT_PADDING, LINE_COLOR, LINE_WIDTH, POINT_COLOR, POINT_RADIUS

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    import tkinter as tk

logger = logging.getLogger(__name__)


def fit_matrix(bounds: Tuple[float, float, float, float], width: int, height: int,
               padding: float = FIT_PADDING) -> AffineMatrix:
    """World -> screen matrix that centers bounds in a width x height view.

    Zoom is uniform and y is flipped so +y points up on screen.
    """
    minx, miny, maxx, maxy = bounds
    dx = maxx - minx or 1.0
    dy = maxy - miny or 1.0
    # Leave a little padding
    zoom = min((width * padding) / dx, (height * padding) / dy)
    cx = (minx + maxx) * 0.5
    cy = (miny + maxy) * 0.5
    return (AffineMatrix()
            .translate(width * 0.5, height * 0.5)
            .scale(zoom, -zoom)
            .translate(-cx, -cy))


class CanvasSurface:
    """Surface for a Tk canvas (or anything with create_line/create_oval/delete).

    Tk has no transform state of its own, so the pushed coefficients are held
    here and applied to world coordinates when drawing.
    """

    def __init__(self, canvas: "tk.Canvas"):
        self.canvas = canvas
        self.matrix = AffineMatrix()

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self.matrix.set_transform(a, b, c, d, e, f)

    def clear(self) -> None:
        self.canvas.delete("all")

    def draw_polyline(self, points: Sequence[Any], fill: str = LINE_COLOR, width: float = LINE_WIDTH):
        """Draw points (any apply_to_array form) as one line item. Returns the item id."""
        mapped = self.matrix.apply_to_array(points)
        if mapped and not isinstance(mapped[0], (int, float)):
            mapped = [v for p in mapped for v in _xy(p)]
        # A trailing unpaired coordinate cannot be drawn
        mapped = mapped[:len(mapped) - len(mapped) % 2]

        # Must be at least 2 points to have any line segments
        if len(mapped) < 4:
            logger.debug("Skipping polyline with %d coordinates", len(mapped))
            return None

        return self.canvas.create_line(*mapped, fill=fill, width=width)

    def draw_point(self, x: float, y: float, fill: str = POINT_COLOR, r: float = POINT_RADIUS):
        # Radius is in screen pixels, only the center is transformed
        xs, ys = self.matrix.apply_to_point(x, y)
        return self.canvas.create_oval(xs - r, ys - r, xs + r, ys + r, outline=fill, fill=fill)


def _xy(p: Any) -> Tuple[float, float]:
    if isinstance(p, dict):
        return p["x"], p["y"]
    x, y = p
    return x, y
