import logging
import math
import re
from typing import List, Optional

from geometry.AffineMatrix import AffineMatrix
from views.surface import Surface

logger = logging.getLogger(__name__)

KNOWN_TRANSFORMS = ("matrix", "translate", "scale", "rotate", "skewX", "skewY")

TRANSFORM_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")


def _parse_args(args: str) -> List[float]:
    return [float(p) for p in re.split(r"[ ,]+", args.strip()) if p]


def parse_svg_transform(transform_str: Optional[str], surface: Optional[Surface] = None) -> AffineMatrix:
    """Parse an SVG transform attribute into an AffineMatrix.

    Functions compose left to right, each in the frame of the ones before it,
    matching how SVG nests them. Angles are in degrees.
    Unknown functions and wrong argument counts are skipped; arguments that
    are not numbers raise ValueError.
    """
    m = AffineMatrix(surface)
    if not transform_str:
        return m

    for name, args in TRANSFORM_RE.findall(transform_str):
        if name not in KNOWN_TRANSFORMS:
            logger.warning("Skipping unknown SVG transform %s(%s)", name, args.strip())
            continue
        parts = _parse_args(args)
        if name == "matrix" and len(parts) == 6:
            m.transform(*parts)
        elif name == "translate" and len(parts) in (1, 2):
            m.translate(parts[0], parts[1] if len(parts) == 2 else 0.0)
        elif name == "scale" and len(parts) in (1, 2):
            m.scale(parts[0], parts[1] if len(parts) == 2 else parts[0])
        elif name == "rotate" and len(parts) == 1:
            m.rotate_deg(parts[0])
        elif name == "rotate" and len(parts) == 3:
            angle, cx, cy = parts
            m.translate(cx, cy).rotate_deg(angle).translate(-cx, -cy)
        elif name == "skewX" and len(parts) == 1:
            m.skew_x(math.tan(math.radians(parts[0])))
        elif name == "skewY" and len(parts) == 1:
            m.skew_y(math.tan(math.radians(parts[0])))
        else:
            logger.warning("Skipping SVG transform %s(%s)", name, args.strip())
    return m
