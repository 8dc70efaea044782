from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

import numpy as np

from geometry.constants import IDENTITY
from geometry.PointFloat import PointFloat
from geometry.Tolerance import Tolerance
from geometry.VectorFloat import VectorFloat

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    from views.surface import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decomposition:
    translate: PointFloat
    rotation: float
    scale: VectorFloat
    skew: VectorFloat


class AffineMatrix:
    """Mutable 2D affine transform: 3x3 homogeneous matrix with implicit bottom row.

    Coefficients use SVG / canvas order (a b c d e f):

        | a  c  e |
        | b  d  f |
        | 0  0  1 |

    Points are column vectors [x, y, 1]^T. Every accumulating call right-multiplies,
    so a new transform happens in the frame set up by the previous ones.

    When a surface is attached, every mutation pushes the six coefficients to it
    with surface.set_transform(a, b, c, d, e, f). The matrix never reads from or
    closes the surface.
    """

    def __init__(self, surface: Optional["Surface"] = None):
        self.a, self.b, self.c, self.d, self.e, self.f = IDENTITY
        self.surface = surface

        # Start in sync: whatever the surface held before is discarded
        self._sync()

    # -----------------------------
    # Construction helpers
    # -----------------------------

    @classmethod
    def from_values(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> AffineMatrix:
        m = cls()
        m.a, m.b, m.c, m.d, m.e, m.f = a, b, c, d, e, f
        return m

    @classmethod
    def from_numpy(cls, m: np.ndarray) -> AffineMatrix:
        """From a 3x3 homogeneous array (bottom row ignored)."""
        m = np.asarray(m, dtype=float).reshape(3, 3)
        return cls.from_values(m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2])

    @classmethod
    def from_svg_matrix(cls, m: Any) -> AffineMatrix:
        """Copy coefficients from an svgelements.Matrix (or anything with a..f)."""
        return cls.from_values(
            float(getattr(m, "a", 1.0)),
            float(getattr(m, "b", 0.0)),
            float(getattr(m, "c", 0.0)),
            float(getattr(m, "d", 1.0)),
            float(getattr(m, "e", 0.0)),
            float(getattr(m, "f", 0.0)),
        )

    def clone(self) -> AffineMatrix:
        """Copy of the coefficients. The copy has no surface attached."""
        return AffineMatrix.from_values(*self.to_array())

    # -----------------------------
    # Mutation primitives
    # -----------------------------

    def reset(self) -> AffineMatrix:
        self.a, self.b, self.c, self.d, self.e, self.f = IDENTITY
        self._sync()
        return self

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> AffineMatrix:
        """Overwrite all six coefficients (no composition)."""
        self.a, self.b, self.c, self.d, self.e, self.f = a, b, c, d, e, f
        self._sync()
        return self

    def transform(self, a2: float, b2: float, c2: float, d2: float, e2: float, f2: float) -> AffineMatrix:
        """Right-multiply the current matrix by (a2 b2 c2 d2 e2 f2)."""
        # All six outputs are computed from the values before this call
        a1, b1, c1, d1, e1, f1 = self.a, self.b, self.c, self.d, self.e, self.f

        self.a, self.b, self.c, self.d, self.e, self.f = (
            a1 * a2 + c1 * b2,
            b1 * a2 + d1 * b2,
            a1 * c2 + c1 * d2,
            b1 * c2 + d1 * d2,
            a1 * e2 + c1 * f2 + e1,
            b1 * e2 + d1 * f2 + f1,
        )
        self._sync()
        return self

    def multiply(self, m: AffineMatrix) -> AffineMatrix:
        return self.transform(m.a, m.b, m.c, m.d, m.e, m.f)

    def add(self, a: float, b: float, c: float, d: float, e: float, f: float) -> AffineMatrix:
        """Element-wise addition of coefficients."""
        return self.set_transform(self.a + a, self.b + b, self.c + c, self.d + d, self.e + e, self.f + f)

    def add_matrix(self, m: AffineMatrix) -> AffineMatrix:
        return self.add(m.a, m.b, m.c, m.d, m.e, m.f)

    def subtract(self, a: float, b: float, c: float, d: float, e: float, f: float) -> AffineMatrix:
        """Element-wise subtraction of coefficients."""
        return self.set_transform(self.a - a, self.b - b, self.c - c, self.d - d, self.e - e, self.f - f)

    def subtract_matrix(self, m: AffineMatrix) -> AffineMatrix:
        return self.subtract(m.a, m.b, m.c, m.d, m.e, m.f)

    def __matmul__(self, other: AffineMatrix) -> AffineMatrix:
        if not isinstance(other, AffineMatrix):
            return NotImplemented
        return self.clone().multiply(other)

    # -----------------------------
    # Named transforms
    # -----------------------------

    def rotate(self, angle: float) -> AffineMatrix:
        """Rotate by angle in radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return self.transform(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)

    def rotate_deg(self, angle_deg: float) -> AffineMatrix:
        return self.rotate(angle_deg * math.pi / 180.0)

    def rotate_from_vector(self, x: float, y: float) -> AffineMatrix:
        """Rotate so the x axis points along (x, y)."""
        return self.rotate(VectorFloat(x, y).angle())

    def scale(self, sx: float, sy: float) -> AffineMatrix:
        return self.transform(sx, 0.0, 0.0, sy, 0.0, 0.0)

    def scale_uniform(self, factor: float) -> AffineMatrix:
        return self.scale(factor, factor)

    def scale_x(self, sx: float) -> AffineMatrix:
        return self.transform(sx, 0.0, 0.0, 1.0, 0.0, 0.0)

    def scale_y(self, sy: float) -> AffineMatrix:
        return self.transform(1.0, 0.0, 0.0, sy, 0.0, 0.0)

    def translate(self, tx: float, ty: float) -> AffineMatrix:
        return self.transform(1.0, 0.0, 0.0, 1.0, tx, ty)

    def translate_x(self, tx: float) -> AffineMatrix:
        return self.transform(1.0, 0.0, 0.0, 1.0, tx, 0.0)

    def translate_y(self, ty: float) -> AffineMatrix:
        return self.transform(1.0, 0.0, 0.0, 1.0, 0.0, ty)

    def skew(self, sx: float, sy: float) -> AffineMatrix:
        """Skew by raw factors (not angles): sx shears x by y, sy shears y by x."""
        return self.transform(1.0, sy, sx, 1.0, 0.0, 0.0)

    def skew_x(self, sx: float) -> AffineMatrix:
        return self.transform(1.0, 0.0, sx, 1.0, 0.0, 0.0)

    def skew_y(self, sy: float) -> AffineMatrix:
        return self.transform(1.0, sy, 0.0, 1.0, 0.0, 0.0)

    def flip_x(self) -> AffineMatrix:
        return self.transform(-1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def flip_y(self) -> AffineMatrix:
        return self.transform(1.0, 0.0, 0.0, -1.0, 0.0, 0.0)

    # -----------------------------
    # Point application
    # -----------------------------

    def apply_to_point(self, x: float, y: float) -> PointFloat:
        return PointFloat(x * self.a + y * self.c + self.e, x * self.b + y * self.d + self.f)

    def apply_to_array(self, points: Sequence[Any]) -> List[Any]:
        """Apply to a batch of points, echoing the input representation.

        Accepts a flat list [x1, y1, x2, y2, ...], a list of {"x", "y"} mappings,
        a list of (x, y) pairs or a list of objects with .x / .y. The kind is taken
        from the first element. Empty input gives an empty flat list. A trailing
        unpaired value in a flat list is copied through unchanged.
        """
        if len(points) == 0:
            return []

        first = points[0]
        out: List[Any] = []

        if Tolerance.is_number(first):
            n = len(points) - len(points) % 2
            for i in range(0, n, 2):
                p = self.apply_to_point(points[i], points[i + 1])
                out.extend(p)
            if n != len(points):
                out.append(points[-1])
        elif Tolerance.is_mapping_point(first):
            for pt in points:
                out.append(self.apply_to_point(pt["x"], pt["y"]).as_dict())
        elif Tolerance.is_pair(first):
            for x, y in points:
                out.append(self.apply_to_point(x, y).as_tuple())
        else:
            for pt in points:
                out.append(self.apply_to_point(pt.x, pt.y))

        return out

    def apply_to_buffer(self, points: Any) -> np.ndarray:
        """Apply to flat x, y pairs and return a float32 buffer of the same length."""
        src = np.asarray(points, dtype=np.float64).reshape(-1)
        out = np.empty(src.shape[0], dtype=np.float32)
        n = src.shape[0] - src.shape[0] % 2

        xs = src[0:n:2]
        ys = src[1:n:2]
        out[0:n:2] = xs * self.a + ys * self.c + self.e
        out[1:n:2] = xs * self.b + ys * self.d + self.f
        if n != src.shape[0]:
            out[-1] = src[-1]
        return out

    # -----------------------------
    # Surfaces
    # -----------------------------

    def apply_to_surface(self, surface: "Surface") -> AffineMatrix:
        """Push the current coefficients to any surface (not only the attached one)."""
        surface.set_transform(self.a, self.b, self.c, self.d, self.e, self.f)
        return self

    def _sync(self) -> None:
        if self.surface is not None:
            logger.debug("Sync surface %r <- %r", self.surface, self)
            self.apply_to_surface(self.surface)

    # -----------------------------
    # Derived matrices
    # -----------------------------

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def is_invertible(self) -> bool:
        """True unless |determinant| < EPSILON.

        The threshold is absolute, so a tiny but valid scale such as
        scale(1e-8, 1e-8) (determinant 1e-16) also reports False.
        """
        return not Tolerance.nearly_equal(self.determinant(), 0.0)

    def invert(self) -> AffineMatrix:
        """Inverse as a new matrix with no surface.

        A singular matrix is not reported: its inverse has inf/nan coefficients.
        Check is_invertible() first if that matters.
        """
        a, b, c, d, e, f = (np.float64(v) for v in self.to_array())
        dt = a * d - b * c
        if dt == 0.0:
            logger.debug("Inverting singular matrix %r", self)

        with np.errstate(divide="ignore", invalid="ignore"):
            values = (
                d / dt,
                -b / dt,
                -c / dt,
                a / dt,
                (c * f - d * e) / dt,
                -(a * f - b * e) / dt,
            )
        return AffineMatrix.from_values(*(float(v) for v in values))

    def interpolate(self, other: AffineMatrix, t: float) -> AffineMatrix:
        """Per-coefficient linear interpolation; t is not clamped.

        t = 0 gives this matrix and t = 1 gives other. This is not a
        rotation-aware blend, so two rotations do not interpolate to a rotation.
        """
        return AffineMatrix.from_values(*(
            k1 + (k2 - k1) * t for k1, k2 in zip(self.to_array(), other.to_array())
        ))

    def decompose(self) -> Decomposition:
        """QR-style split into translate, rotation (radians), scale and skew."""
        a, b, c, d = self.a, self.b, self.c, self.d
        determ = a * d - b * c
        rotation = 0.0
        scale = VectorFloat(1.0, 1.0)
        skew = VectorFloat(0.0, 0.0)

        if a != 0.0 or b != 0.0:
            r = math.hypot(a, b)
            cos_r = max(-1.0, min(1.0, a / r))
            rotation = math.acos(cos_r) if b > 0 else -math.acos(cos_r)
            scale = VectorFloat(r, determ / r)
            skew = VectorFloat(math.atan((a * c + b * d) / (r * r)), 0.0)
        elif c != 0.0 or d != 0.0:
            s = math.hypot(c, d)
            rotation = math.pi * 0.5 - (math.acos(-c / s) if d > 0 else -math.acos(c / s))
            scale = VectorFloat(determ / s, s)
            skew = VectorFloat(0.0, math.atan((a * c + b * d) / (s * s)))
        else:
            scale = VectorFloat(0.0, 0.0)

        return Decomposition(PointFloat(self.e, self.f), rotation, scale, skew)

    # -----------------------------
    # Comparison
    # -----------------------------

    def is_identity(self) -> bool:
        return Tolerance.all_nearly_equal(self.to_array(), IDENTITY)

    def is_equal(self, other: AffineMatrix) -> bool:
        return Tolerance.all_nearly_equal(self.to_array(), other.to_array())

    # -----------------------------
    # Conversions
    # -----------------------------

    def to_array(self) -> Tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def to_numpy(self) -> np.ndarray:
        return np.array(
            [[self.a, self.c, self.e], [self.b, self.d, self.f], [0.0, 0.0, 1.0]], dtype=float
        )

    def to_css(self) -> str:
        return "matrix(" + ",".join(repr(float(v)) for v in self.to_array()) + ")"

    to_svg = to_css

    def __repr__(self) -> str:
        return (
            f"AffineMatrix(a={self.a!r}, b={self.b!r}, c={self.c!r}, "
            f"d={self.d!r}, e={self.e!r}, f={self.f!r})"
        )


