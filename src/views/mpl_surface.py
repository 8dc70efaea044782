from __future__ import annotations

from typing import Optional

import numpy as np
from matplotlib.transforms import Affine2D, Transform


class MplSurface:
    """Surface backed by a matplotlib Affine2D.

    Artists drawn with artist_transform(ax) follow every push, so an
    AffineMatrix attached to this surface moves them in data space.
    """

    def __init__(self, transform: Optional[Affine2D] = None):
        self.transform = transform if transform is not None else Affine2D()

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self.transform.set_matrix(
            np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=float))

    def artist_transform(self, ax) -> Transform:
        return self.transform + ax.transData
