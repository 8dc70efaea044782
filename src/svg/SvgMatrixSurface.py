from typing import Optional

from svgelements import Matrix


class SvgMatrixSurface:
    """Surface that mirrors pushed coefficients into an svgelements Matrix.

    Pass an element's own transform (e.g. path.transform) to keep that element
    in sync with an AffineMatrix.
    """

    def __init__(self, matrix: Optional[Matrix] = None):
        self.matrix = matrix if matrix is not None else Matrix()

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        m = self.matrix
        m.a, m.b, m.c, m.d, m.e, m.f = a, b, c, d, e, f
