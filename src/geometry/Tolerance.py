import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from geometry.constants import EPSILON


@dataclass(frozen=True)
class Tolerance:
    @staticmethod
    def nearly_equal(a: float, b: float) -> bool:
        """True if |a - b| is strictly below EPSILON."""
        return abs(a - b) < EPSILON

    @staticmethod
    def all_nearly_equal(xs, ys) -> bool:
        return all(Tolerance.nearly_equal(x, y) for x, y in zip(xs, ys))

    @staticmethod
    def is_number(value: Any) -> bool:
        # numpy scalars register themselves as numbers.Real
        return isinstance(value, numbers.Real) and not isinstance(value, bool)

    @staticmethod
    def is_mapping_point(value: Any) -> bool:
        return isinstance(value, Mapping) and "x" in value and "y" in value

    @staticmethod
    def is_pair(value: Any) -> bool:
        if isinstance(value, (str, bytes)) or hasattr(value, "x"):
            return False
        try:
            return len(value) == 2
        except TypeError:
            return False
