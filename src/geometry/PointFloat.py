from dataclasses import dataclass
import math
from typing import Any, Dict, Iterator, Tuple

from geometry.VectorFloat import VectorFloat


@dataclass(frozen=True, slots=True)
class PointFloat:
    """Attribute-style point record. Unpacks as (x, y)."""
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def as_dict(self) -> Dict[str, float]: return {"x": self.x, "y": self.y}
    def __iter__(self) -> Iterator[float]: return iter((self.x, self.y))
    def __add__(self, v: VectorFloat) -> "PointFloat": return PointFloat(self.x + v.x, self.y + v.y)
    def __sub__(self, p: "PointFloat") -> VectorFloat: return VectorFloat(self.x - p.x, self.y - p.y)
    def __abs__(self) -> float: return math.hypot(self.x, self.y)

    @staticmethod
    def from_record(pt: Any) -> "PointFloat":
        """Build from a mapping with x/y keys or an object with x/y attributes."""
        if isinstance(pt, PointFloat):
            return pt
        try:
            return PointFloat(pt["x"], pt["y"])
        except (TypeError, KeyError):
            return PointFloat(pt.x, pt.y)
