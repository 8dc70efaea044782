from typing import Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """Anything that accepts an absolute 2D transform in (a b c d e f) order.

    A canvas 2D context, a matplotlib artist transform or an svgelements Matrix
    wrapper all qualify. The surface's current state is never read back.
    """

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        ...
