from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class CoordinateTransform:
    """Forward/inverse pair mapping sample values into the space edges are spaced in.

    Both functions must preserve ordering: ``a < b`` implies
    ``forward(a) <= forward(b)``, and ``inverse`` must undo ``forward`` on the
    transformed range.
    """

    name: str
    forward: Callable[[float], float]
    inverse: Callable[[float], float]


def _identity(x: float) -> float:
    return x


LINEAR = CoordinateTransform(name="linear", forward=_identity, inverse=_identity)


def log10_transform(positive_floor: float) -> CoordinateTransform:
    """log10 forward transform with values below ``positive_floor`` clamped to it."""
    if not positive_floor > 0:
        raise ValueError(f"logarithmic binning needs a positive floor, got {positive_floor!r}")

    def forward(x: float) -> float:
        if x < positive_floor:
            x = positive_floor
        return math.log10(x)

    def inverse(y: float) -> float:
        return math.pow(10.0, y)

    return CoordinateTransform(name="log", forward=forward, inverse=inverse)
