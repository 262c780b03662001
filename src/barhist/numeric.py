from __future__ import annotations

import math
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

Number = Union[int, float]


def sum_of(values: Sequence[Number]) -> Number:
    """Sum of a sequence; 0 for an empty sequence."""
    total: Number = 0
    for v in values:
        total += v
    return total


def min_of(values: Sequence[Number]) -> Number:
    assert len(values) > 0, "min_of requires a non-empty sequence"
    out = values[0]
    for v in values[1:]:
        if v < out:
            out = v
    return out


def max_of(values: Sequence[Number]) -> Number:
    assert len(values) > 0, "max_of requires a non-empty sequence"
    out = values[0]
    for v in values[1:]:
        if v > out:
            out = v
    return out


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, x)


def _is_int(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))


def coerce_samples(values: Iterable[Any]) -> Tuple[List[Number], bool]:
    """Normalize samples to a list of Python numbers of one numeric kind.

    Returns the samples and whether they are of integer kind. numpy arrays are
    classified by dtype; other iterables are integer-kind only when every
    element is an int. Mixed input is promoted to float.
    """
    assert values is not None, "samples required"
    if isinstance(values, np.ndarray):
        arr = values.ravel()
        if np.issubdtype(arr.dtype, np.integer):
            return [int(v) for v in arr.tolist()], True
        assert np.issubdtype(arr.dtype, np.floating), f"unsupported sample dtype: {arr.dtype}"
        return [float(v) for v in arr.tolist()], False

    raw = list(values)
    for v in raw:
        assert isinstance(v, (int, float, np.integer, np.floating)) and not isinstance(v, (bool, np.bool_)), (
            f"samples must be numeric, got {type(v).__name__}"
        )
    if all(_is_int(v) for v in raw):
        return [int(v) for v in raw], True
    return [float(v) for v in raw], False


def format_number(value: Number) -> str:
    """Plain textual form of a sample value; integral floats drop the ``.0``."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
