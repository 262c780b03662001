from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .numeric import Number, coerce_samples, max_of, min_of, round_half_away, sum_of
from .transforms import LINEAR, CoordinateTransform, log10_transform


@dataclass(frozen=True, eq=False)
class Bucket:
    """One bin of a histogram.

    ``low`` is inclusive and ``high`` exclusive, except for the last bucket whose
    ``high`` is inclusive. ``min``/``max`` are only meaningful when ``count > 0``.
    """

    low: Number
    high: Number
    min: Number = 0
    max: Number = 0
    count: int = 0
    sum: Number = 0


class _BucketBuilder:
    __slots__ = ("low", "high", "min", "max", "count", "sum")

    def __init__(self, low: Number, zero: Number):
        self.low = low
        self.high = low
        self.min = zero
        self.max = zero
        self.count = 0
        self.sum = zero

    def add(self, value: Number) -> None:
        self.count += 1
        self.sum += value
        if self.count == 1:
            self.min = value
            self.max = value
        # else-if: a new minimum never also updates the maximum
        elif value < self.min:
            self.min = value
        elif value > self.max:
            self.max = value

    def freeze(self) -> Bucket:
        return Bucket(low=self.low, high=self.high, min=self.min, max=self.max, count=self.count, sum=self.sum)


class Histogram:
    """Immutable, ordered sequence of buckets with ascending ``low`` edges."""

    __slots__ = ("_buckets", "_is_integer", "_mode")

    def __init__(self, buckets: Iterable[Bucket] = (), *, is_integer: bool = False, mode: str = "linear"):
        self._buckets: Tuple[Bucket, ...] = tuple(buckets)
        self._is_integer = bool(is_integer)
        self._mode = mode

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self._buckets)

    def __getitem__(self, index: Union[int, slice]) -> Union[Bucket, Tuple[Bucket, ...]]:
        return self._buckets[index]

    def __bool__(self) -> bool:
        return len(self._buckets) > 0

    def __repr__(self) -> str:
        return f"Histogram(mode={self._mode!r}, buckets={len(self._buckets)}, samples={sum_of(self.counts())})"

    @property
    def is_integer(self) -> bool:
        return self._is_integer

    @property
    def mode(self) -> str:
        return self._mode

    def edges(self) -> List[Number]:
        """All bucket boundaries: each bucket's low plus the last bucket's high."""
        if not self._buckets:
            return []
        return [b.low for b in self._buckets] + [self._buckets[-1].high]

    def counts(self) -> List[int]:
        return [b.count for b in self._buckets]

    def sums(self) -> List[Number]:
        return [b.sum for b in self._buckets]


def _linear_lows(lo: Number, hi: Number, bucket_count: int, is_integer: bool) -> List[Number]:
    if is_integer:
        spacing = (hi - lo) // bucket_count
    else:
        spacing = (hi - lo) / bucket_count
    return [lo + i * spacing for i in range(bucket_count)]


def _transformed_lows(
    lo: Number, hi: Number, bucket_count: int, is_integer: bool, transform: CoordinateTransform
) -> List[Number]:
    start = transform.forward(lo)
    spacing = (transform.forward(hi) - start) / float(bucket_count)
    lows: List[Number] = [lo]
    for i in range(1, bucket_count):
        edge = transform.inverse(start + i * spacing)
        edge = int(round_half_away(edge)) if is_integer else float(edge)
        # inverse(forward(x)) drifts by an ulp; keep lows within [previous low, hi]
        lows.append(min(max(edge, lows[-1]), hi))
    return lows


def _build(
    samples: Sequence[Number],
    is_integer: bool,
    bucket_count: int,
    transform: CoordinateTransform,
) -> List[_BucketBuilder]:
    lo = min_of(samples)
    hi = max_of(samples)

    # Narrow integer ranges get one bucket per value
    if is_integer and (hi - lo) < bucket_count:
        bucket_count = int(hi - lo) + 1
        hi += 1

    if transform is LINEAR:
        lows = _linear_lows(lo, hi, bucket_count, is_integer)
    else:
        lows = _transformed_lows(lo, hi, bucket_count, is_integer, transform)

    zero: Number = 0 if is_integer else 0.0
    builders = [_BucketBuilder(low, zero) for low in lows]
    for i in range(bucket_count - 1):
        builders[i].high = builders[i + 1].low
    # Last edge is the data maximum itself, not lo + n*spacing
    builders[-1].high = hi

    for v in samples:
        index = 0
        if v > lows[0]:
            index = bisect_right(lows, v) - 1
        builders[index].add(v)
    return builders


def create(
    samples: Any,
    bucket_count: int,
    transform: Optional[CoordinateTransform] = None,
) -> Histogram:
    """Bin ``samples`` into ``bucket_count`` buckets with edges spaced evenly in ``transform`` space.

    Args:
        samples: Sequence or numpy array of integers or floats.
        bucket_count: Requested number of buckets (>= 1). Integer samples whose
            range is narrower than this get ``max - min + 1`` buckets instead.
        transform: Order-preserving coordinate transform; defaults to ``LINEAR``.

    Returns:
        An immutable ``Histogram``; empty when there are no samples.
    """
    assert isinstance(bucket_count, int) and bucket_count >= 1, "bucket_count must be >= 1"
    transform = transform or LINEAR
    values, is_integer = coerce_samples(samples)
    if not values:
        return Histogram(is_integer=is_integer, mode=transform.name)
    builders = _build(values, is_integer, bucket_count, transform)
    return Histogram((b.freeze() for b in builders), is_integer=is_integer, mode=transform.name)


def create_linear(samples: Any, bucket_count: int) -> Histogram:
    """Histogram with equal-width buckets in the sample domain."""
    return create(samples, bucket_count, LINEAR)


def create_log(samples: Any, bucket_count: int) -> Histogram:
    """Histogram with equal-width buckets in log10 space.

    Samples below the smallest positive sample are binned as if equal to it;
    the first bucket's ``low`` still reports the true minimum.
    """
    assert isinstance(bucket_count, int) and bucket_count >= 1, "bucket_count must be >= 1"
    values, is_integer = coerce_samples(samples)
    if not values:
        return Histogram(is_integer=is_integer, mode="log")
    positives = [v for v in values if v > 0]
    if not positives:
        raise ValueError("logarithmic binning requires at least one positive sample")
    builders = _build(values, is_integer, bucket_count, log10_transform(min_of(positives)))
    builders[0].low = min_of(values)
    return Histogram((b.freeze() for b in builders), is_integer=is_integer, mode="log")
