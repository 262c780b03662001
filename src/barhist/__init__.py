"""Text bar-chart histograms.

Linear and logarithmic binning of integer or float samples, rendered as
fixed-width text with an optional overlaid sum track.
"""

from .numeric import sum_of, min_of, max_of, coerce_samples, format_number
from .transforms import CoordinateTransform, LINEAR, log10_transform
from .binning import Bucket, Histogram, create, create_linear, create_log
from .humanize import bytes_str, bytes_pad
from .config import (
    PrintOptions,
    BinningConfig,
    HistogramConfig,
    get_bytes_options,
    load_config,
)
from .render import normalize_to_width, bar, format_lines, print_histogram
from .entities import HistogramSummaryEntity, summarize
from .events import BaseEvent, HistogramBuiltEvent, HistogramRenderedEvent, emit_event

__all__ = [
    "sum_of",
    "min_of",
    "max_of",
    "coerce_samples",
    "format_number",
    "CoordinateTransform",
    "LINEAR",
    "log10_transform",
    "Bucket",
    "Histogram",
    "create",
    "create_linear",
    "create_log",
    "bytes_str",
    "bytes_pad",
    "PrintOptions",
    "BinningConfig",
    "HistogramConfig",
    "get_bytes_options",
    "load_config",
    "normalize_to_width",
    "bar",
    "format_lines",
    "print_histogram",
    "HistogramSummaryEntity",
    "summarize",
    "BaseEvent",
    "HistogramBuiltEvent",
    "HistogramRenderedEvent",
    "emit_event",
]
