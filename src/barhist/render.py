from __future__ import annotations

from typing import List, Optional, Sequence, TextIO

from .binning import Histogram
from .config import PrintOptions
from .numeric import Number, max_of, round_half_away


def normalize_to_width(values: Sequence[Number], width: int) -> List[int]:
    """Scale non-negative values to integer columns in ``[0, width - 1]``.

    The largest value lands on ``width - 1``. Raises ``ValueError`` when the
    series has no positive maximum or contains negative values, since no
    column can represent them.
    """
    assert width >= 1, "width must be >= 1"
    if not values:
        return []
    top = float(max_of(values))
    if top <= 0:
        raise ValueError(f"cannot normalize a series whose maximum is {top}")
    if any(v < 0 for v in values):
        raise ValueError("cannot normalize a series with negative values")
    return [int(round_half_away(float(v) / top * (width - 1))) for v in values]


def bar(
    width: int,
    count_col: int,
    sum_col: int,
    pad_symbol: Optional[str],
    symbol: str,
    sum_symbol: Optional[str] = None,
    combined_symbol: Optional[str] = None,
) -> str:
    """One chart row: ``count_col`` pad glyphs, the count glyph, blanks up to ``width``.

    With a ``sum_symbol`` the column ``sum_col`` is overwritten by it, or by
    ``combined_symbol`` when both marks fall on the same column.
    """
    row = (pad_symbol or " ") * max(count_col, 0) + symbol
    row = row.ljust(width)
    if sum_symbol:
        mark = sum_symbol
        if count_col == sum_col and combined_symbol:
            mark = combined_symbol
        row = row[:sum_col] + mark + row[sum_col + 1 :]
    return row


def format_lines(histogram: Histogram, options: PrintOptions) -> List[str]:
    """Chart lines (without newlines), header first, highest bucket next."""
    if len(histogram) == 0:
        return []
    fmt = options.formatter
    counts = histogram.counts()
    sums = histogram.sums()
    count_cols = normalize_to_width(counts, options.width)
    # Sums are only placed on the canvas when a sum glyph is configured
    sum_cols = normalize_to_width(sums, options.width) if options.sum_symbol else [0] * len(sums)
    count_digits = len(str(max_of(counts)))

    lines = [f"{options.prefix}  {fmt(histogram[-1].high)}"]
    for i in range(len(histogram) - 1, -1, -1):
        row = bar(
            options.width,
            count_cols[i],
            sum_cols[i],
            options.pad_symbol,
            options.symbol,
            options.sum_symbol,
            options.combined_symbol,
        )
        tail = str(counts[i]).rjust(count_digits)
        if options.sum_symbol:
            tail += "; " + fmt(sums[i])
        lines.append(f"{options.prefix}> {fmt(histogram[i].low)}: {row} ({tail})")
    return lines


def print_histogram(sink: TextIO, histogram: Histogram, options: Optional[PrintOptions] = None) -> int:
    """Write the text chart of ``histogram`` to ``sink``.

    Nothing is written for an empty histogram. Returns the number of lines
    written.
    """
    assert sink is not None, "sink required"
    lines = format_lines(histogram, options or PrintOptions())
    for line in lines:
        sink.write(line + "\n")
    return len(lines)
