from __future__ import annotations

from typing import Union

import numpy as np

# EiB is the last unit a 64-bit unsigned size can reach
SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

PAD_WIDTH = 10


def bytes_str(size: Union[int, np.integer]) -> str:
    """Human-readable binary byte size, e.g. ``600000 -> "585.9 KiB"``."""
    size = int(size)
    if size < 0:
        raise ValueError(f"byte size must be non-negative, got {size}")
    if size == 0:
        return "0 B"
    power = 0
    while power < len(SIZE_UNITS) - 1 and size >= 1024 ** (power + 1):
        power += 1
    if power == 0:
        return f"{size} B"
    return f"{size / float(1024 ** power):.1f} {SIZE_UNITS[power]}"


def bytes_pad(size: Union[int, np.integer]) -> str:
    """Fixed-width variant of ``bytes_str`` for column alignment.

    The unit always occupies the last three columns: ``"  10     B"``,
    ``"   9.8 KiB"``.
    """
    text = bytes_str(size)
    if text.endswith(" B"):
        text = text[: -len(" B")] + "     B"
    return text.rjust(PAD_WIDTH)
