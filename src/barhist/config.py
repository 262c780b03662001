from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator
import yaml

from .humanize import bytes_pad, bytes_str
from .numeric import format_number

FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "default": format_number,
    "bytes": bytes_pad,
    "bytes_short": bytes_str,
}


class PrintOptions(BaseModel):
    """Display options for ``print_histogram``.

    ``sum_symbol``/``combined_symbol`` of ``None`` disable the sum track and the
    coincidence marker respectively.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=1, default=40)
    prefix: str = Field(default="")
    symbol: str = Field(default="|")
    pad_symbol: str = Field(default=" ")
    sum_symbol: Optional[str] = Field(default=None, description="Glyph marking the normalized bucket sum")
    combined_symbol: Optional[str] = Field(default=None, description="Glyph used when count and sum marks coincide")
    formatter: Callable[[Any], str] = Field(default=format_number, description="Value -> text for edges and sums")

    @field_validator("symbol", "pad_symbol", "sum_symbol", "combined_symbol")
    @classmethod
    def _single_glyph(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        assert len(v) == 1, f"glyph must be a single character, got {v!r}"
        return v

    @field_validator("formatter", mode="before")
    @classmethod
    def _resolve_formatter(cls, v: Any) -> Callable[[Any], str]:
        if v is None:
            return format_number
        if isinstance(v, str):
            if v not in FORMATTERS:
                raise ValueError(f"unknown formatter {v!r}; expected one of {sorted(FORMATTERS)}")
            return FORMATTERS[v]
        assert callable(v), "formatter must be callable or a registered name"
        return v


def get_bytes_options(width: int, print_sum: bool = False) -> PrintOptions:
    """Options for histograms of byte sizes, optionally plotting bucket sums."""
    extra: Dict[str, Any] = {}
    if print_sum:
        extra = {"sum_symbol": "S", "combined_symbol": "$"}
    return PrintOptions(width=width, prefix="  ", symbol="|", pad_symbol="-", formatter=bytes_pad, **extra)


class BinningConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["linear", "log"] = Field(default="linear")
    bucket_count: int = Field(ge=1, default=10)


class HistogramConfig(BaseModel):
    """Typed, immutable configuration for building and printing a histogram."""

    model_config = ConfigDict(frozen=True)

    version: int = Field(ge=0, default=1)
    binning: BinningConfig = Field(default_factory=BinningConfig)
    display: PrintOptions = Field(default_factory=PrintOptions)


def load_config(path: Union[str, Path]) -> HistogramConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        Immutable, validated `HistogramConfig`.
    """
    assert path is not None, "path required"
    path_obj = Path(path)
    assert path_obj.exists(), f"Config file not found: {path_obj}"
    with path_obj.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return HistogramConfig(
        version=raw.get("version", 1),
        binning=BinningConfig(**(raw.get("binning") or {})),
        display=PrintOptions(**(raw.get("display") or {})),
    )
