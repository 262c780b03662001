from pathlib import Path

import pytest
from pydantic import ValidationError

from barhist.config import HistogramConfig, PrintOptions, get_bytes_options, load_config
from barhist.humanize import bytes_pad, bytes_str
from barhist.numeric import format_number


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "test.yaml"
    cfg_path.write_text("{}", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.binning.mode == "linear"
    assert cfg.binning.bucket_count >= 1
    assert cfg.display.width >= 1
    assert cfg.display.sum_symbol is None
    assert cfg.display.formatter is format_number


def test_load_config_values(tmp_path: Path) -> None:
    cfg_path = tmp_path / "hist.yaml"
    cfg_path.write_text(
        "binning:\n  mode: log\n  bucket_count: 6\n"
        "display:\n  width: 30\n  prefix: '  '\n  sum_symbol: S\n  combined_symbol: $\n  formatter: bytes\n",
        encoding="utf-8",
    )
    cfg = load_config(cfg_path)
    assert cfg.binning.mode == "log"
    assert cfg.binning.bucket_count == 6
    assert cfg.display.formatter is bytes_pad
    assert cfg.display.sum_symbol == "S"


def test_repo_default_config_loads() -> None:
    cfg = load_config(Path(__file__).resolve().parents[2] / "configs" / "default.yaml")
    assert isinstance(cfg, HistogramConfig)
    assert cfg.display.formatter is bytes_pad


def test_invalid_options_rejected() -> None:
    with pytest.raises(ValidationError):
        PrintOptions(symbol="||")
    with pytest.raises(ValidationError):
        PrintOptions(width=0)
    with pytest.raises(ValidationError):
        PrintOptions(formatter="hex")
    with pytest.raises(ValidationError):
        HistogramConfig(binning={"mode": "sqrt"})


def test_options_are_frozen() -> None:
    opt = PrintOptions()
    with pytest.raises(ValidationError):
        opt.width = 10  # type: ignore[misc]


def test_bytes_options() -> None:
    opt = get_bytes_options(30, False)
    assert (opt.width, opt.prefix, opt.symbol, opt.pad_symbol) == (30, "  ", "|", "-")
    assert opt.sum_symbol is None and opt.combined_symbol is None
    opt = get_bytes_options(30, True)
    assert (opt.sum_symbol, opt.combined_symbol) == ("S", "$")
    assert opt.formatter(1024) == "   1.0 KiB"


def test_formatter_names_resolve() -> None:
    assert PrintOptions(formatter="bytes_short").formatter is bytes_str
    assert PrintOptions(formatter="default").formatter is format_number
    assert PrintOptions(formatter=None).formatter is format_number
    assert PrintOptions(formatter="bytes_short").formatter(600000) == "585.9 KiB"
