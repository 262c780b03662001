import argparse
import sys
from pathlib import Path
from typing import List, Union

from barhist.binning import create_linear, create_log
from barhist.config import BinningConfig, HistogramConfig, PrintOptions, get_bytes_options, load_config
from barhist.entities import summarize
from barhist.events import HistogramBuiltEvent, HistogramRenderedEvent, emit_event
from barhist.render import print_histogram


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print a text histogram of numbers read one per line")
    p.add_argument("--input", type=str, default="-", help="Path to a file of samples, one per line ('-' = stdin)")
    p.add_argument("--config", type=str, default="", help="Optional YAML config (binning + display)")
    p.add_argument("--buckets", type=int, default=0, help="Bucket count (overrides config; 0 = config/default)")
    p.add_argument("--log", action="store_true", help="Logarithmic binning")
    p.add_argument("--width", type=int, default=0, help="Chart width in columns (overrides config)")
    p.add_argument("--bytes", action="store_true", help="Format values as byte sizes")
    p.add_argument("--sum", action="store_true", help="Overlay the per-bucket sum track")
    p.add_argument("--events-out", type=str, default="", help="Optional JSONL path for histogram events")
    return p.parse_args()


def parse_number(text: str) -> Union[int, float]:
    try:
        return int(text)
    except ValueError:
        return float(text)


def read_samples(path: str) -> List[Union[int, float]]:
    if path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        in_path = Path(path)
        assert in_path.exists(), f"input file not found: {in_path}"
        lines = in_path.read_text(encoding="utf-8").splitlines()
    return [parse_number(line.strip()) for line in lines if line.strip()]


def resolve_config(args: argparse.Namespace) -> HistogramConfig:
    cfg = load_config(args.config) if args.config else HistogramConfig()
    binning = cfg.binning
    overrides = {}
    if args.buckets:
        overrides["bucket_count"] = args.buckets
    if args.log:
        overrides["mode"] = "log"
    if overrides:
        binning = BinningConfig(**{**binning.model_dump(), **overrides})
    display = cfg.display
    width = args.width or display.width
    if args.bytes:
        display = get_bytes_options(width, print_sum=args.sum)
    else:
        update = {"width": width}
        if args.sum:
            update.update({"sum_symbol": display.sum_symbol or "S", "combined_symbol": display.combined_symbol or "$"})
        display = PrintOptions(**{**display.model_dump(), **update})
    return HistogramConfig(version=cfg.version, binning=binning, display=display)


def main() -> None:
    args = parse_args()
    cfg = resolve_config(args)
    samples = read_samples(args.input)
    build = create_log if cfg.binning.mode == "log" else create_linear
    hist = build(samples, cfg.binning.bucket_count)
    lines = print_histogram(sys.stdout, hist, cfg.display)

    if args.events_out:
        sink = Path(args.events_out)
        summary = summarize(hist)
        emit_event(HistogramBuiltEvent.from_summary(summary, process_name="render_histogram"), sink_path=sink, echo=False)
        emit_event(
            HistogramRenderedEvent(
                subject_id=str(summary.ecs_id),
                process_name="render_histogram",
                width=cfg.display.width,
                lines=lines,
                sum_track=cfg.display.sum_symbol is not None,
            ),
            sink_path=sink,
            echo=False,
        )


if __name__ == "__main__":
    main()
