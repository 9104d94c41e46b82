"""Offline windowing demo: load a CSV column, window it, write per-window stats.

Usage::

    python -m stridewin.cli input.csv output.csv --chunk-size 32 --read-ahead 4
    python -m stridewin.cli input.csv output.csv --fs 1000 --window-ms 200 --step-ms 100
"""
from __future__ import annotations
import argparse
import logging
from pathlib import Path

import pandas as pd

from stridewin.config import WindowConfig
from stridewin.features import window_summary

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Window a CSV column and write per-window statistics")
    ap.add_argument("input_csv", type=Path)
    ap.add_argument("output_csv", type=Path)
    ap.add_argument("--column", default="value", help="Numeric column to window")
    ap.add_argument("--chunk-size", type=int, default=32, help="Items between window starts")
    ap.add_argument("--read-ahead", type=int, default=0, help="Extra items read per window")
    ap.add_argument("--fs", type=float, help="Sampling rate (Hz); enables --window-ms/--step-ms")
    ap.add_argument("--window-ms", type=float, default=200.0)
    ap.add_argument("--step-ms", type=float, default=100.0)
    return ap


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        if args.fs is not None:
            cfg = WindowConfig.from_ms(args.window_ms, args.step_ms, args.fs)
        else:
            cfg = WindowConfig(chunk_size=args.chunk_size, read_ahead=args.read_ahead)
    except ValueError as e:
        ap.error(str(e))

    df = pd.read_csv(args.input_csv)
    if args.column not in df.columns:
        ap.error(f"CSV must contain '{args.column}' column.")
    try:
        x = df[args.column].to_numpy(float)
    except (TypeError, ValueError):
        ap.error(f"Column '{args.column}' must be numeric.")
    LOGGER.info("Loaded %d samples from %s", len(x), args.input_csv)

    windows = cfg.windows(x)
    LOGGER.info(
        "Windowing with chunk_size=%d read_size=%d -> %d windows",
        cfg.chunk_size, cfg.read_size, len(windows),
    )
    rows = [{"start": start, **window_summary(w)} for start, w in windows.with_offsets()]
    out = pd.DataFrame(rows, columns=["start", "length", "mean", "min", "max", "rms", "mav"])
    args.output_csv.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(args.output_csv, index=False)
    LOGGER.info("Wrote %d rows to %s", len(out), args.output_csv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
