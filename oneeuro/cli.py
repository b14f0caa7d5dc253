"""
Project: oneeuro
File Created: 2026-10-19
File Name: cli.py
Description:
    CLI entry point for the oneeuro package.
    Installed as the `oneeuro` console command via pyproject.toml.

    oneeuro demo       Filter a noisy synthetic sine and report the residuals.
    oneeuro validate   Replay the published ground-truth data and compare.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from oneeuro.config import GROUND_TRUTH, GROUND_TRUTH_ATOL, GROUND_TRUTH_URL, FilterConfig
from oneeuro.core.errors import InvalidParameter


def _rms(x: np.ndarray) -> float:
    return float(np.sqrt(np.mean(np.square(x))))


def run_demo(args: argparse.Namespace) -> int:
    from oneeuro.analysis.replay import replay, synthetic_signal

    cfg = FilterConfig(
        freq=args.freq, min_cutoff=args.min_cutoff, beta=args.beta, d_cutoff=args.d_cutoff
    )
    try:
        filt = cfg.build()
    except InvalidParameter as e:
        print(f"❌ Invalid filter parameters: {e}")
        return 2

    try:
        t, clean, noisy = synthetic_signal(args.duration, args.freq, args.noise, args.seed)
    except ValueError as e:
        print(f"❌ Invalid signal parameters: {e}")
        return 2
    filtered = replay(filt, noisy, t)

    print(f"🔧 {cfg}")
    print(f"📈 {len(t)} samples over {args.duration:.2f}s")
    print(f"   noisy    RMS error: {_rms(noisy - clean):.4f}")
    print(f"   filtered RMS error: {_rms(filtered - clean):.4f}")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    from oneeuro.analysis.replay import compare_to_reference, load_reference

    print(f"📂 Loading reference data from: {args.source}")
    try:
        reference = load_reference(args.source)
    except (OSError, ValueError) as e:
        print(f"❌ Can't read reference data: {e}")
        return 2

    report = compare_to_reference(reference, GROUND_TRUTH, args.atol)
    print(f"   {len(reference)} samples, max abs error {report.max_abs_error:.3e}")
    if report.passed:
        print(f"✅ All samples within {args.atol:g}")
        return 0
    i = report.first_mismatch
    print(
        f"❌ Mismatch at index {i} (t={reference.timestamps[i]:.4f}): "
        f"got {report.outputs[i]:.6f}, expected {reference.filtered[i]:.6f}"
    )
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="oneeuro", description="One Euro filter tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Filter a noisy synthetic sine")
    demo.add_argument("--freq", type=float, default=120.0, help="Sampling frequency (Hz)")
    demo.add_argument("--min-cutoff", type=float, default=1.0, help="Minimum cutoff (Hz)")
    demo.add_argument("--beta", type=float, default=0.1, help="Speed coefficient")
    demo.add_argument("--d-cutoff", type=float, default=1.0, help="Derivative cutoff (Hz)")
    demo.add_argument("--duration", type=float, default=2.0, help="Signal length (s)")
    demo.add_argument("--noise", type=float, default=0.2, help="Noise standard deviation")
    demo.add_argument("--seed", type=int, default=None, help="Random seed")
    demo.set_defaults(func=run_demo)

    validate = sub.add_parser("validate", help="Compare against ground-truth data")
    validate.add_argument("--source", type=str, default=GROUND_TRUTH_URL, help="CSV path or URL")
    validate.add_argument("--atol", type=float, default=GROUND_TRUTH_ATOL, help="Absolute tolerance")
    validate.set_defaults(func=run_validate)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``oneeuro`` console command."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
