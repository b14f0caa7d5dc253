"""
Project: oneeuro
File Created: 2026-10-19
File Name: replay.py
Description:
    Drives a filter over recorded or synthetic sequences, one sample at a
    time in order, and checks the output against a reference dataset.

    Usage:
        ref = load_reference(GROUND_TRUTH_URL)
        report = compare_to_reference(ref)
        print(report.max_abs_error, report.passed)
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from oneeuro.config import GROUND_TRUTH, GROUND_TRUTH_ATOL, FilterConfig
from oneeuro.filters.one_euro import OneEuroFilter

logger = logging.getLogger(__name__)


@dataclass
class ReferenceData:
    """Columns of a reference file, all of the same length."""
    timestamps: np.ndarray
    noisy: np.ndarray
    filtered: np.ndarray

    def __len__(self) -> int:
        return len(self.timestamps)


@dataclass
class ReplayReport:
    outputs: np.ndarray
    errors: np.ndarray                     # |output - expected| per sample
    atol: float
    first_mismatch: Optional[int] = None   # Index of first sample above atol

    @property
    def max_abs_error(self) -> float:
        if not len(self.errors):
            return 0.0
        return float(np.max(np.where(np.isnan(self.errors), np.inf, self.errors)))

    @property
    def passed(self) -> bool:
        return self.first_mismatch is None


def replay(
    filt: OneEuroFilter,
    values: Sequence[float],
    timestamps: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """
    Feed ``values`` through ``filt`` in order and collect the outputs.

    Each output depends only on the samples before it. ``filt`` keeps its
    state afterwards, so replays can be chained.
    """
    if timestamps is not None and len(timestamps) != len(values):
        raise ValueError(
            f"Expected {len(values)} timestamps, got {len(timestamps)}"
        )
    out = np.empty(len(values), dtype=float)
    for i, v in enumerate(values):
        t = None if timestamps is None else float(timestamps[i])
        out[i] = filt.filter(float(v), t)
    logger.debug("replayed %d samples, final freq %.4f Hz", len(out), filt.freq)
    return out


def load_reference(source: Union[str, os.PathLike]) -> ReferenceData:
    """
    Read a reference CSV with a header row naming at least the
    ``timestamp``, ``noisy`` and ``filtered`` columns.
    ``source`` may be a local path or an http(s) URL.
    """
    table = np.genfromtxt(source, delimiter=",", names=True, dtype=float)
    table = np.atleast_1d(table)
    missing = {"timestamp", "noisy", "filtered"} - set(table.dtype.names or ())
    if missing:
        raise ValueError(f"Reference data is missing columns: {sorted(missing)}")
    logger.debug("loaded %d reference rows from %s", len(table), source)
    return ReferenceData(
        timestamps=np.asarray(table["timestamp"], dtype=float),
        noisy=np.asarray(table["noisy"], dtype=float),
        filtered=np.asarray(table["filtered"], dtype=float),
    )


def compare_to_reference(
    reference: ReferenceData,
    cfg: FilterConfig = GROUND_TRUTH,
    atol: float = GROUND_TRUTH_ATOL,
) -> ReplayReport:
    """Replays the reference through a fresh filter built from ``cfg``."""
    outputs = replay(cfg.build(), reference.noisy, reference.timestamps)
    errors = np.abs(outputs - reference.filtered)
    # NaN errors count as mismatches
    bad = np.flatnonzero(~(errors <= atol))
    first = int(bad[0]) if len(bad) else None
    if first is not None:
        logger.debug(
            "mismatch at index %d (t=%.4f): got %.6f, expected %.6f",
            first, reference.timestamps[first], outputs[first], reference.filtered[first],
        )
    return ReplayReport(outputs=outputs, errors=errors, atol=atol, first_mismatch=first)


def synthetic_signal(
    duration: float = 2.0,
    freq: float = 120.0,
    noise: float = 0.2,
    seed: Optional[int] = None,
):
    """
    Noisy unit sine at 1 Hz, sampled at ``freq`` Hz from t=0 to ``duration``.

    Returns:
        (timestamps, clean, noisy) arrays.
    """
    if duration < 0:
        raise ValueError(f"duration should be >= 0, got {duration}")
    n = int(math.floor(duration * freq + 1e-9)) + 1
    t = np.arange(n) / freq
    clean = np.sin(2.0 * np.pi * t)
    rng = np.random.default_rng(seed)
    noisy = clean + noise * rng.standard_normal(n)
    return t, clean, noisy
