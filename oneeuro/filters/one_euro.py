"""
Project: oneeuro
File Created: 2026-10-19
File Name: one_euro.py
Description:
    Implements the One Euro Filter for adaptive low-pass filtering of a
    single scalar signal. The cutoff frequency of the signal stage rises with
    the smoothed speed of the signal: heavy smoothing while the signal is
    still, low latency while it moves fast.
    Reference: Casiez et al., "1€ Filter: A Simple Speed-based Low-pass Filter
    for Noisy Input in Interactive Systems", CHI 2012.
"""

import logging
import math
from typing import TYPE_CHECKING, Optional

from oneeuro.core.errors import InvalidParameter
from oneeuro.filters.low_pass import LowPassFilter

if TYPE_CHECKING:
    from oneeuro.config import FilterConfig

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} should be > 0, got {value}")
    return float(value)


class OneEuroFilter:
    """
    One Euro Filter for a single scalar value.

    Parameters:
        freq:       Sampling frequency (Hz). Re-estimated from timestamps when
                    consecutive increasing timestamps are supplied.
        min_cutoff: Minimum cutoff frequency (Hz). Lower = smoother when still.
        beta:       Speed coefficient (>= 0). Higher = less lag when moving fast.
        d_cutoff:   Cutoff frequency for the derivative signal (Hz).

    Usage:
        filt = OneEuroFilter(120.0, min_cutoff=1.0, beta=0.1)
        smoothed = [filt.filter(v, t) for v, t in zip(values, times)]

    For multi-axis signals, use one filter per axis.
    """

    def __init__(
        self,
        freq: float,
        min_cutoff: float = 1.0,
        beta: float = 0.0,
        d_cutoff: float = 1.0,
    ) -> None:
        self._set_freq(freq)
        self._set_min_cutoff(min_cutoff)
        self._set_beta(beta)
        self._set_d_cutoff(d_cutoff)
        self._initial_freq = self._freq

        self._x = LowPassFilter(self._alpha(self._min_cutoff))
        self._dx = LowPassFilter(self._alpha(self._d_cutoff))
        self._last_time: Optional[float] = None

    @classmethod
    def from_config(cls, cfg: "FilterConfig") -> "OneEuroFilter":
        return cls(cfg.freq, min_cutoff=cfg.min_cutoff, beta=cfg.beta, d_cutoff=cfg.d_cutoff)

    # ------------------------------------------------------------------
    # Validated setters
    # ------------------------------------------------------------------

    def _set_freq(self, freq: float) -> None:
        self._freq = _require_positive("freq", freq)

    def _set_min_cutoff(self, min_cutoff: float) -> None:
        self._min_cutoff = _require_positive("min_cutoff", min_cutoff)

    def _set_beta(self, beta: float) -> None:
        if not math.isfinite(beta) or beta < 0:
            raise InvalidParameter(f"beta should be >= 0, got {beta}")
        self._beta = float(beta)

    def _set_d_cutoff(self, d_cutoff: float) -> None:
        self._d_cutoff = _require_positive("d_cutoff", d_cutoff)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def freq(self) -> float:
        return self._freq

    @property
    def min_cutoff(self) -> float:
        return self._min_cutoff

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def d_cutoff(self) -> float:
        return self._d_cutoff

    @property
    def last_time(self) -> Optional[float]:
        return self._last_time

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def _alpha(self, cutoff: float) -> float:
        te = 1.0 / self._freq
        tau = 1.0 / (2.0 * math.pi * cutoff)
        return 1.0 / (1.0 + tau / te)

    def filter(self, value: float, timestamp: Optional[float] = None) -> float:
        """
        Filter one sample.

        Args:
            value: Raw input sample.
            timestamp: Optional timestamp in seconds. When this and the
                previous timestamp are both present and increasing, the
                sampling frequency is re-estimated from their difference.

        Returns:
            The filtered estimate for this sample.

        Raises:
            InvalidParameter: ``value`` or ``timestamp`` is NaN or infinite.
                The filter state is left untouched.
        """
        if not math.isfinite(value):
            raise InvalidParameter(f"value should be finite, got {value}")
        if timestamp is not None and not math.isfinite(timestamp):
            raise InvalidParameter(f"timestamp should be finite, got {timestamp}")

        # Update the sampling frequency from timestamps
        if self._last_time is not None and timestamp is not None and timestamp > self._last_time:
            freq = 1.0 / (timestamp - self._last_time)
            # Intervals too small to represent as a frequency keep the old one
            if math.isfinite(freq):
                self._set_freq(freq)
                logger.debug("freq re-estimated to %.6f Hz", self._freq)
        # A missing timestamp clears last_time as well
        self._last_time = timestamp

        # Estimate derivative (speed) against the previous filtered value
        if self._x.has_last_raw_value():
            dvalue = (value - self._x.last_filtered_value()) * self._freq
        else:
            dvalue = 0.0

        edvalue = self._dx.filter_with_alpha(dvalue, self._alpha(self._d_cutoff))

        # Adaptive cutoff: faster movement -> higher cutoff -> less smoothing
        cutoff = self._min_cutoff + self._beta * abs(edvalue)

        return self._x.filter_with_alpha(value, self._alpha(cutoff))

    def __call__(self, value: float, timestamp: Optional[float] = None) -> float:
        return self.filter(value, timestamp)

    def reset(self) -> None:
        """Return to the freshly constructed state, including the initial freq."""
        self._freq = self._initial_freq
        self._x.alpha = self._alpha(self._min_cutoff)
        self._x.reset()
        self._dx.alpha = self._alpha(self._d_cutoff)
        self._dx.reset()
        self._last_time = None
