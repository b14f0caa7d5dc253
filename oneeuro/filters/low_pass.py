"""
Project: oneeuro
File Created: 2026-10-19
File Name: low_pass.py
Description:
    First-order low-pass (exponential smoothing) stage:

        y[n] = alpha * x[n] + (1 - alpha) * y[n-1]

    The first sample passes through unchanged. The smoothing coefficient can
    be supplied per call, which is how the One Euro filter re-derives it from
    the current sampling frequency on every sample.
"""

import math

from oneeuro.core.errors import InvalidParameter


class LowPassFilter:
    """Stateful exponential smoother with an explicit first-sample policy."""

    def __init__(self, alpha: float, initval: float = 0.0) -> None:
        self._alpha = self._check_alpha(alpha)
        self._initval = initval
        self._last_raw = initval
        self._state = initval
        self._initialized = False

    @staticmethod
    def _check_alpha(alpha: float) -> float:
        if math.isnan(alpha) or alpha <= 0.0 or alpha > 1.0:
            raise InvalidParameter(f"alpha should be in (0, 1], got {alpha}")
        return float(alpha)

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._alpha = self._check_alpha(value)

    def filter(self, value: float) -> float:
        if self._initialized:
            result = self._alpha * value + (1.0 - self._alpha) * self._state
        else:
            result = value
            self._initialized = True
        self._last_raw = value
        self._state = result
        return result

    def filter_with_alpha(self, value: float, alpha: float) -> float:
        """Replace the coefficient (validated first), then filter ``value``."""
        self.alpha = alpha
        return self.filter(value)

    def has_last_raw_value(self) -> bool:
        return self._initialized

    def last_raw_value(self) -> float:
        return self._last_raw

    def last_filtered_value(self) -> float:
        return self._state

    def reset(self) -> None:
        """Forget all samples; the stage returns to its construction seed."""
        self._last_raw = self._initval
        self._state = self._initval
        self._initialized = False
