"""
oneeuro — Adaptive One Euro filtering for noisy scalar signals
==============================================================
Quick start::

    from oneeuro import OneEuroFilter

    filt = OneEuroFilter(120.0, min_cutoff=1.0, beta=0.1)
    for t, v in samples:
        smoothed = filt.filter(v, t)
"""
from oneeuro.config import GROUND_TRUTH, FilterConfig
from oneeuro.core.errors import InvalidParameter
from oneeuro.filters.low_pass import LowPassFilter
from oneeuro.filters.one_euro import OneEuroFilter

__version__ = "0.1.0"
__all__ = [
    "OneEuroFilter", "LowPassFilter", "FilterConfig", "GROUND_TRUTH",
    "InvalidParameter", "__version__",
]
