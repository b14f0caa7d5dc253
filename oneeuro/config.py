"""
Project: oneeuro
File Created: 2026-10-19
File Name: config.py
Description: Filter parameters and the reference dataset settings.
"""

from dataclasses import dataclass

from oneeuro.filters.one_euro import OneEuroFilter

# Published One Euro ground-truth data (timestamp, noisy, filtered columns)
GROUND_TRUTH_URL: str = "https://raw.githubusercontent.com/casiez/OneEuroFilter/main/groundTruth.csv"
GROUND_TRUTH_ATOL: float = 1e-4   # CSV values are rounded


@dataclass
class FilterConfig:
    """
    Construction parameters for a OneEuroFilter.
    Frequencies are in Hz.
    """
    freq: float
    min_cutoff: float = 1.0
    beta: float = 0.0
    d_cutoff: float = 1.0

    def validate(self) -> None:
        """Raises InvalidParameter if any field is out of range."""
        self.build()

    def build(self) -> OneEuroFilter:
        return OneEuroFilter.from_config(self)


# Parameters the ground-truth data was generated with
GROUND_TRUTH = FilterConfig(freq=120.0, min_cutoff=1.0, beta=0.1, d_cutoff=1.0)
