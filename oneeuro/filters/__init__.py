from oneeuro.filters.low_pass import LowPassFilter
from oneeuro.filters.one_euro import OneEuroFilter

__all__ = ["LowPassFilter", "OneEuroFilter"]
