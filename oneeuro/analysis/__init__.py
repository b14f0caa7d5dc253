from oneeuro.analysis.replay import (
    ReferenceData,
    ReplayReport,
    compare_to_reference,
    load_reference,
    replay,
    synthetic_signal,
)

__all__ = [
    "ReferenceData", "ReplayReport",
    "replay", "load_reference", "compare_to_reference", "synthetic_signal",
]
