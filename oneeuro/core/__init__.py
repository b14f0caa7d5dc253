"""
Core contracts shared by the filters.

    from oneeuro.core import InvalidParameter
"""
from oneeuro.core.errors import InvalidParameter

__all__ = ["InvalidParameter"]
