"""
Project: oneeuro
File Created: 2026-10-19
File Name: errors.py
Description: Error kinds raised by the filters.
"""


class InvalidParameter(ValueError):
    """A constrained filter parameter was set to a value outside its domain."""
