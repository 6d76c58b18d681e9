"""
Filter management module.

Provides the filter registry and the built-in naming-case filters.
"""

from .registry import FilterRegistry, Filter
from .cases import BUILTIN_CASES


__all__ = [
    "FilterRegistry",
    "Filter",
    "BUILTIN_CASES",
]
