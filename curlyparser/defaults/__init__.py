"""
Default variable module.

Provides the registry of fallback value producers.
"""

from .registry import DefaultVariableRegistry, Producer

__all__ = ['DefaultVariableRegistry', 'Producer']
