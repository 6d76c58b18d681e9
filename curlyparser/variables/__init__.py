"""
Variable substitution module.
Implements token scanning and the template resolution engine.
"""

from .types import DEFAULT_REPLACE_PATTERN, DecodedVariable, UnresolvedPolicy
from .scanner import (
    contains_any_of,
    contains_any_variable,
    decode_variable,
    decode_variables,
    scan_variables,
)
from .substitution import TemplateParser

__all__ = [
    'DEFAULT_REPLACE_PATTERN',
    'DecodedVariable',
    'UnresolvedPolicy',
    'contains_any_of',
    'contains_any_variable',
    'decode_variable',
    'decode_variables',
    'scan_variables',
    'TemplateParser',
]
