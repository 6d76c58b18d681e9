"""
Variable type definitions for the parser.

Defines the decoded token model and the policy applied to tokens that are
still unresolved after substitution.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


DEFAULT_REPLACE_PATTERN = "##\\1##"


class UnresolvedPolicy(str, Enum):
    """What to do with tokens left over after substitution."""
    RAISE = "raise"
    KEEP = "keep"
    REPLACE = "replace"


@dataclass(frozen=True)
class DecodedVariable:
    """
    A token split into its parts.

    Attributes:
        name: Variable name, whitespace-trimmed
        filter: Filter name, whitespace-trimmed, or None when absent or empty
    """
    name: str
    filter: Optional[str] = None
