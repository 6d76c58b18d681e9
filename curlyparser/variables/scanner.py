"""
Token scanning and decoding.

Finds {{name|filter}} tokens in text and splits them into name and filter.
"""

import re
from typing import Callable, Container, List

from .types import DecodedVariable


# Any {{...}} span without nested braces
VARIABLE_PATTERN = re.compile(r'{{[^{}]+}}')

# {{name|optional_filter}} with at most one filter segment
DECODER_PATTERN = re.compile(r'{{([^{}|]+)\|?([^{}|]*)}}')


def scan_variables(text: str) -> List[str]:
    """
    Find all tokens in a string.

    Args:
        text: String to scan

    Returns:
        Raw token strings in order of appearance, duplicates included
    """
    return VARIABLE_PATTERN.findall(text)


def _decode_match(match: re.Match) -> DecodedVariable:
    name = match.group(1).strip()
    filter_name = match.group(2).strip()
    return DecodedVariable(name=name, filter=filter_name or None)


def decode_variables(text: str) -> List[DecodedVariable]:
    """
    Decode all tokens in a string.

    Example:
        'The {{my_var|my_filter}} is here' -> [DecodedVariable('my_var', 'my_filter')]

    Args:
        text: String to scan

    Returns:
        Decoded variables in order of appearance
    """
    return [_decode_match(m) for m in DECODER_PATTERN.finditer(text)]


def decode_variable(token: str) -> DecodedVariable:
    """
    Decode a single token such as '{{ name | filter }}'.

    Raises:
        ValueError: If the string contains no decodable token
    """
    match = DECODER_PATTERN.search(token)
    if match is None:
        raise ValueError(f"Not a decodable variable token: {token!r}")
    return _decode_match(match)


def contains_any_variable(text: str) -> bool:
    """Check if at least one token is present in the string."""
    return VARIABLE_PATTERN.search(text) is not None


def contains_any_of(names: Container[str], text: str) -> bool:
    """
    Check if any decoded variable name in the string is one of the given names.

    Args:
        names: Names to look for (a set, list or mapping)
        text: String to scan
    """
    for variable in decode_variables(text):
        if variable.name in names:
            return True
    return False


def substitute_variables(text: str, replacement: Callable[[DecodedVariable], str]) -> str:
    """
    Replace every decodable token in a string.

    Args:
        text: String to process
        replacement: Called with each decoded token, returns its replacement
    """
    return DECODER_PATTERN.sub(lambda m: replacement(_decode_match(m)), text)
