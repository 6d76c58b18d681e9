"""
curlyparser: resolve {{name|filter}} variables in text.

Usage:
    import curlyparser

    curlyparser.parse("Hello {{name|pascal_case}}", {"name": "big world"})
    # -> 'Hello BigWorld'

The module-level functions share one process-wide filter registry and one
default variable registry. Build a TemplateParser with its own registries to
keep state isolated.
"""

from typing import Any, Callable, List, Mapping, Optional, Set, Union

from .exceptions import (
    CurlyParserError,
    FilterAlreadyRegisteredError,
    InvalidFilterError,
    InvalidVariableError,
    UnresolvedVariablesError,
    VariableAlreadyRegisteredError,
    VarsFileValidationError,
)
from .filters import FilterRegistry
from .defaults import DefaultVariableRegistry
from .variables import (
    DEFAULT_REPLACE_PATTERN,
    DecodedVariable,
    TemplateParser,
    UnresolvedPolicy,
    contains_any_of,
    contains_any_variable,
    decode_variables,
    scan_variables,
)
from .files import parse_file, parse_file_in_place, render_to

__version__ = "1.0.0"

default_filters = FilterRegistry()
default_variables = DefaultVariableRegistry()
default_parser = TemplateParser(filters=default_filters, defaults=default_variables)


def parse(
    text: str,
    variables: Optional[Mapping[str, Any]] = None,
    unresolved: Union[UnresolvedPolicy, str] = UnresolvedPolicy.RAISE,
    replace_pattern: str = DEFAULT_REPLACE_PATTERN
) -> str:
    """Parse a string with the process-wide parser. See TemplateParser.parse()."""
    return default_parser.parse(text, variables, unresolved=unresolved, replace_pattern=replace_pattern)


def register_filter(name: str, fn: Callable[[str], str]) -> Callable[[str], str]:
    return default_filters.register(name, fn)


def process_filter(name: str, value: str) -> str:
    return default_filters.process(name, value)


def valid_filters() -> Set[str]:
    return default_filters.valid_filters()


def is_valid_filter(name: str) -> bool:
    return default_filters.is_valid(name)


def register_default_var(name: str, producer: Callable[[], Any]) -> Callable[[], Any]:
    return default_variables.register(name, producer)


def register_default_var_force(name: str, producer: Callable[[], Any]) -> Callable[[], Any]:
    return default_variables.register_force(name, producer)


def unregister_default_var(name: str) -> bool:
    return default_variables.unregister(name)


def process_default_var(name: str) -> str:
    return default_variables.resolve(name)


def registered_default_vars() -> List[str]:
    return default_variables.list_variables()


def is_registered_default_var(name: str) -> bool:
    return default_variables.is_registered(name)


__all__ = [
    # Main API
    "parse",
    "parse_file",
    "parse_file_in_place",
    "render_to",
    # Filters
    "register_filter",
    "process_filter",
    "valid_filters",
    "is_valid_filter",
    # Default variables
    "register_default_var",
    "register_default_var_force",
    "unregister_default_var",
    "process_default_var",
    "registered_default_vars",
    "is_registered_default_var",
    # Scanning
    "scan_variables",
    "decode_variables",
    "contains_any_variable",
    "contains_any_of",
    # Types
    "TemplateParser",
    "FilterRegistry",
    "DefaultVariableRegistry",
    "UnresolvedPolicy",
    "DecodedVariable",
    "DEFAULT_REPLACE_PATTERN",
    "default_parser",
    "default_filters",
    "default_variables",
    # Errors
    "CurlyParserError",
    "FilterAlreadyRegisteredError",
    "InvalidFilterError",
    "VariableAlreadyRegisteredError",
    "InvalidVariableError",
    "UnresolvedVariablesError",
    "VarsFileValidationError",
]
