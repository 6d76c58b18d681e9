"""curlyparser exceptions."""

from typing import Iterable, List
from dataclasses import dataclass


class CurlyParserError(Exception):
    """Base class for all parser errors.

    Carries an exit code so the CLI can map any error to a process status.
    """

    exit_code = 2


class FilterAlreadyRegisteredError(CurlyParserError):
    """Raised when registering a filter name that is built-in or already custom."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The given filter name '{name}' is already registered")


class InvalidFilterError(CurlyParserError):
    """Raised when a filter name resolves to neither a custom nor a built-in filter."""

    def __init__(self, name: str, valid_filters: Iterable[str]):
        self.name = name
        self.valid_filters = sorted(valid_filters)
        super().__init__(
            f"Invalid filter '{name}'. Valid filters are: {' '.join(self.valid_filters)}"
        )


class VariableAlreadyRegisteredError(CurlyParserError):
    """Raised on a non-forced registration of an existing default variable."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"The given variable name '{name}' is already registered. "
            f"Use register_force() to override that variable explicitly"
        )


class InvalidVariableError(CurlyParserError):
    """Raised when resolving a default variable that is not registered."""

    def __init__(self, name: str, registered: Iterable[str]):
        self.name = name
        self.registered = list(registered)
        super().__init__(
            f"Invalid default variable '{name}'. "
            f"Valid registered default variables are: {' '.join(self.registered)}"
        )


class UnresolvedVariablesError(CurlyParserError):
    """Raised when tokens remain after resolution and the policy is RAISE."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens = list(tokens)
        super().__init__(
            f"There are unresolved variables in the given string: {self.tokens}"
        )


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class VarsFileValidationError(CurlyParserError):
    """Raised when a variables file fails validation.

    All problems found in the file are collected and reported together,
    allowing the CLI to print each one before exiting.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at '{error.path}': {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
