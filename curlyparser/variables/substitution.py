"""
Variable substitution implementation.
Handles {{name|filter}} resolution against caller variables, default
variables and filters.
"""

import logging
import re
from typing import Any, Mapping, Optional, Set, Union

from curlyparser.defaults import DefaultVariableRegistry
from curlyparser.exceptions import UnresolvedVariablesError
from curlyparser.filters import FilterRegistry
from .scanner import (
    contains_any_of,
    contains_any_variable,
    decode_variable,
    scan_variables,
    substitute_variables,
)
from .types import DEFAULT_REPLACE_PATTERN, DecodedVariable, UnresolvedPolicy


logger = logging.getLogger(__name__)

# \1 -> variable name, \2 -> filter name
PATTERN_GROUP = re.compile(r'\\(\d)')


class TemplateParser:
    """
    Resolves tokens in template text.

    Value sources, in order of priority:
    - caller variables: {{name}} or {{name|filter}}, filter applied to the value
    - default variables: {{name}}, producer output inserted as is

    Substitution runs in passes. Every pass takes its tokens from the original
    template and replaces them in a working copy, so a caller value may itself
    contain tokens of the template and have them resolved in a later pass.
    Default variable output is never scanned again.
    """

    def __init__(
        self,
        filters: Optional[FilterRegistry] = None,
        defaults: Optional[DefaultVariableRegistry] = None
    ):
        """
        Initialize the parser.

        Args:
            filters: Filter registry to use (a new one if omitted)
            defaults: Default variable registry to use (a new one if omitted)
        """
        self.filters = filters if filters is not None else FilterRegistry()
        self.defaults = defaults if defaults is not None else DefaultVariableRegistry()

    def parse(
        self,
        template: str,
        variables: Optional[Mapping[str, Any]] = None,
        unresolved: Union[UnresolvedPolicy, str] = UnresolvedPolicy.RAISE,
        replace_pattern: str = DEFAULT_REPLACE_PATTERN
    ) -> str:
        """
        Substitute variables in a template string.

        Args:
            template: Text containing {{name|filter}} tokens
            variables: Caller variables; a None value counts as not supplied
            unresolved: Policy for tokens left after substitution
            replace_pattern: Used with UnresolvedPolicy.REPLACE; \\1 is the
                variable name, \\2 the filter name. Empty string removes tokens.

        Returns:
            Template with variables substituted

        Raises:
            InvalidFilterError: If a token names an unknown filter
            InvalidVariableError: If a default variable cannot be resolved
            UnresolvedVariablesError: If tokens remain and the policy is RAISE
        """
        policy = UnresolvedPolicy(unresolved)

        if not contains_any_variable(template):
            return template

        values = {str(k): v for k, v in (variables or {}).items() if v is not None}
        supplied: Set[str] = set(values)

        # A chain of caller values can resolve at most one token per pass
        max_passes = len(set(scan_variables(template))) + 1

        result = template
        passes = 0
        while True:
            passes += 1
            previous = result
            result = self._substitute_pass(template, result, values)

            if not contains_any_of(supplied, template):
                break
            if result == previous or passes >= max_passes:
                break

        logger.debug(f"Substituted variables in {passes} pass(es)")
        return self._apply_policy(result, policy, replace_pattern)

    def _substitute_pass(self, template: str, text: str, values: Mapping[str, Any]) -> str:
        """
        Run one substitution pass.

        Args:
            template: Original template the tokens are taken from
            text: Working copy to substitute into
            values: Caller variables

        Returns:
            Working copy after the pass
        """
        for token in scan_variables(template):
            try:
                variable = decode_variable(token)
            except ValueError:
                # More than one filter segment; left for the unresolved policy
                continue

            if variable.name in values:
                value = self._caller_value(variable, values[variable.name])
            elif self.defaults.is_registered(variable.name):
                value = self.defaults.resolve(variable.name)
            else:
                continue

            text = text.replace(token, value)

        return text

    def _caller_value(self, variable: DecodedVariable, value: Any) -> str:
        """Convert a caller value to a string, applying the token's filter."""
        value = str(value)
        if variable.filter:
            return str(self.filters.process(variable.filter, value))
        return value

    def _apply_policy(self, text: str, policy: UnresolvedPolicy, replace_pattern: str) -> str:
        """
        Dispose of tokens left after substitution.

        Raises:
            UnresolvedVariablesError: If tokens remain and the policy is RAISE
        """
        if policy == UnresolvedPolicy.RAISE:
            remaining = scan_variables(text)
            if remaining:
                raise UnresolvedVariablesError(remaining)
            return text

        if policy == UnresolvedPolicy.REPLACE:
            def expand(variable: DecodedVariable) -> str:
                return PATTERN_GROUP.sub(
                    lambda m: _pattern_group(variable, m.group(1)), replace_pattern
                )
            return substitute_variables(text, expand)

        return text


def _pattern_group(variable: DecodedVariable, group: str) -> str:
    if group == '1':
        return variable.name
    if group == '2':
        return variable.filter or ''
    return ''
