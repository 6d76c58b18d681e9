"""
Filter registry for named value transforms.

Holds custom filters registered at runtime on top of the built-in
naming-case filters.
"""

import logging
import threading
from typing import Callable, Dict, Optional, Set

from curlyparser.exceptions import FilterAlreadyRegisteredError, InvalidFilterError
from .cases import BUILTIN_CASES


logger = logging.getLogger(__name__)

Filter = Callable[[str], str]


class FilterRegistry:
    """
    Registry for filters.

    Built-in naming-case filters are always present; custom filters are added
    with register() and take priority when a filter is processed. A name can
    only be registered once across built-in and custom filters.
    """

    def __init__(self, builtin_cases: Optional[Dict[str, Filter]] = None):
        """
        Initialize registry with no custom filters.

        Args:
            builtin_cases: Built-in filters to use instead of the naming cases
        """
        self._filters: Dict[str, Filter] = {}
        self._builtin_filters: Dict[str, Filter] = dict(
            BUILTIN_CASES if builtin_cases is None else builtin_cases
        )
        self._lock = threading.RLock()

    def register(self, name: str, fn: Filter) -> Filter:
        """
        Register a custom filter.

        Args:
            name: Filter name as used in templates, e.g. {{var|name}}
            fn: Function applied to the variable value

        Returns:
            The given function

        Raises:
            FilterAlreadyRegisteredError: If the name is built-in or already registered
        """
        name = str(name)
        with self._lock:
            if self.is_valid(name):
                raise FilterAlreadyRegisteredError(name)
            self._filters[name] = fn
        logger.debug(f"Registered filter: {name}")
        return fn

    def filter(self, name: str) -> Callable[[Filter], Filter]:
        """
        Decorator form of register().

        Usage:
            @registry.filter("shout")
            def shout(value):
                return value.upper() + "!"
        """
        def decorator(fn: Filter) -> Filter:
            return self.register(name, fn)
        return decorator

    def unregister(self, name: str) -> bool:
        """
        Remove a custom filter.

        Returns:
            True if a custom filter existed and was removed; built-in filters
            cannot be removed
        """
        with self._lock:
            removed = self._filters.pop(str(name), None) is not None
        if removed:
            logger.debug(f"Unregistered filter: {name}")
        return removed

    def process(self, name: str, value: str) -> str:
        """
        Apply a filter to a value.

        Args:
            name: Filter name
            value: Value to transform

        Returns:
            Transformed value

        Raises:
            InvalidFilterError: If no custom or built-in filter has this name
        """
        name = str(name)
        custom = self._filters.get(name)
        if custom is not None:
            return custom(value)
        builtin = self._builtin_filters.get(name)
        if builtin is not None:
            return builtin(value)
        raise InvalidFilterError(name, self.valid_filters())

    def valid_filters(self) -> Set[str]:
        """
        List all valid filter names.

        Returns:
            Built-in and custom filter names
        """
        with self._lock:
            return set(self._builtin_filters.keys()) | set(self._filters.keys())

    def is_valid(self, name: str) -> bool:
        """Check if a filter name is built-in or registered."""
        return name in self._builtin_filters or name in self._filters

    def custom_filters(self) -> Set[str]:
        """List names of custom filters only."""
        with self._lock:
            return set(self._filters.keys())
