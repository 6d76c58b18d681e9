"""
Default variable registry.

Default variables supply values for template variables the caller does not
pass. Each one is a zero-argument producer invoked at resolution time.
"""

import logging
import threading
from typing import Any, Callable, Dict, List

from curlyparser.exceptions import InvalidVariableError, VariableAlreadyRegisteredError


logger = logging.getLogger(__name__)

Producer = Callable[[], Any]


class DefaultVariableRegistry:
    """
    Registry for default variables.

    Names are unique: register() refuses an existing name, register_force()
    replaces it.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._variables: Dict[str, Producer] = {}
        self._lock = threading.RLock()

    def register(self, name: str, producer: Producer) -> Producer:
        """
        Register a default variable.

        Args:
            name: Variable name as used in templates, e.g. {{name}}
            producer: Zero-argument callable returning the value

        Returns:
            The given producer

        Raises:
            VariableAlreadyRegisteredError: If the name is already registered
        """
        name = str(name)
        with self._lock:
            if name in self._variables:
                raise VariableAlreadyRegisteredError(name)
            self._variables[name] = producer
        logger.debug(f"Registered default variable: {name}")
        return producer

    def register_force(self, name: str, producer: Producer) -> Producer:
        """Register a default variable, replacing any existing one of that name."""
        name = str(name)
        with self._lock:
            replaced = name in self._variables
            self._variables[name] = producer
        if replaced:
            logger.debug(f"Replaced default variable: {name}")
        else:
            logger.debug(f"Registered default variable: {name}")
        return producer

    def variable(self, name: str, force: bool = False) -> Callable[[Producer], Producer]:
        """
        Decorator form of register() / register_force().

        Usage:
            @registry.variable("year")
            def current_year():
                return str(date.today().year)
        """
        def decorator(producer: Producer) -> Producer:
            if force:
                return self.register_force(name, producer)
            return self.register(name, producer)
        return decorator

    def unregister(self, name: str) -> bool:
        """
        Remove a default variable.

        Returns:
            True if the variable existed and was removed, False otherwise
        """
        with self._lock:
            removed = self._variables.pop(str(name), None) is not None
        if removed:
            logger.debug(f"Unregistered default variable: {name}")
        return removed

    def resolve(self, name: str) -> str:
        """
        Produce the value of a default variable.

        Args:
            name: Variable name

        Returns:
            Producer result as a string

        Raises:
            InvalidVariableError: If the variable is not registered
        """
        name = str(name)
        producer = self._variables.get(name)
        if producer is None:
            raise InvalidVariableError(name, self.list_variables())
        return str(producer())

    def list_variables(self) -> List[str]:
        """List registered variable names in registration order."""
        with self._lock:
            return list(self._variables.keys())

    def is_registered(self, name: str) -> bool:
        """Check if a default variable is registered."""
        return str(name) in self._variables
