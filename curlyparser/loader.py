"""Variables file loader and validation."""

import datetime
from pathlib import Path
from typing import Any, Dict, List, Union
import yaml

from curlyparser.exceptions import ValidationError, VarsFileValidationError


class LiteralLoader(yaml.SafeLoader):
    """YAML loader that keeps boolean-looking scalars ('yes', 'on', 'True') as written."""
    pass


# Remove the implicit bool resolvers so values like 'on', 'no' or 'False' reach
# templates verbatim instead of being normalized to true/false
LiteralLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != 'tag:yaml.org,2002:bool'
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class VarsLoader:
    """Loads a YAML or JSON variables file into a flat name -> string mapping."""

    SCALAR_TYPES = (str, int, float, datetime.date)

    def __init__(self):
        """Initialize loader."""
        self.errors: List[ValidationError] = []

    def load(self, vars_path: Union[str, Path]) -> Dict[str, str]:
        """
        Load and validate a variables file.

        Null values are dropped, other scalars are converted to strings.

        Raises:
            FileNotFoundError: If the file does not exist
            VarsFileValidationError: If the file is not a mapping of scalars
        """
        self.errors = []
        vars_path = Path(vars_path)
        if not vars_path.exists():
            raise FileNotFoundError(f"Variables file not found: {vars_path}")

        try:
            with open(vars_path, 'r', encoding='utf-8') as f:
                data = yaml.load(f, Loader=LiteralLoader)
        except yaml.YAMLError as e:
            self._add_error(f"Failed to load variables file: {e}")
            self._raise_validation_errors()

        if data is None:
            return {}

        if not isinstance(data, dict):
            self._add_error(
                f"Variables file must contain a mapping, got {type(data).__name__}"
            )
            self._raise_validation_errors()

        variables = self._validate_variables(data)

        if self.errors:
            self._raise_validation_errors()

        return variables

    def _validate_variables(self, data: Dict[Any, Any]) -> Dict[str, str]:
        """Validate entries and convert values to strings."""
        variables: Dict[str, str] = {}

        for key, value in data.items():
            name = str(key)
            if not name.strip():
                self._add_error("Variable name must not be empty", path=name)
                continue
            if any(c in name for c in '{}|'):
                self._add_error(
                    "Variable name must not contain '{', '}' or '|'", path=name
                )
                continue
            if value is None:
                continue
            if not isinstance(value, self.SCALAR_TYPES):
                self._add_error(
                    f"Value must be a scalar, got {type(value).__name__}", path=name
                )
                continue
            variables[name] = str(value)

        return variables

    def _add_error(self, message: str, path: str = ""):
        """Add a validation error."""
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        """Raise validation errors collected so far."""
        raise VarsFileValidationError(self.errors)
