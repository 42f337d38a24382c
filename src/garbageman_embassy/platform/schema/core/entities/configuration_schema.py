"""Configuration schema entity.

An ordered collection of top-level options. Declaration order is display order
and is kept by every operation that walks the schema.
"""

import copy
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .....core.exceptions import SchemaDefinitionError, ValidationError
from ....options import Option, ObjectConstraints, validate_option, validate_options


class ConfigurationSchema:
    """Static schema the host renders and validates against."""

    def __init__(self, options: Iterable[Option]):
        self._root = ObjectConstraints(options=tuple(options))
        self._check_defaults(self._root.options, "")
        self._defaults = {option.key: option.default_value() for option in self._root.options}

    @staticmethod
    def _check_defaults(options: Tuple[Option, ...], parent: str) -> None:
        """Every default must satisfy its own option, recursively."""
        for option in options:
            path = f"{parent}.{option.key}" if parent else option.key
            if isinstance(option.constraints, ObjectConstraints):
                ConfigurationSchema._check_defaults(option.constraints.options, path)
                continue
            try:
                validate_option(option, option.default, path)
            except ValidationError as e:
                raise SchemaDefinitionError(
                    f"Default for '{path}' violates its own constraints: {e.reason}",
                    details={"path": path},
                ) from e

    @property
    def options(self) -> Tuple[Option, ...]:
        return self._root.options

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._root.keys

    def get(self, key: str) -> Optional[Option]:
        """Find an option by dotted path."""
        constraints = self._root
        option = None
        for part in key.split("."):
            if not isinstance(constraints, ObjectConstraints):
                return None
            option = constraints.get(part)
            if option is None:
                return None
            constraints = option.constraints
        return option

    def describe(self) -> Dict[str, Any]:
        """Serializable schema keyed by option key, in declaration order."""
        return {option.key: option.describe() for option in self._root.options}

    def default_value(self) -> Dict[str, Any]:
        """Full configuration value assembled from every option default."""
        return copy.deepcopy(self._defaults)

    def validate(self, candidate: Any) -> Dict[str, Any]:
        """Validate a complete configuration value.

        Raises:
            ValidationError: For the first failure, annotated with its path
        """
        return validate_options(self._root.options, candidate)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._root.options)

    def __len__(self) -> int:
        return len(self._root.options)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
