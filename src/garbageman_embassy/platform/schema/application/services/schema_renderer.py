"""Schema rendering service.

ONLY presentation - merges the static schema with current values into an
ordered display structure. Sensitive values never leave this module unmasked.
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from ....options import Option, ObjectConstraints, mask_value
from ...core.entities.configuration_schema import ConfigurationSchema


class SchemaRenderer:
    """Render a configuration schema together with its current values."""

    def __init__(self, schema: ConfigurationSchema):
        self._schema = schema

    def render_with_values(self, value: Mapping) -> List[Dict[str, Any]]:
        """Build the display schema.

        Args:
            value: Current configuration value; missing keys render as ``None``

        Returns:
            Display entries in declaration order, nested under ``children``
            for object options
        """
        return self._render_level(self._schema.options, value, "")

    def _render_level(self, options, value: Any, parent: str) -> List[Dict[str, Any]]:
        values = value if isinstance(value, Mapping) else {}
        return [self._render_option(option, values.get(option.key), parent) for option in options]

    def _render_option(self, option: Option, value: Any, parent: str) -> Dict[str, Any]:
        path = f"{parent}.{option.key}" if parent else option.key
        entry: Dict[str, Any] = {
            "key": option.key,
            "path": path,
            "type": option.kind.value,
            "name": option.name,
            "description": option.description,
            "warning": option.warning,
            "masked": option.sensitive,
        }

        if isinstance(option.constraints, ObjectConstraints):
            entry["children"] = self._render_level(option.constraints.options, value, path)
        else:
            entry["value"] = mask_value(option, value)

        return entry
