"""Derived properties view.

ONLY projection - turns a configuration value into user-facing display values.
Pure and side-effect free; sensitive values are always redacted.
"""

from collections.abc import Mapping
from typing import Any, Dict

from ....options import (
    BooleanConstraints,
    EnumConstraints,
    NumberConstraints,
    ObjectConstraints,
    Option,
    StringConstraints,
    mask_value,
)
from ....schema import ConfigurationSchema


class PropertiesView:
    """Read-only projection of the configuration for the host's properties tab."""

    def __init__(self, schema: ConfigurationSchema):
        self._schema = schema

    def render(self, value: Mapping) -> Dict[str, Any]:
        """Map display names to display values; objects become nested mappings."""
        return self._render_level(self._schema.options, value)

    def render_entries(self, value: Mapping) -> Dict[str, Any]:
        """Render in the host's typed properties format.

        Leaves become ``{"type": "string", "value", "description", "copyable",
        "masked", "qr"}``; objects become ``{"type": "object", "value": {...}}``.
        """
        return self._render_entries(self._schema.options, value)

    def _render_level(self, options, value: Any) -> Dict[str, Any]:
        values = value if isinstance(value, Mapping) else {}
        rendered = {}
        for option in options:
            current = values.get(option.key)
            if isinstance(option.constraints, ObjectConstraints):
                rendered[option.name] = self._render_level(option.constraints.options, current)
            else:
                rendered[option.name] = self.display_value(option, current)
        return rendered

    def _render_entries(self, options, value: Any) -> Dict[str, Any]:
        values = value if isinstance(value, Mapping) else {}
        entries = {}
        for option in options:
            current = values.get(option.key)
            if isinstance(option.constraints, ObjectConstraints):
                entries[option.name] = {
                    "type": "object",
                    "value": self._render_entries(option.constraints.options, current),
                    "description": option.description,
                }
                continue

            copyable = isinstance(option.constraints, StringConstraints) and option.constraints.copyable
            entries[option.name] = {
                "type": "string",
                "value": self.display_value(option, current),
                "description": option.description,
                "copyable": copyable and not option.sensitive,
                "masked": option.sensitive,
                "qr": False,
            }
        return entries

    @staticmethod
    def display_value(option: Option, value: Any) -> str:
        """Format a single leaf value for display."""
        if value is None:
            return "Not set"

        if option.sensitive:
            return mask_value(option, value)

        constraints = option.constraints
        if isinstance(constraints, NumberConstraints):
            text = str(value)
            return f"{text} {constraints.units}" if constraints.units else text
        if isinstance(constraints, BooleanConstraints):
            return "Enabled" if value else "Disabled"
        if isinstance(constraints, EnumConstraints):
            return constraints.label_for(value)
        return str(value)
