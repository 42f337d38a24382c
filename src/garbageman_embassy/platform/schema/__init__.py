"""Configuration schema.

The ordered option collection plus its presentation with current values.
"""

from .core.entities.configuration_schema import ConfigurationSchema
from .application.services.schema_renderer import SchemaRenderer

__all__ = [
    "ConfigurationSchema",
    "SchemaRenderer",
]
