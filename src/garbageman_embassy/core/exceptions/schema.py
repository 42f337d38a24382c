"""Schema definition exceptions."""

from .base import EmbassyError


class SchemaDefinitionError(EmbassyError):
    """Raised when an option or schema declaration is itself invalid.

    This is a packaging mistake (duplicate keys, a default that violates its
    own constraints, a malformed range) and surfaces when the schema is built.
    """
    pass
