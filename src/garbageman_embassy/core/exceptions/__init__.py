"""Exceptions module for garbageman-embassy.

This module provides the complete exception hierarchy, organized by concern.
"""

from .base import (
    EmbassyError,
    create_error_response,
)

from .validation import (
    ValidationError,
    ValidationErrorKind,
)

from .migration import (
    MigrationError,
    MigrationErrorKind,
)

from .schema import SchemaDefinitionError

__all__ = [
    # Base
    "EmbassyError",
    "create_error_response",

    # Validation
    "ValidationError",
    "ValidationErrorKind",

    # Migration
    "MigrationError",
    "MigrationErrorKind",

    # Schema
    "SchemaDefinitionError",
]
