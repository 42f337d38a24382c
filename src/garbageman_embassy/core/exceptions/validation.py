"""Configuration validation exceptions.

ONLY value validation errors - raised when a candidate configuration value
does not satisfy the option it is assigned to.
"""

from enum import Enum
from typing import Any, Optional

from .base import EmbassyError


def _number_repr(value: Any) -> str:
    """Printable form of a number; very large ints are summarized by size."""
    if isinstance(value, int) and value.bit_length() > 128:
        sign = "-" if value < 0 else ""
        return f"{sign}<{value.bit_length()}-bit integer>"
    return repr(value)


class ValidationErrorKind(str, Enum):
    """Validation failure categories."""
    RANGE = "range"
    PATTERN = "pattern"
    TYPE = "type"
    ENUM = "enum"
    UNKNOWN_KEY = "unknown_key"
    MISSING_REQUIRED = "missing_required"


class ValidationError(EmbassyError):
    """Candidate value rejected by the configuration schema.

    ``path`` is the dotted location of the offending option
    (``advanced.tor-proxy-port``); an empty path designates the root value.
    """

    def __init__(
        self,
        path: str,
        kind: ValidationErrorKind,
        reason: str,
        details: Optional[dict] = None
    ):
        self.path = path
        self.kind = kind
        self.reason = reason

        location = path or "<root>"
        super().__init__(
            f"Invalid value at '{location}': {reason}",
            error_code=f"VALIDATION_{kind.name}",
            details={"path": path, "kind": kind.value, **(details or {})},
        )

    @classmethod
    def out_of_range(cls, path: str, value: Any, range_repr: str) -> "ValidationError":
        """Create exception for a number outside its declared range."""
        return cls(
            path=path,
            kind=ValidationErrorKind.RANGE,
            reason=f"{_number_repr(value)} is outside the range {range_repr}",
            details={"range": range_repr},
        )

    @classmethod
    def wrong_type(cls, path: str, expected: str, value: Any) -> "ValidationError":
        """Create exception for a value of the wrong type."""
        return cls(
            path=path,
            kind=ValidationErrorKind.TYPE,
            reason=f"expected {expected}, got {type(value).__name__}",
            details={"expected": expected},
        )

    @classmethod
    def not_integral(cls, path: str, value: Any) -> "ValidationError":
        """Create exception for a fractional value on an integral option."""
        return cls(
            path=path,
            kind=ValidationErrorKind.TYPE,
            reason=f"{value!r} must be a whole number",
            details={"expected": "integer"},
        )

    @classmethod
    def pattern_mismatch(
        cls,
        path: str,
        pattern: str,
        description: Optional[str] = None
    ) -> "ValidationError":
        """Create exception for a string that does not match its pattern.

        The human-readable pattern description is preferred as the reason;
        the raw value is never included since the option may be masked.
        """
        return cls(
            path=path,
            kind=ValidationErrorKind.PATTERN,
            reason=description or f"must match pattern {pattern}",
            details={"pattern": pattern},
        )

    @classmethod
    def not_a_member(cls, path: str, value: Any, allowed: list) -> "ValidationError":
        """Create exception for a value outside an enum's closed set."""
        return cls(
            path=path,
            kind=ValidationErrorKind.ENUM,
            reason=f"{value!r} is not one of {', '.join(map(str, allowed))}",
            details={"allowed": list(allowed)},
        )

    @classmethod
    def unknown_key(cls, path: str) -> "ValidationError":
        """Create exception for a key the schema does not declare."""
        return cls(
            path=path,
            kind=ValidationErrorKind.UNKNOWN_KEY,
            reason="key is not declared by the configuration schema",
        )

    @classmethod
    def missing_required(cls, path: str) -> "ValidationError":
        """Create exception for a required option without a value."""
        return cls(
            path=path,
            kind=ValidationErrorKind.MISSING_REQUIRED,
            reason="a value is required",
        )

    def to_dict(self) -> dict:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": "ValidationError",
            "error_code": self.error_code,
            "path": self.path,
            "kind": self.kind.value,
            "reason": self.reason,
            "details": self.details,
        }
