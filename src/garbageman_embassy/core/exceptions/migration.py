"""Migration exceptions.

ONLY migration errors - raised when a version migration cannot be planned or
one of its steps fails.
"""

from enum import Enum
from typing import Optional

from .base import EmbassyError


class MigrationErrorKind(str, Enum):
    """Migration failure categories."""
    UNKNOWN_VERSION = "unknown_version"
    STEP_FAILED = "step_failed"
    INVALID_DIRECTION = "invalid_direction"
    INCONSISTENT_RESULT = "inconsistent_result"


class MigrationError(EmbassyError):
    """Version migration could not be completed.

    ``boundary`` names the version transition that failed, e.g.
    ``0.1.0.1 -> 0.2.0.0``.
    """

    def __init__(
        self,
        kind: MigrationErrorKind,
        detail: str,
        boundary: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.kind = kind
        self.detail = detail
        self.boundary = boundary

        message = f"Migration failed ({kind.value}): {detail}"
        if boundary:
            message += f" [{boundary}]"

        super().__init__(
            message,
            error_code=f"MIGRATION_{kind.name}",
            details={"kind": kind.value, "boundary": boundary, **(details or {})},
        )

    @classmethod
    def unknown_version(cls, version: str, known: list) -> "MigrationError":
        """Create exception for a version absent from the ledger history."""
        return cls(
            kind=MigrationErrorKind.UNKNOWN_VERSION,
            detail=f"version {version} is not recorded in the migration ledger",
            details={"version": version, "known_versions": list(known)},
        )

    @classmethod
    def step_failed(cls, boundary: str, cause: BaseException) -> "MigrationError":
        """Create exception for a transform that raised."""
        return cls(
            kind=MigrationErrorKind.STEP_FAILED,
            detail=str(cause) or cause.__class__.__name__,
            boundary=boundary,
            details={"cause": cause.__class__.__name__},
        )

    @classmethod
    def invalid_direction(cls, from_version: str, to_version: str, direction: str) -> "MigrationError":
        """Create exception for an upgrade that goes down or a downgrade that goes up."""
        return cls(
            kind=MigrationErrorKind.INVALID_DIRECTION,
            detail=f"cannot {direction} from {from_version} to {to_version}",
            boundary=f"{from_version} -> {to_version}",
        )

    @classmethod
    def inconsistent_result(cls, boundary: str, reason: str) -> "MigrationError":
        """Create exception for a migrated value the target schema rejects."""
        return cls(
            kind=MigrationErrorKind.INCONSISTENT_RESULT,
            detail=reason,
            boundary=boundary,
        )
