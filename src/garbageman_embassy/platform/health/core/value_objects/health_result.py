"""Health result value object.

ONLY probe verdicts - tri-state health with a human-readable reason.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class HealthStatus(str, Enum):
    """Health status levels."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class HealthResult:
    """Verdict of one probe run."""

    status: HealthStatus
    reason: Optional[str] = None

    @classmethod
    def healthy(cls) -> "HealthResult":
        return cls(status=HealthStatus.HEALTHY)

    @classmethod
    def unhealthy(cls, reason: str) -> "HealthResult":
        return cls(status=HealthStatus.UNHEALTHY, reason=reason)

    @classmethod
    def unknown(cls, reason: str) -> "HealthResult":
        return cls(status=HealthStatus.UNKNOWN, reason=reason)

    @classmethod
    def timeout(cls) -> "HealthResult":
        return cls.unknown("timeout")

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "reason": self.reason}
