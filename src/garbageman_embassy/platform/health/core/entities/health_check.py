"""Health check entities.

A health check is a named async probe with its own default time budget. Probes
receive a ``ProbeContext`` snapshot and keep no state between runs.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from .....config.constants import DEFAULT_HEALTH_TIMEOUT_SECONDS
from ..value_objects.health_result import HealthResult


@dataclass(frozen=True)
class ProbeContext:
    """What a probe may look at: current configuration and service address."""

    config: Dict[str, Any] = field(default_factory=dict)
    service_host: str = "localhost"


Probe = Callable[[ProbeContext], Awaitable[HealthResult]]


@dataclass(frozen=True)
class HealthCheck:
    """Named, independently invocable probe."""

    name: str
    probe: Probe
    timeout_seconds: float = DEFAULT_HEALTH_TIMEOUT_SECONDS
    description: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Health check name cannot be empty")
        if self.timeout_seconds <= 0:
            raise ValueError(f"Health check timeout must be positive: {self.timeout_seconds}")
