"""Health check registry.

Named probes returning healthy, unhealthy, or unknown, each bounded by a
timeout.
"""

from .core.value_objects.health_result import HealthResult, HealthStatus
from .core.entities.health_check import HealthCheck, Probe, ProbeContext
from .application.services.health_check_registry import HealthCheckRegistry
from .infrastructure.probes.web_url_probe import WebUrlProbe

__all__ = [
    "HealthResult",
    "HealthStatus",
    "HealthCheck",
    "Probe",
    "ProbeContext",
    "HealthCheckRegistry",
    "WebUrlProbe",
]
