"""Health checks of the Garbageman Nodes Manager package.

- web-ui: the Next.js web interface answers on the configured UI port
"""

from typing import Optional

import httpx

from ..platform.health import HealthCheck, HealthCheckRegistry, WebUrlProbe


def build_health_registry(
    timeout_seconds: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> HealthCheckRegistry:
    """Build the registry of package health checks.

    Args:
        timeout_seconds: Default budget per probe when the host gives none
        transport: Optional httpx transport, used to stub the services in tests
    """
    return HealthCheckRegistry([
        HealthCheck(
            name="web-ui",
            probe=WebUrlProbe("Web UI", port_key="ui-port", default_port=5173, transport=transport),
            timeout_seconds=timeout_seconds,
            description="The web interface is accessible and responding",
        ),
    ])
