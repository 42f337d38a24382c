"""HTTP reachability probe.

Checks that a downstream web service answers on the address built from the
service host and a port option of the current configuration. Any response
below 500 counts as reachable.
"""

from typing import Optional

import httpx

from ...core.entities.health_check import ProbeContext
from ...core.value_objects.health_result import HealthResult


class WebUrlProbe:
    """Async probe for a web endpoint of the service container."""

    def __init__(
        self,
        label: str,
        port_key: str,
        default_port: int,
        path: str = "/",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.label = label
        self.port_key = port_key
        self.default_port = default_port
        self.path = path
        self._transport = transport

    def url_for(self, context: ProbeContext) -> str:
        port = context.config.get(self.port_key, self.default_port)
        return f"http://{context.service_host}:{port}{self.path}"

    async def __call__(self, context: ProbeContext) -> HealthResult:
        url = self.url_for(context)

        # The registry enforces the time budget by cancelling this coroutine
        async with httpx.AsyncClient(transport=self._transport, timeout=None, follow_redirects=True) as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                return HealthResult.unhealthy(f"{self.label} is unreachable at {url}: {e.__class__.__name__}")

        if response.status_code >= 500:
            return HealthResult.unhealthy(f"{self.label} returned HTTP {response.status_code}")

        return HealthResult.healthy()
