"""Health check registry service.

ONLY health checking - runs registered probes, each bounded by its own time
budget. Running a check never raises: timeouts become ``unknown("timeout")``
and probe faults become ``unhealthy`` with the fault as the reason.
"""

import asyncio
import logging
import math
import time
from typing import Awaitable, Callable, Dict, List, Optional

from ...core.entities.health_check import HealthCheck, Probe, ProbeContext
from ...core.value_objects.health_result import HealthResult


logger = logging.getLogger(__name__)

ContextLoader = Callable[[], Awaitable[ProbeContext]]


class HealthCheckRegistry:
    """Registry of named health checks."""

    def __init__(self, checks: Optional[List[HealthCheck]] = None):
        self._checks: Dict[str, HealthCheck] = {}
        for check in checks or []:
            self.register(check)

    def register(self, check: HealthCheck) -> None:
        if check.name in self._checks:
            raise ValueError(f"Health check already registered: {check.name}")
        self._checks[check.name] = check

    def probe(self, name: str, timeout_seconds: Optional[float] = None, description: Optional[str] = None):
        """Decorator registering an async probe function under ``name``."""
        def decorator(func: Probe) -> Probe:
            kwargs = {"timeout_seconds": timeout_seconds} if timeout_seconds is not None else {}
            self.register(HealthCheck(name=name, probe=func, description=description, **kwargs))
            return func
        return decorator

    @property
    def names(self) -> List[str]:
        return list(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks

    async def run(
        self,
        name: str,
        timeout_seconds: Optional[float] = None,
        context: Optional[ProbeContext] = None,
        load_context: Optional[ContextLoader] = None,
    ) -> HealthResult:
        """Run one health check.

        Args:
            name: Registered check name
            timeout_seconds: Budget supplied by the host; the check's own
                default applies when omitted
            context: Snapshot handed to the probe
            load_context: Coroutine function producing the snapshot; its time
                counts against the same budget as the probe

        Returns:
            The probe verdict, ``unknown("timeout")`` when the budget runs out
        """
        check = self._checks.get(name)
        if check is None:
            return HealthResult.unknown(f"No health check named '{name}'")

        try:
            budget = float(check.timeout_seconds if timeout_seconds is None else timeout_seconds)
        except (TypeError, ValueError):
            return HealthResult.unknown(f"Invalid time budget: {timeout_seconds!r}")
        if math.isnan(budget):
            return HealthResult.unknown(f"Invalid time budget: {timeout_seconds!r}")
        if budget <= 0:
            return HealthResult.timeout()

        start_time = time.monotonic()
        try:
            result = await asyncio.wait_for(
                self._run_probe(check, context, load_context),
                timeout=None if math.isinf(budget) else budget,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Health check '{name}' timed out after {budget}s")
            return HealthResult.timeout()
        except Exception as e:
            logger.warning(f"Health check '{name}' failed: {e!r}")
            return HealthResult.unhealthy(str(e) or e.__class__.__name__)

        if not isinstance(result, HealthResult):
            return HealthResult.unknown(f"Probe returned {type(result).__name__} instead of a health result")

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.debug(f"Health check '{name}' -> {result.status.value} in {elapsed_ms:.1f}ms")
        return result

    @staticmethod
    async def _run_probe(
        check: HealthCheck,
        context: Optional[ProbeContext],
        load_context: Optional[ContextLoader],
    ) -> HealthResult:
        if load_context is not None:
            context = await load_context()
        return await check.probe(context or ProbeContext())

    async def run_all(
        self,
        timeout_seconds: Optional[float] = None,
        context: Optional[ProbeContext] = None,
    ) -> Dict[str, HealthResult]:
        """Run every check concurrently; a hung probe only costs its own budget."""
        names = list(self._checks)
        results = await asyncio.gather(
            *(self.run(name, timeout_seconds, context) for name in names)
        )
        return dict(zip(names, results))
