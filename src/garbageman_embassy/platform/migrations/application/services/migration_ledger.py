"""Migration ledger service.

Ordered record of configuration transforms between package versions plus the
current version marker. Plans may span any number of recorded versions; no
adjacency between the source and target versions is assumed.

An empty ledger is the legitimate state of a first release: the only known
version is the current one and migrating from it to itself is a no-op.
"""

import copy
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from .....core.exceptions import MigrationError
from ...core.entities.migration_step import (
    MigrationDirection,
    MigrationStep,
    PlannedStep,
    Transform,
)
from ...core.value_objects.package_version import PackageVersion


logger = logging.getLogger(__name__)


class MigrationLedger:
    """Versioned upgrade/downgrade transforms for configuration data."""

    def __init__(self, steps: Iterable[MigrationStep], current_version: str):
        self.current_version = PackageVersion.parse(current_version)
        self._steps: List[MigrationStep] = sorted(steps, key=lambda step: step.version)

        seen = set()
        for step in self._steps:
            if step.version in seen:
                raise ValueError(f"Duplicate migration recorded for version {step.version}")
            if not step.version < self.current_version:
                raise ValueError(
                    f"Migration source {step.version} must precede current version {self.current_version}"
                )
            seen.add(step.version)

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Dict[str, Transform]], current_version: str) -> "MigrationLedger":
        """Build a ledger from ``{version: {"up": f, "down": g}}``."""
        steps = []
        for version, transforms in mapping.items():
            try:
                up, down = transforms["up"], transforms["down"]
            except KeyError as e:
                raise ValueError(f"Migration for {version} is missing its {e.args[0]!r} transform")
            steps.append(MigrationStep(version=PackageVersion.parse(version), up=up, down=down))
        return cls(steps, current_version)

    @property
    def history(self) -> List[PackageVersion]:
        """Every version the ledger can migrate from or to, ascending."""
        return [step.version for step in self._steps] + [self.current_version]

    def __len__(self) -> int:
        return len(self._steps)

    def _resolve(self, version: str) -> PackageVersion:
        known = [str(v) for v in self.history]
        try:
            parsed = PackageVersion.parse(version)
        except ValueError:
            raise MigrationError.unknown_version(str(version), known)
        if parsed not in self.history:
            raise MigrationError.unknown_version(str(version), known)
        return parsed

    def _next_version(self, index: int) -> PackageVersion:
        if index + 1 < len(self._steps):
            return self._steps[index + 1].version
        return self.current_version

    def plan_upgrade(self, from_version: str, to_version: str) -> List[PlannedStep]:
        """Ascending ``up`` transforms from ``from_version`` to ``to_version``."""
        start, end = self._resolve(from_version), self._resolve(to_version)
        if end < start:
            raise MigrationError.invalid_direction(from_version, to_version, "upgrade")

        return [
            PlannedStep(
                boundary=f"{step.version} -> {self._next_version(i)}",
                direction=MigrationDirection.UP,
                transform=step.up,
            )
            for i, step in enumerate(self._steps)
            if start <= step.version < end
        ]

    def plan_downgrade(self, from_version: str, to_version: str) -> List[PlannedStep]:
        """Descending ``down`` transforms from ``from_version`` to ``to_version``."""
        start, end = self._resolve(from_version), self._resolve(to_version)
        if start < end:
            raise MigrationError.invalid_direction(from_version, to_version, "downgrade")

        planned = [
            PlannedStep(
                boundary=f"{self._next_version(i)} -> {step.version}",
                direction=MigrationDirection.DOWN,
                transform=step.down,
            )
            for i, step in enumerate(self._steps)
            if end <= step.version < start
        ]
        planned.reverse()
        return planned

    def plan(self, from_version: str, to_version: str) -> List[PlannedStep]:
        """Plan in whichever direction the two versions require."""
        if self._resolve(to_version) < self._resolve(from_version):
            return self.plan_downgrade(from_version, to_version)
        return self.plan_upgrade(from_version, to_version)

    async def apply(self, value: Dict[str, Any], plan: List[PlannedStep]) -> Dict[str, Any]:
        """Run a plan against a configuration value.

        Steps work on a private copy; the input is never modified, and the
        first failing step aborts the whole migration.

        Raises:
            MigrationError: STEP_FAILED tagged with the failing boundary
        """
        working = copy.deepcopy(value)

        for step in plan:
            try:
                result = step.transform(working)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                logger.error(f"Migration step {step.boundary} failed: {e!r}")
                raise MigrationError.step_failed(step.boundary, e) from e

            if not isinstance(result, Mapping):
                raise MigrationError.step_failed(
                    step.boundary,
                    TypeError(f"transform returned {type(result).__name__}, expected a mapping"),
                )

            working = dict(result)
            logger.info(f"Applied migration step {step.boundary} ({step.direction.value})")

        return working

    async def migrate(self, value: Dict[str, Any], from_version: str, to_version: str) -> Dict[str, Any]:
        """Plan and apply in one call."""
        return await self.apply(value, self.plan(from_version, to_version))
