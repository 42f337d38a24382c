"""Migration step entities.

A ``MigrationStep`` is recorded under the version it migrates *from*: its
``up`` moves a value from that version to the next recorded version (or the
current one), and ``down`` reverses it. A ``PlannedStep`` is one transform
selected for a concrete migration, tagged with the boundary it crosses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Union

from ..value_objects.package_version import PackageVersion

ConfigDict = Dict[str, Any]
Transform = Callable[[ConfigDict], Union[ConfigDict, Awaitable[ConfigDict]]]


class MigrationDirection(str, Enum):
    """Direction of a migration."""
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class MigrationStep:
    """Recorded up/down transform pair keyed by source version."""

    version: PackageVersion
    up: Transform
    down: Transform


@dataclass(frozen=True)
class PlannedStep:
    """One transform of a migration plan."""

    boundary: str
    direction: MigrationDirection
    transform: Transform
