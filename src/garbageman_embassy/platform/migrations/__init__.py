"""Migration ledger.

Versioned upgrade/downgrade transforms and the plans that chain them.
"""

from .core.value_objects.package_version import PackageVersion
from .core.entities.migration_step import (
    MigrationDirection,
    MigrationStep,
    PlannedStep,
    Transform,
)
from .application.services.migration_ledger import MigrationLedger

__all__ = [
    "PackageVersion",
    "MigrationDirection",
    "MigrationStep",
    "PlannedStep",
    "Transform",
    "MigrationLedger",
]
