"""Version migrations of the Garbageman Nodes Manager package.

The first release records no transforms. When a later release changes the
configuration shape, record a step under the version it migrates from:

    MIGRATIONS = {
        "0.1.0.1": {"up": rename_ports, "down": restore_ports},
    }
"""

from typing import Dict

from ..platform.migrations import MigrationLedger, Transform

MIGRATIONS: Dict[str, Dict[str, Transform]] = {}


def build_migration_ledger(current_version: str) -> MigrationLedger:
    return MigrationLedger.from_mapping(MIGRATIONS, current_version)
