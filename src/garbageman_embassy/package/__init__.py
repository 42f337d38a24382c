"""Garbageman Nodes Manager package definition.

The concrete schema, health checks, and migration ledger the procedures serve.
"""

from .config_spec import build_config_schema, generate_random_password
from .health_checks import build_health_registry
from .migrations import MIGRATIONS, build_migration_ledger

__all__ = [
    "build_config_schema",
    "generate_random_password",
    "build_health_registry",
    "MIGRATIONS",
    "build_migration_ledger",
]
