"""Garbageman Embassy - host integration contract for the Garbageman Nodes Manager.

This library declares the package's configuration schema, validates and
applies configuration changes, runs health checks, renders read-only
properties, and carries versioned configuration migrations.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__, __package_version__

from .config import (
    EmbassySettings,
    get_settings,
    ProcedureName,
    REDACTED_PLACEHOLDER,
)

from .core.exceptions import (
    EmbassyError,
    ValidationError,
    ValidationErrorKind,
    MigrationError,
    MigrationErrorKind,
    SchemaDefinitionError,
    create_error_response,
)

from .platform.options import Option, OptionKind, NumberRange, validator_for
from .platform.schema import ConfigurationSchema, SchemaRenderer
from .platform.store import (
    ConfigurationStore,
    ConfigApplied,
    PersistedState,
    InMemoryConfigurationRepository,
    YamlConfigurationRepository,
)
from .platform.health import HealthCheck, HealthCheckRegistry, HealthResult, HealthStatus
from .platform.migrations import MigrationLedger, PackageVersion
from .platform.properties import PropertiesView

from .procedures import EmbassyProcedures

__all__ = [
    "__version__",
    "__package_version__",

    # Configuration
    "EmbassySettings",
    "get_settings",
    "ProcedureName",
    "REDACTED_PLACEHOLDER",

    # Exceptions
    "EmbassyError",
    "ValidationError",
    "ValidationErrorKind",
    "MigrationError",
    "MigrationErrorKind",
    "SchemaDefinitionError",
    "create_error_response",

    # Options and schema
    "Option",
    "OptionKind",
    "NumberRange",
    "validator_for",
    "ConfigurationSchema",
    "SchemaRenderer",

    # Store
    "ConfigurationStore",
    "ConfigApplied",
    "PersistedState",
    "InMemoryConfigurationRepository",
    "YamlConfigurationRepository",

    # Health
    "HealthCheck",
    "HealthCheckRegistry",
    "HealthResult",
    "HealthStatus",

    # Migrations
    "MigrationLedger",
    "PackageVersion",

    # Properties
    "PropertiesView",

    # Procedures
    "EmbassyProcedures",
]
