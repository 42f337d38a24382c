"""Host procedure surface.

Exported procedures:
- describeSchema: the configuration schema as structured data
- getConfig: schema plus current configuration
- setConfig: validate and apply a new configuration
- properties: masked display values for the properties tab
- health: run one health check within a time budget
- migration: migrate stored configuration between package versions
"""

from .embassy import EmbassyProcedures, procedure
from .models import (
    ErrorResponse,
    GetConfigResponse,
    HealthCheckResponse,
    MigrationResponse,
    PropertiesResponse,
    SetConfigResponse,
)

__all__ = [
    "EmbassyProcedures",
    "procedure",
    "ErrorResponse",
    "GetConfigResponse",
    "HealthCheckResponse",
    "MigrationResponse",
    "PropertiesResponse",
    "SetConfigResponse",
]
