"""Procedure response models.

Payloads the host receives from each hook, serialized by alias to match the
host's field names (``depends-on``, ``error-code``).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config.constants import PROPERTIES_FORMAT_VERSION, RESTART_SIGNAL
from ..platform.health import HealthStatus


class ProcedureModel(BaseModel):
    """Base for every hook payload."""

    model_config = ConfigDict(populate_by_name=True)

    def to_result(self) -> Dict[str, Any]:
        return {"result": self.model_dump(by_alias=True, mode="json")}


class GetConfigResponse(ProcedureModel):
    """Schema plus current values for the host's config form."""

    spec: Dict[str, Any] = Field(..., description="Schema in the host's spec vocabulary")
    config: Dict[str, Any] = Field(..., description="Current configuration value")
    display: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Ordered display schema with sensitive values masked",
    )


class SetConfigResponse(ProcedureModel):
    """Advisory restart signal after a configuration change."""

    signal: str = Field(default=RESTART_SIGNAL)
    depends_on: Dict[str, List[str]] = Field(default_factory=dict, alias="depends-on")
    changed: List[str] = Field(default_factory=list, description="Dotted paths of changed options")


class PropertiesResponse(ProcedureModel):
    """Properties tab payload."""

    version: int = Field(default=PROPERTIES_FORMAT_VERSION)
    data: Dict[str, Any] = Field(default_factory=dict)


class HealthCheckResponse(ProcedureModel):
    """Verdict of one health check."""

    name: str
    status: HealthStatus
    reason: Optional[str] = None


class MigrationResponse(ProcedureModel):
    """Outcome of a version migration."""

    configured: bool = Field(..., description="Whether a stored configuration exists after migrating")
    version: str = Field(..., description="Version the stored configuration now belongs to")
    steps: List[str] = Field(default_factory=list, description="Boundaries crossed, in order")


class ErrorResponse(BaseModel):
    """Structured error handed to the host instead of an exception."""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    error_code: str = Field(..., alias="error-code")
    details: Dict[str, Any] = Field(default_factory=dict)

    def to_result(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
