"""Procedures the host invokes on the package.

Exposes the fixed hook set (describe-schema, get-config, set-config,
properties, health, migration) as async methods. Every hook returns a
structured ``{"result": ...}`` or ``{"error": ...}`` payload; none of them
raises to the host.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from ..config.constants import ProcedureName
from ..config.settings import EmbassySettings, get_settings
from ..core.exceptions import EmbassyError, MigrationError, ValidationError, create_error_response
from ..package import build_config_schema, build_health_registry, build_migration_ledger
from ..platform.health import HealthCheckRegistry, ProbeContext
from ..platform.migrations import MigrationLedger, PackageVersion
from ..platform.properties import PropertiesView
from ..platform.schema import ConfigurationSchema, SchemaRenderer
from ..platform.store import (
    ConfigurationRepository,
    ConfigurationStore,
    InMemoryConfigurationRepository,
    PersistedState,
    YamlConfigurationRepository,
)
from .models import (
    ErrorResponse,
    GetConfigResponse,
    HealthCheckResponse,
    MigrationResponse,
    PropertiesResponse,
    SetConfigResponse,
)


logger = logging.getLogger(__name__)

ProcedureResult = Dict[str, Any]


def procedure(name: ProcedureName):
    """Turn a hook implementation into a host procedure.

    Package errors become structured error results; anything unexpected is
    logged and reported as an internal error.
    """
    def decorator(func: Callable[..., Awaitable[ProcedureResult]]):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs) -> ProcedureResult:
            try:
                return await func(self, *args, **kwargs)
            except EmbassyError as e:
                logger.warning(f"{name.value} rejected: {e.message}")
                return ErrorResponse.model_validate(create_error_response(e)).to_result()
            except Exception as e:
                logger.exception(f"{name.value} failed unexpectedly")
                return ErrorResponse(
                    error=f"Internal error in {name.value}: {e.__class__.__name__}",
                    error_code="INTERNAL_ERROR",
                ).to_result()
        wrapper.procedure_name = name
        return wrapper
    return decorator


class EmbassyProcedures:
    """Host-facing hook surface of the package."""

    def __init__(
        self,
        schema: ConfigurationSchema,
        store: ConfigurationStore,
        health: HealthCheckRegistry,
        ledger: MigrationLedger,
        settings: EmbassySettings,
    ):
        self.schema = schema
        self.store = store
        self.health_checks = health
        self.ledger = ledger
        self.settings = settings
        self.renderer = SchemaRenderer(schema)
        self.properties_view = PropertiesView(schema)

        self._procedures = {
            ProcedureName.DESCRIBE_SCHEMA: self.describe_schema,
            ProcedureName.GET_CONFIG: self.get_config,
            ProcedureName.SET_CONFIG: self.set_config,
            ProcedureName.PROPERTIES: self.properties,
            ProcedureName.HEALTH: self.health,
            ProcedureName.MIGRATION: self.migration,
        }

    @classmethod
    def create(
        cls,
        settings: Optional[EmbassySettings] = None,
        repository: Optional[ConfigurationRepository] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EmbassyProcedures":
        """Wire the package definition into a procedure surface.

        Args:
            settings: Runtime settings, loaded from the environment by default
            repository: Persistence backend; YAML at ``settings.config_path``
                when set, in-memory otherwise
            transport: Optional httpx transport for the health probes
        """
        settings = settings or get_settings()
        if repository is None:
            if settings.config_path:
                repository = YamlConfigurationRepository(settings.config_path)
            else:
                repository = InMemoryConfigurationRepository()

        schema = build_config_schema(settings.password_length)
        return cls(
            schema=schema,
            store=ConfigurationStore(schema, repository, settings.package_version),
            health=build_health_registry(settings.health_timeout_seconds, transport=transport),
            ledger=build_migration_ledger(settings.package_version),
            settings=settings,
        )

    @property
    def procedure_names(self) -> List[str]:
        return [name.value for name in self._procedures]

    async def dispatch(self, name: str, *args, **kwargs) -> ProcedureResult:
        """Route a host call by hook name."""
        try:
            handler = self._procedures[ProcedureName(name)]
        except ValueError:
            return ErrorResponse(
                error=f"Unknown procedure: {name}",
                error_code="UNKNOWN_PROCEDURE",
                details={"available": self.procedure_names},
            ).to_result()
        return await handler(*args, **kwargs)

    @procedure(ProcedureName.DESCRIBE_SCHEMA)
    async def describe_schema(self) -> ProcedureResult:
        return {"result": self.schema.describe()}

    @procedure(ProcedureName.GET_CONFIG)
    async def get_config(self) -> ProcedureResult:
        config = await self.store.get()
        return GetConfigResponse(
            spec=self.schema.describe(),
            config=config,
            display=self.renderer.render_with_values(config),
        ).to_result()

    @procedure(ProcedureName.SET_CONFIG)
    async def set_config(self, candidate: Any) -> ProcedureResult:
        applied = await self.store.set(candidate)
        return SetConfigResponse(
            signal=applied.signal,
            depends_on=applied.depends_on,
            changed=applied.changed_keys,
        ).to_result()

    @procedure(ProcedureName.PROPERTIES)
    async def properties(self) -> ProcedureResult:
        config = await self.store.get()
        return PropertiesResponse(data=self.properties_view.render_entries(config)).to_result()

    @procedure(ProcedureName.HEALTH)
    async def health(self, name: str, timeout_seconds: Optional[float] = None) -> ProcedureResult:
        """Run one health check; reading the configuration counts against its budget."""
        async def load_context() -> ProbeContext:
            return ProbeContext(config=await self.store.get(), service_host=self.settings.service_host)

        result = await self.health_checks.run(name, timeout_seconds, load_context=load_context)
        return HealthCheckResponse(name=name, status=result.status, reason=result.reason).to_result()

    @procedure(ProcedureName.MIGRATION)
    async def migration(self, from_version: str, to_version: str) -> ProcedureResult:
        """Migrate the stored configuration between package versions.

        Planning happens before the stored value is touched, and the migrated
        value replaces it only after every step succeeded. When the target is
        the installed version, the result must also satisfy the schema.
        """
        plan = self.ledger.plan(from_version, to_version)
        boundary = f"{from_version} -> {to_version}"

        async def migrate(state: Optional[PersistedState]) -> Optional[PersistedState]:
            if state is None:
                return None
            if PackageVersion.parse(state.version) != PackageVersion.parse(from_version):
                logger.warning(
                    f"Stored configuration is recorded at {state.version}, migrating as {from_version}"
                )

            migrated = await self.ledger.apply(state.config, plan)
            if PackageVersion.parse(to_version) == self.ledger.current_version:
                try:
                    migrated = self.schema.validate(migrated)
                except ValidationError as e:
                    raise MigrationError.inconsistent_result(boundary, e.message) from e
            return PersistedState(version=to_version, config=migrated)

        updated = await self.store.update(migrate)
        logger.info(f"Migration {boundary} complete ({len(plan)} step(s))")
        return MigrationResponse(
            configured=updated is not None,
            version=to_version,
            steps=[step.boundary for step in plan],
        ).to_result()
