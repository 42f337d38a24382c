"""Configuration store service.

Owns the current configuration value. Reads and writes are serialized by one
lock and the stored value is only ever replaced whole, so a reader sees either
the previous value or the new fully validated one.
"""

import asyncio
import copy
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Dict, List, Optional

from ....schema import ConfigurationSchema
from ...core.entities.config_applied import ConfigApplied
from ...core.entities.persisted_state import PersistedState
from ...core.protocols.configuration_repository import ConfigurationRepository


logger = logging.getLogger(__name__)

StateTransform = Callable[[Optional[PersistedState]], Awaitable[Optional[PersistedState]]]


def diff_keys(old: Any, new: Any, parent: str = "") -> List[str]:
    """Dotted paths whose values differ between two configuration trees."""
    if not (isinstance(old, Mapping) and isinstance(new, Mapping)):
        return [parent] if old != new and parent else []

    changed = []
    for key in list(new) + [k for k in old if k not in new]:
        path = f"{parent}.{key}" if parent else str(key)
        if key not in old or key not in new:
            changed.append(path)
        elif isinstance(old[key], Mapping) and isinstance(new[key], Mapping):
            changed.extend(diff_keys(old[key], new[key], path))
        elif old[key] != new[key] or type(old[key]) is not type(new[key]):
            changed.append(path)
    return changed


class ConfigurationStore:
    """Get/set contract the host uses against the configuration schema."""

    def __init__(
        self,
        schema: ConfigurationSchema,
        repository: ConfigurationRepository,
        package_version: str,
    ):
        self.schema = schema
        self.repository = repository
        self.package_version = package_version
        self._lock = asyncio.Lock()

    async def get(self) -> Dict[str, Any]:
        """Current configuration value, or the schema default if none was set.

        The first call without a stored value persists the defaults so that
        generated defaults stay stable. Never raises: a failing repository is
        logged and the defaults are returned.
        """
        try:
            async with self._lock:
                state = await self._load_or_initialize()
            return copy.deepcopy(state.config)
        except Exception as e:
            logger.error(f"Failed to load configuration, falling back to defaults: {e}")
            return self.schema.default_value()

    async def get_state(self) -> Optional[PersistedState]:
        """Stored state as-is, without initializing defaults."""
        async with self._lock:
            return await self.repository.load()

    async def set(self, candidate: Any) -> ConfigApplied:
        """Validate and apply a complete configuration value.

        Raises:
            ValidationError: When the candidate is rejected; nothing is stored
        """
        validated = self.schema.validate(candidate)

        async with self._lock:
            previous = await self._load_or_initialize()
            await self.repository.save(PersistedState(version=self.package_version, config=validated))

        changed = diff_keys(previous.config, validated)
        if changed:
            logger.info(f"Configuration updated; changed keys: {', '.join(changed)}")
        else:
            logger.info("Configuration saved without changes")

        return ConfigApplied(changed_keys=changed)

    async def replace(self, config: Dict[str, Any], version: str) -> PersistedState:
        """Install an already migrated value recorded at ``version``."""
        state = PersistedState(version=version, config=copy.deepcopy(config))
        async with self._lock:
            await self.repository.save(state)
        logger.info(f"Configuration replaced at version {version}")
        return state

    async def update(self, transform: StateTransform) -> Optional[PersistedState]:
        """Run a read-modify-write cycle under the store lock.

        ``transform`` receives the stored state (None when unset) and returns
        the state to persist, or None to leave storage untouched. If it raises,
        nothing is written.
        """
        async with self._lock:
            current = await self.repository.load()
            updated = await transform(current)
            if updated is not None:
                await self.repository.save(updated)
            return updated

    async def _load_or_initialize(self) -> PersistedState:
        state = await self.repository.load()
        if state is None:
            state = PersistedState(version=self.package_version, config=self.schema.default_value())
            await self.repository.save(state)
            logger.info("No stored configuration; initialized from schema defaults")
        return state
