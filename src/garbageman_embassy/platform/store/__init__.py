"""Configuration store.

Get/set against the schema with host-owned persistence behind a repository
protocol.
"""

from .core.entities.persisted_state import PersistedState
from .core.entities.config_applied import ConfigApplied
from .core.protocols.configuration_repository import ConfigurationRepository
from .application.services.configuration_store import ConfigurationStore, diff_keys
from .infrastructure.repositories.memory_configuration_repository import InMemoryConfigurationRepository
from .infrastructure.repositories.yaml_configuration_repository import YamlConfigurationRepository

__all__ = [
    "PersistedState",
    "ConfigApplied",
    "ConfigurationRepository",
    "ConfigurationStore",
    "diff_keys",
    "InMemoryConfigurationRepository",
    "YamlConfigurationRepository",
]
