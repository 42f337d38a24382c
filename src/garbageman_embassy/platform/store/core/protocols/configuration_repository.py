"""Configuration repository protocol.

ONLY persistence contract - the host owns the storage medium; the store only
needs to load and atomically save one ``PersistedState``.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.persisted_state import PersistedState


@runtime_checkable
class ConfigurationRepository(Protocol):
    """Persistence backend for the configuration store."""

    async def load(self) -> Optional[PersistedState]:
        """Load the persisted state.

        Returns None when nothing has been stored yet.
        """
        ...

    async def save(self, state: PersistedState) -> None:
        """Replace the persisted state.

        Must be atomic: a concurrent or later load sees either the previous
        state or the new one in full.
        """
        ...
