"""In-memory configuration repository.

Keeps the state as a single reference swapped on save. Used by tests and when
the host keeps persistence to itself.
"""

import copy
from typing import Optional

from ...core.entities.persisted_state import PersistedState


class InMemoryConfigurationRepository:
    """In-memory implementation of ConfigurationRepository protocol."""

    def __init__(self, initial: Optional[PersistedState] = None):
        self._state = copy.deepcopy(initial)
        self.save_count = 0

    async def load(self) -> Optional[PersistedState]:
        return copy.deepcopy(self._state)

    async def save(self, state: PersistedState) -> None:
        self._state = copy.deepcopy(state)
        self.save_count += 1
